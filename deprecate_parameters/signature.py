from __future__ import annotations

import enum
import inspect
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from deprecate_parameters.errors import ArgumentBindingError, UninspectableCallable


class ParameterKind(enum.Enum):
    """Passing convention of a parameter."""

    POSITIONAL_ONLY = inspect.Parameter.POSITIONAL_ONLY
    POSITIONAL_OR_KEYWORD = inspect.Parameter.POSITIONAL_OR_KEYWORD
    VAR_POSITIONAL = inspect.Parameter.VAR_POSITIONAL
    KEYWORD_ONLY = inspect.Parameter.KEYWORD_ONLY
    VAR_KEYWORD = inspect.Parameter.VAR_KEYWORD

    @property
    def is_collector(self) -> bool:
        return self in (ParameterKind.VAR_POSITIONAL, ParameterKind.VAR_KEYWORD)


@dataclass(frozen=True)
class ParameterDescriptor:
    r"""
    Name, passing convention and default value of a single parameter.

    :param str name: parameter name.
    :param ParameterKind kind: passing convention.
    :param Any default: default value, or :attr:`ParameterDescriptor.empty` if the
        parameter has none.
    """

    empty = inspect.Parameter.empty

    name: str
    kind: ParameterKind
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not self.empty


@dataclass(frozen=True)
class InvocationBinding:
    r"""
    Arguments explicitly supplied in one call.

    :param dict arguments: declared parameter name to value, in declaration order.
        Collectors are not included.
    :param dict extra_keywords: entries absorbed by the variadic keyword collector,
        in call order.
    """

    arguments: dict[str, Any] = field(default_factory=dict)
    extra_keywords: dict[str, Any] = field(default_factory=dict)

    def supplied_names(self) -> Iterator[str]:
        """Yield the supplied names: declared parameters first, then absorbed keywords."""
        seen = set()
        for name in (*self.arguments, *self.extra_keywords):
            if name not in seen:
                seen.add(name)
                yield name


class SignatureDescriptor:
    r"""
    Static description of the parameter list of a callable.

    It is built once, usually with :meth:`from_callable`, and then used to bind the
    arguments of each call without applying defaults, so that only the arguments
    that the caller actually supplied are reported.

    :param list parameters: the :class:`ParameterDescriptor` of each parameter, in
        declaration order.
    :param str name: name of the described callable, used in error messages.
    """

    def __init__(self, parameters, name: str = "<callable>"):
        self.parameters: tuple[ParameterDescriptor, ...] = tuple(parameters)
        self.name = name
        self._signature = inspect.Signature(
            [
                inspect.Parameter(p.name, p.kind.value, default=p.default)
                for p in self.parameters
            ]
        )

    @classmethod
    def from_callable(cls, func: Callable) -> SignatureDescriptor:
        r"""
        Describe the parameters of ``func``.

        :param Callable func: function, method, class or callable object.
        :raises UninspectableCallable: if the signature of ``func`` is not available,
            e.g. for some builtins implemented in C.
        """
        name = getattr(func, "__qualname__", None) or type(func).__qualname__
        if not callable(func):
            raise UninspectableCallable(f"{name} object is not callable.")
        try:
            # describe the callable itself, not the function a wrapper delegates to
            signature = inspect.signature(func, follow_wrapped=False)
        except (ValueError, TypeError) as e:
            raise UninspectableCallable(
                f"Cannot determine the parameters of {name}: {e}"
            ) from e

        descriptor = cls(
            [
                ParameterDescriptor(p.name, ParameterKind(p.kind), p.default)
                for p in signature.parameters.values()
            ],
            name=name,
        )
        # keep annotations for wrappers advertising this signature
        descriptor._signature = signature
        return descriptor

    def __iter__(self) -> Iterator[ParameterDescriptor]:
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def __getitem__(self, name: str) -> ParameterDescriptor:
        for p in self.parameters:
            if p.name == name:
                return p
        raise KeyError(name)

    @property
    def accepts_extra_keywords(self) -> bool:
        return any(p.kind is ParameterKind.VAR_KEYWORD for p in self.parameters)

    def accepts_name(self, name: str) -> bool:
        """Whether ``name`` could be supplied as an argument of a call."""
        for p in self.parameters:
            if p.name == name and not p.kind.is_collector:
                return True
        return self.accepts_extra_keywords

    def bind(self, args: tuple, kwargs: Mapping[str, Any]) -> InvocationBinding:
        r"""
        Match the arguments of a call against the parameters.

        Defaults are not applied. Values absorbed by the variadic positional
        collector are dropped since they cannot be related to a name.

        :param tuple args: positional arguments of the call.
        :param Mapping kwargs: keyword arguments of the call.
        :raises ArgumentBindingError: if the arguments do not fit the parameters.
        """
        try:
            bound = self._signature.bind(*args, **kwargs)
        except TypeError as e:
            raise ArgumentBindingError(self.name, e) from e

        arguments = {}
        extra_keywords = {}
        for p in self.parameters:
            if p.name not in bound.arguments:
                continue
            if p.kind is ParameterKind.VAR_KEYWORD:
                extra_keywords = dict(bound.arguments[p.name])
            elif p.kind is not ParameterKind.VAR_POSITIONAL:
                arguments[p.name] = bound.arguments[p.name]
        return InvocationBinding(arguments, extra_keywords)

    def to_signature(self) -> inspect.Signature:
        """Return the equivalent :class:`inspect.Signature`."""
        return self._signature

    def __repr__(self):
        return f"{type(self).__name__}({self.name}{self._signature})"
