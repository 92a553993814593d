from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

from deprecate_parameters.errors import InvalidSpecification


def default_message(name: str) -> str:
    """Message used when a single deprecated parameter is given without a reason."""
    return f"{name} parameter is deprecated"


@dataclass(frozen=True)
class SingleParameter:
    r"""
    One deprecated parameter, with an optional custom message.

    :param str name: name of the deprecated parameter.
    :param str, None message: warning message. If ``None``, the message is
        ``"<name> parameter is deprecated"``.
    """

    name: str
    message: str | None = None


@dataclass(frozen=True)
class ParameterMap:
    r"""
    Several deprecated parameters, each with its own message.

    :param Mapping entries: mapping from parameter name to warning message.
    """

    entries: Mapping[str, str] = field(default_factory=dict)


DeprecationSpec = Union[str, Mapping[str, str], SingleParameter, ParameterMap]


class DeprecationRegistry(Mapping):
    r"""
    Ordered and immutable mapping from deprecated parameter names to warning messages.

    Use :meth:`from_spec` to build a registry from the user facing forms: a single
    parameter name or a mapping of names to messages.

    :Examples:

        >>> from deprecate_parameters.registry import DeprecationRegistry
        >>> registry = DeprecationRegistry.from_spec("z")
        >>> registry["z"]
        'z parameter is deprecated'
        >>> list(DeprecationRegistry.from_spec({"x": "use u", "y": "use v"}))
        ['x', 'y']

    :param Mapping entries: mapping from parameter name to message. Keys must be
        non-empty strings and values strings.
    """

    def __init__(self, entries: Mapping[str, str]):
        if not entries:
            raise InvalidSpecification(
                "The mapping of deprecated parameters must not be empty."
            )
        for name, message in entries.items():
            if not isinstance(name, str) or not name:
                raise InvalidSpecification(
                    f"Deprecated parameter names must be non-empty strings, got {name!r}."
                )
            if not isinstance(message, str):
                raise InvalidSpecification(
                    f"The message of deprecated parameter '{name}' must be a string, got {type(message).__name__}."
                )
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_spec(
        cls, spec: DeprecationSpec, reason: str | None = None
    ) -> DeprecationRegistry:
        r"""
        Build a registry from a deprecation specification.

        :param str, Mapping, SingleParameter, ParameterMap spec: a parameter name, a
            mapping from names to messages, or one of the explicit variants.
        :param str, None reason: message for the single parameter form. Ignored when
            ``spec`` is a mapping, whose entries already carry a message.
        :raises InvalidSpecification: if ``spec`` is of another type or is empty.
        """
        return cls(_resolve(spec, reason).entries)

    def __getitem__(self, name: str) -> str:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"{type(self).__name__}({dict(self._entries)!r})"


def _resolve(spec: DeprecationSpec, reason: str | None) -> ParameterMap:
    if isinstance(spec, str):
        spec = SingleParameter(spec, reason)

    if isinstance(spec, SingleParameter):
        message = (
            spec.message if spec.message is not None else default_message(spec.name)
        )
        return ParameterMap({spec.name: message})
    elif isinstance(spec, ParameterMap):
        return spec
    elif isinstance(spec, Mapping):
        return ParameterMap(spec)
    else:
        raise InvalidSpecification(
            f"Expected a parameter name or a mapping of parameter names to messages, got {type(spec).__name__}."
        )
