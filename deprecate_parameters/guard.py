from __future__ import annotations

import functools
from collections.abc import Callable
from logging import getLogger
from typing import Optional

from deprecate_parameters.emission import Emitter, emit
from deprecate_parameters.errors import InvalidSpecification, UnknownParameterName
from deprecate_parameters.registry import DeprecationRegistry, DeprecationSpec
from deprecate_parameters.signature import SignatureDescriptor

logger = getLogger(__name__)


class DeprecationGuard:
    r"""
    Warn whenever deprecated parameters of a callable are explicitly used.

    The guard holds a :class:`deprecate_parameters.registry.DeprecationRegistry` and
    wraps callables with :meth:`wrap`. At each call of the wrapped callable, the
    arguments are bound against the parameters of the target, one warning is
    emitted per deprecated parameter actually supplied by the caller, and the target
    is then called with the original arguments.

    A parameter only satisfied by its default value does not trigger a warning.
    Values absorbed by ``*args`` are never checked, while names absorbed by
    ``**kwargs`` are.

    :Examples:

        >>> import warnings
        >>> from deprecate_parameters import DeprecationGuard
        >>> guard = DeprecationGuard("z")
        >>> power = guard.wrap(lambda x, y, z=None: x**y)
        >>> power(2, 3)
        8
        >>> with warnings.catch_warnings(record=True) as record:
        ...     warnings.simplefilter("always")
        ...     power(2, 3, 3.14)
        ...     str(record[0].message)
        8
        'z parameter is deprecated'

    :param str, Mapping spec: name of the deprecated parameter, or mapping from
        deprecated parameter names to warning messages.
    :param str, None reason: warning message when ``spec`` is a single name. Defaults
        to ``"<name> parameter is deprecated"``.
    :param type category: warning class used for each diagnostic.
    :param bool strict: if ``True``, :meth:`wrap` fails when a deprecated name cannot
        be supplied to the target. Otherwise such names are silently never matched.
    :param Callable, None emitter: emitter receiving the diagnostics, see
        :mod:`deprecate_parameters.emission`. Defaults to :func:`warnings.warn`.
    """

    def __init__(
        self,
        spec: DeprecationSpec,
        reason: str | None = None,
        category: type[Warning] = DeprecationWarning,
        *,
        strict: bool = False,
        emitter: Optional[Emitter] = None,
    ):
        if not (isinstance(category, type) and issubclass(category, Warning)):
            raise InvalidSpecification(
                f"The warning category must be a Warning subclass, got {category!r}."
            )
        self.registry = DeprecationRegistry.from_spec(spec, reason)
        self.category = category
        self.strict = strict
        self.emitter = emitter

    def wrap(self, func: Callable) -> Callable:
        r"""
        Return a wrapper of ``func`` that warns about deprecated parameters.

        ``func`` itself is left untouched, the wrapper has the same call contract.

        :param Callable func: function, method or callable object to wrap.
        :raises UninspectableCallable: if the parameters of ``func`` cannot be determined.
        :raises UnknownParameterName: if ``strict`` is set and a deprecated name cannot
            be supplied to ``func``.
        """
        signature = SignatureDescriptor.from_callable(func)
        if self.strict:
            for name in self.registry:
                if not signature.accepts_name(name):
                    raise UnknownParameterName(name, signature.name)

        logger.debug(
            "Guarding %s against deprecated parameters %s",
            signature.name,
            list(self.registry),
        )

        registry = self.registry
        category = self.category
        emitter = self.emitter

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            binding = signature.bind(args, kwargs)
            for name in binding.supplied_names():
                if name in registry:
                    emit(registry[name], category, stacklevel=2, emitter=emitter)
            return func(*args, **kwargs)

        wrapper.__signature__ = signature.to_signature()

        # Stacked guards expose the union of their registries, outermost last
        inherited = getattr(func, "__deprecated_parameters__", None)
        if inherited:
            wrapper.__deprecated_parameters__ = DeprecationRegistry(
                {**inherited, **registry}
            )
        else:
            wrapper.__deprecated_parameters__ = registry
        return wrapper

    __call__ = wrap

    def __repr__(self):
        return (
            f"{type(self).__name__}({dict(self.registry)!r}, "
            f"category={self.category.__name__})"
        )


def configure(
    spec: DeprecationSpec,
    default_reason: str | None = None,
    warning_kind: type[Warning] = DeprecationWarning,
) -> DeprecationGuard:
    r"""
    Create a :class:`DeprecationGuard`.

    :param str, Mapping spec: name of the deprecated parameter, or mapping from
        names to messages.
    :param str, None default_reason: message for the single name form.
    :param type warning_kind: warning class used for each diagnostic.
    :raises InvalidSpecification: if ``spec`` is not a name or a non-empty mapping.
    """
    return DeprecationGuard(spec, default_reason, warning_kind)


def deprecated_parameter(
    spec: DeprecationSpec,
    reason: str | None = None,
    category: type[Warning] = DeprecationWarning,
    *,
    strict: bool = False,
    emitter: Optional[Emitter] = None,
) -> Callable[[Callable], Callable]:
    r"""
    Decorator to deprecate one or several parameters of a function or a method.

    :Examples:

        >>> from deprecate_parameters import deprecated_parameter
        >>> @deprecated_parameter("key", "custom reason")
        ... def sort_pair(a, b, *, key=None):
        ...     return sorted([a, b], key=key)

        >>> @deprecated_parameter({"x": "use u", "y": "use v"})
        ... def collect(*args, **kwargs):
        ...     return args, kwargs

    :param str, Mapping spec: name of the deprecated parameter, or mapping from
        deprecated parameter names to warning messages.
    :param str, None reason: warning message when ``spec`` is a single name.
    :param type category: warning class used for each diagnostic.
    :param bool strict: fail at decoration time on names the function cannot accept.
    :param Callable, None emitter: emitter receiving the diagnostics.
    """
    return DeprecationGuard(
        spec, reason, category, strict=strict, emitter=emitter
    ).wrap
