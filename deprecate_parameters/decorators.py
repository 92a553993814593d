from __future__ import annotations

import functools
import inspect

from deprecate_parameters.emission import emit
from deprecate_parameters.registry import DeprecationRegistry


def alias_message(old: str, new: str) -> str:
    return (
        f"Argument '{old}' is deprecated and will be removed in a future version. "
        f"Use '{new}' instead."
    )


def deprecated_alias(**aliases):
    """
    Decorator to support deprecated argument names in a class or a function.

    A value passed under a deprecated name is forwarded under the new name, after a
    :class:`DeprecationWarning`. The aliases are listed with their messages in the
    ``__deprecated_parameters__`` attribute of the wrapper.

    :param **aliases: mapping of old_name='new_name'
    :raises ValueError: if an alias points to itself or to another deprecated name.

    """
    for old, new in aliases.items():
        if old == new or new in aliases:
            raise ValueError(
                f"Invalid alias '{old}' -> '{new}': the new name must be a different, non deprecated name."
            )
    registry = DeprecationRegistry(
        {old: alias_message(old, new) for old, new in aliases.items()}
    )

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            for old, new in aliases.items():
                if old in kwargs:
                    if new in kwargs:
                        raise TypeError(f"Cannot specify both '{old}' and '{new}'")
                    emit(registry[old], DeprecationWarning, stacklevel=2)
                    kwargs[new] = kwargs.pop(old)
            return func(*args, **kwargs)

        signature = _signature_of(func)
        if signature is not None:
            wrapper.__signature__ = _with_aliases(signature, aliases)

        inherited = getattr(func, "__deprecated_parameters__", None)
        wrapper.__deprecated_parameters__ = (
            DeprecationRegistry({**inherited, **registry}) if inherited else registry
        )
        return wrapper

    return decorator


def deprecated_function(func=None, *, reason: str | None = None):
    """
    Decorator to mark a function or method as deprecated.

    It can be used bare, ``@deprecated_function``, or with a reason appended to the
    message, ``@deprecated_function(reason="Use g instead.")``.
    """
    if func is None:
        return functools.partial(deprecated_function, reason=reason)

    message = f"Function '{func.__name__}' is deprecated and will be removed in a future version."
    if reason:
        message = f"{message} {reason}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        emit(message, DeprecationWarning, stacklevel=2)
        return func(*args, **kwargs)

    signature = _signature_of(func)
    if signature is not None:
        wrapper.__signature__ = signature

    return wrapper


def deprecated_class(cls):
    """Decorator to mark a class as deprecated, the warning is emitted on instantiation."""

    old_init = cls.__init__

    @functools.wraps(old_init)
    def new_init(self, *args, **kwargs):
        emit(
            f"Class '{cls.__name__}' is deprecated and will be removed in a future version.",
            DeprecationWarning,
            stacklevel=2,
        )
        old_init(self, *args, **kwargs)

    signature = _signature_of(old_init)
    if signature is not None:
        new_init.__signature__ = signature

    cls.__init__ = new_init

    return cls


def _signature_of(func):
    try:
        return inspect.signature(func, follow_wrapped=False)
    except (ValueError, TypeError):
        return None


def _with_aliases(signature, aliases):
    """Add the deprecated names as keyword-only parameters, before any ``**kwargs``."""
    parameters = list(signature.parameters.values())
    names = {p.name for p in parameters}
    insert_at = len(parameters)
    if parameters and parameters[-1].kind is inspect.Parameter.VAR_KEYWORD:
        insert_at -= 1
    extra = [
        inspect.Parameter(old, inspect.Parameter.KEYWORD_ONLY, default=None)
        for old in aliases
        if old not in names
    ]
    return signature.replace(
        parameters=parameters[:insert_at] + extra + parameters[insert_at:]
    )
