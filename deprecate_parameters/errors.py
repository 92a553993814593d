class DeprecationConfigError(Exception):
    """Base class for errors raised while configuring or wrapping a deprecation guard."""


class InvalidSpecification(DeprecationConfigError, ValueError):
    """The deprecation specification is neither a parameter name nor a non-empty mapping."""


class UninspectableCallable(DeprecationConfigError, TypeError):
    """The parameter list of the target callable cannot be determined."""


class UnknownParameterName(DeprecationConfigError, ValueError):
    r"""
    A deprecated parameter name does not match any parameter of the target callable.

    Only raised by guards created with ``strict=True``.

    :param str name: the offending parameter name.
    :param str target: qualified name of the target callable.
    """

    def __init__(self, name: str, target: str):
        super().__init__(
            f"'{name}' is not a parameter of {target}() and cannot be deprecated."
        )
        self.name = name
        self.target = target


class ArgumentBindingError(TypeError):
    r"""
    The arguments of a call do not match the parameters of the wrapped callable.

    It derives from :class:`TypeError` so that callers observe the same kind of error
    as with the unwrapped callable.

    :param str target: qualified name of the target callable.
    :param TypeError cause: the error raised by :meth:`inspect.Signature.bind`.
    """

    def __init__(self, target: str, cause: TypeError):
        super().__init__(f"{target}(): {cause}")
        self.target = target
