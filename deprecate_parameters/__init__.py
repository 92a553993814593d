from .__about__ import *

__all__ = [
    "__title__",
    "__summary__",
    "__url__",
    "__version__",
    "__author__",
    "__license__",
]

from .errors import (
    DeprecationConfigError,
    InvalidSpecification,
    UninspectableCallable,
    UnknownParameterName,
    ArgumentBindingError,
)

__all__ += [
    "DeprecationConfigError",
    "InvalidSpecification",
    "UninspectableCallable",
    "UnknownParameterName",
    "ArgumentBindingError",
]

from .registry import DeprecationRegistry, SingleParameter, ParameterMap

__all__ += ["DeprecationRegistry", "SingleParameter", "ParameterMap"]

from .signature import SignatureDescriptor, ParameterDescriptor, ParameterKind

__all__ += ["SignatureDescriptor", "ParameterDescriptor", "ParameterKind"]

from .guard import DeprecationGuard, configure, deprecated_parameter

__all__ += ["DeprecationGuard", "configure", "deprecated_parameter"]

from .decorators import deprecated_alias, deprecated_function, deprecated_class

__all__ += ["deprecated_alias", "deprecated_function", "deprecated_class"]

from . import emission

__all__ += ["emission"]
