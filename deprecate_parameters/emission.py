r"""
Channel through which deprecation diagnostics are surfaced.

An emitter is any callable with the signature of :func:`warnings.warn` restricted to
``(message, category, stacklevel)``, where ``stacklevel`` counts frames from the
caller of the emitter. The default emitter, :func:`warn`, forwards to
:func:`warnings.warn` so that the application keeps full control over filtering and
deduplication through the :mod:`warnings` filters.
"""

from __future__ import annotations

import logging
import threading
import warnings
from logging import Logger, getLogger
from typing import Callable, Optional

logger = getLogger(__name__)

Emitter = Callable[[str, type, int], None]

_lock = threading.Lock()


def warn(message: str, category: type[Warning], stacklevel: int = 1) -> None:
    r"""
    Emit a warning with :func:`warnings.warn`.

    Calls are serialized since the state of the :mod:`warnings` module is shared by
    the whole process.

    :param str message: warning message.
    :param type category: warning class, e.g. :class:`DeprecationWarning`.
    :param int stacklevel: frame the warning is attributed to, ``1`` being the caller
        of this function.
    """
    with _lock:
        warnings.warn(message, category, stacklevel=stacklevel + 1)


def log_emitter(target: Logger, level: str = "WARNING") -> Emitter:
    r"""
    Build an emitter that writes diagnostics to a logger instead of the warnings module.

    :param logging.Logger target: logger receiving the diagnostics.
    :param str level: logging level name used for each record.
    """
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unsupported logging level: {level}")

    def emit_to_log(message: str, category: type, stacklevel: int = 1) -> None:
        target.log(
            number,
            "%s: %s",
            category.__name__,
            message,
            stacklevel=stacklevel + 1,
        )

    return emit_to_log


def emit(
    message: str,
    category: type[Warning],
    stacklevel: int = 1,
    emitter: Optional[Emitter] = None,
) -> None:
    r"""
    Surface a diagnostic without letting a faulty emitter interrupt the caller.

    If the emitter raises the warning itself, as :func:`warnings.warn` does under an
    ``"error"`` filter, the exception propagates. Any other failure is logged and
    ignored.

    :param str message: diagnostic message.
    :param type category: warning class.
    :param int stacklevel: frame the diagnostic is attributed to, ``1`` being the
        caller of this function.
    :param Callable, None emitter: emitter to use, defaults to :func:`warn`.
    """
    if emitter is None:
        emitter = warn
    try:
        emitter(message, category, stacklevel + 1)
    except category:
        raise
    except Exception:
        logger.warning(
            "Could not emit %s %r", category.__name__, message, exc_info=True
        )

