import logging
import warnings

import pytest

from deprecate_parameters import emission


def test_warn_points_at_caller(record):
    emission.warn("message", DeprecationWarning)
    assert len(record) == 1
    assert str(record[0].message) == "message"
    assert record[0].filename == __file__


def test_emit_stacklevel(record):
    def library_function():
        emission.emit("old", DeprecationWarning, stacklevel=2)

    library_function()
    assert record[0].filename == __file__
    assert record[0].category is DeprecationWarning


def test_emit_respects_filters():
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("ignore")
        emission.emit("ignored", DeprecationWarning)
    assert len(record) == 0

    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("default")
        for _ in range(3):
            emission.emit("once per location", UserWarning)
    assert len(record) == 1


def test_emit_error_filter():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with pytest.raises(FutureWarning, match="escalated"):
            emission.emit("escalated", FutureWarning)


def test_emit_swallows_emitter_failures(caplog):
    def broken(message, category, stacklevel):
        raise RuntimeError("no channel")

    with caplog.at_level(logging.WARNING, logger="deprecate_parameters.emission"):
        emission.emit("lost", DeprecationWarning, emitter=broken)

    assert "Could not emit DeprecationWarning 'lost'" in caplog.text


def test_log_emitter(caplog):
    logger = logging.getLogger("deprecate_parameters.tests.log_emitter")
    emitter = emission.log_emitter(logger, level="info")

    with caplog.at_level(logging.INFO, logger=logger.name):
        emission.emit("x parameter is deprecated", DeprecationWarning, emitter=emitter)

    (log_record,) = caplog.records
    assert log_record.levelno == logging.INFO
    assert log_record.getMessage() == "DeprecationWarning: x parameter is deprecated"


def test_log_emitter_invalid_level():
    with pytest.raises(ValueError, match="Unsupported logging level"):
        emission.log_emitter(logging.getLogger(__name__), level="loud")
