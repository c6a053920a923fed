import pytest
from lrukit.exceptions import ValidationError
from lrukit.utils.validation import (
    validate_capacity,
    validate_log_level,
    validate_log_format
)

def test_validate_capacity():
    validate_capacity(0)
    validate_capacity(1)
    validate_capacity(10_000)
    with pytest.raises(ValidationError):
        validate_capacity(-1)
    with pytest.raises(ValidationError):
        validate_capacity(2.0)
    with pytest.raises(ValidationError):
        validate_capacity("3")
    with pytest.raises(ValidationError):
        validate_capacity(None)
    with pytest.raises(ValidationError):
        validate_capacity(False)

def test_validate_log_level():
    validate_log_level("DEBUG")
    validate_log_level("warning")
    with pytest.raises(ValidationError):
        validate_log_level("VERBOSE")
    with pytest.raises(ValidationError):
        validate_log_level(10)

def test_validate_log_format():
    validate_log_format("json")
    validate_log_format("text")
    with pytest.raises(ValidationError):
        validate_log_format("xml")
