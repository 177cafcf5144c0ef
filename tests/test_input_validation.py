"""Tests for client name validation."""
import pytest

from app.shared.utils.input_validation import InputValidator


@pytest.mark.parametrize("name", [
    "Acme Mobile",
    "São Paulo Kiosk",
    "billing-service",
    "Dr. Who",
    "partner_app",
    "Acme (EU)",
    "a" * 100,
])
def test_valid_names(name):
    assert InputValidator.validate_name(name) == (True, None)


@pytest.mark.parametrize("name", ["", "   ", "a" * 101])
def test_invalid_names(name):
    is_valid, error = InputValidator.validate_name(name)

    assert not is_valid
    assert error
