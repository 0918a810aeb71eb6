"""Tests for the exit_codes module."""

from xdgdir.core.services.error_codes import ErrorCode
from xdgdir.core.services.exit_codes import (
    EX_FAILURE,
    EX_SOFTWARE,
    exit_code_for_error,
)


def test_exit_code_for_error_mappings():
    """Verify that every ErrorCode member maps to the expected exit code."""
    expected_mappings = {
        ErrorCode.HOME_NOT_SET: EX_FAILURE,
        ErrorCode.NOT_ABSOLUTE_PATH: EX_FAILURE,
        ErrorCode.UNKNOWN_ERROR: EX_SOFTWARE,
    }

    for code in ErrorCode:
        assert code in expected_mappings, f"ErrorCode.{code.name} is not covered in tests"

    for code, expected_exit_code in expected_mappings.items():
        assert exit_code_for_error(code) == expected_exit_code


def test_resolution_failures_exit_with_one():
    assert exit_code_for_error(ErrorCode.HOME_NOT_SET) == 1
    assert exit_code_for_error(ErrorCode.NOT_ABSOLUTE_PATH) == 1


def test_exit_code_for_error_fallback():
    """Verify the fallback behavior for unmapped error codes."""
    assert exit_code_for_error(None) == EX_FAILURE  # type: ignore
    assert exit_code_for_error("NOT_A_CODE") == EX_FAILURE  # type: ignore
