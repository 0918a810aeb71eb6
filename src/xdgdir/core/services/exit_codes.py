"""Exit code mapping for the xdgdir CLI."""

from __future__ import annotations

import os

from xdgdir.core.services.error_codes import ErrorCode

EX_SUCCESS = 0
EX_FAILURE = 1
EX_SOFTWARE = getattr(os, "EX_SOFTWARE", 70)


def exit_code_for_error(error_code: ErrorCode) -> int:
    """Map ErrorCode to a process exit status.

    Every resolution failure exits with status 1; anything unrecognised is
    treated as a resolution failure as well.
    """
    mapping = {
        ErrorCode.HOME_NOT_SET: EX_FAILURE,
        ErrorCode.NOT_ABSOLUTE_PATH: EX_FAILURE,
        ErrorCode.UNKNOWN_ERROR: EX_SOFTWARE,
    }
    return mapping.get(error_code, EX_FAILURE)
