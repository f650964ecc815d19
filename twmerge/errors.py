"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TWUserError.

Token input never raises: an unclassifiable token is a defined result
("unknown"), not an error. Programming errors and bugs should NOT inherit
from TWUserError; they will propagate with full tracebacks.
"""

from __future__ import annotations


class TWUserError(Exception):
    """
    Base class for all user-facing errors in twmerge.

    These errors indicate problems that the user can fix:
    a missing config file, a malformed config value, etc.
    """
    pass


__all__ = ["TWUserError"]
