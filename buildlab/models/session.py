"""Session state labels."""

from __future__ import annotations
from enum import Enum


class SessionState(str, Enum):
    EMPTY = "empty"
    HAS_RESULT_ONLY = "has_result_only"
    HAS_RESULT_AND_COPIES = "has_result_and_copies"
