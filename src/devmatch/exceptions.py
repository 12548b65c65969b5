"""Exceptions raised by the devmatch engine."""

from __future__ import annotations


class DevmatchError(Exception):
    """Base class for all devmatch errors."""


class InvalidCriteriaError(DevmatchError, ValueError):
    """Raised when a criterion table cannot be used for scoring."""


class InvalidLimitError(DevmatchError, ValueError):
    """Raised when a result limit is not a positive integer."""


__all__ = ["DevmatchError", "InvalidCriteriaError", "InvalidLimitError"]
