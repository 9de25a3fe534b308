# amcore/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Distinguishable failure kinds, shared by exceptions and diagnostic results."""

    DUPLICATE_CONCEPT = "duplicate_concept"
    TAPE_RANGE = "tape_range"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    NUMERIC_PARSE = "numeric_parse"
    INVALID_IDENTIFIER = "invalid_identifier"
    VALIDATION = "validation"
    INTERNAL = "internal"


class AMError(Exception):
    """
    Base exception class for errors raised by the abstract machine core.
    """

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DuplicateConceptError(AMError):
    """
    Raised when a concept name is registered twice in the same Language.
    """

    kind = ErrorKind.DUPLICATE_CONCEPT


class TapeRangeError(AMError):
    """
    Raised when a requested tape order meets or exceeds the order ceiling.
    """

    kind = ErrorKind.TAPE_RANGE


class CapacityExceededError(AMError):
    """
    Raised when growing the tape would push its order past the ceiling.
    """

    kind = ErrorKind.CAPACITY_EXCEEDED


class NumericParseError(AMError):
    """
    Raised when a cell literal cannot be converted to the tape's element kind.
    """

    kind = ErrorKind.NUMERIC_PARSE


class InvalidIdentifierError(AMError):
    """
    Raised when a state identifier is missing or malformed.
    """

    kind = ErrorKind.INVALID_IDENTIFIER


class ValidationError(AMError):
    """
    Raised when validation detects a broken Language invariant.
    """

    kind = ErrorKind.VALIDATION
