"""
Core package: tokens, result values, languages, the tape, and the machine.
"""

from .errors import (
    AMError,
    CapacityExceededError,
    DuplicateConceptError,
    ErrorKind,
    InvalidIdentifierError,
    NumericParseError,
    TapeRangeError,
    ValidationError,
)
from .tokens import Atom, Buffer, Sequence, Token, to_token
from .values import (
    EMPTY,
    Boolean,
    CellKind,
    Diagnostic,
    Empty,
    Numeric,
    Reference,
    ResultValue,
    Symbol,
    Text,
    result_of,
)
from .language import Concept, Evaluation, Language
from .resources import Resource
from .substrate import Substrate
from .machine import AbstractMachine, ErrorRecoveryStrategy
from .states import LoadResult, StateKind, StateRegistry, state_id

__all__ = [
    # Errors
    "AMError",
    "CapacityExceededError",
    "DuplicateConceptError",
    "ErrorKind",
    "InvalidIdentifierError",
    "NumericParseError",
    "TapeRangeError",
    "ValidationError",
    # Tokens
    "Atom",
    "Buffer",
    "Sequence",
    "Token",
    "to_token",
    # Results and cells
    "EMPTY",
    "Boolean",
    "CellKind",
    "Diagnostic",
    "Empty",
    "Numeric",
    "Reference",
    "ResultValue",
    "Symbol",
    "Text",
    "result_of",
    # Components
    "Concept",
    "Evaluation",
    "Language",
    "Resource",
    "Substrate",
    "AbstractMachine",
    "ErrorRecoveryStrategy",
    "LoadResult",
    "StateKind",
    "StateRegistry",
    "state_id",
]
