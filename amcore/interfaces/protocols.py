# amcore/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from amcore.core.errors import AMError
    from amcore.core.language import Language
    from amcore.core.resources import Resource
    from amcore.core.tokens import Token
    from amcore.core.values import ResultValue


@runtime_checkable
class Interpreter(Protocol):
    """
    Anything that owns a Language and can be attached to a machine.

    Runtime Invariants:
    - The Language is private to its owner; resources never share one.
    - ``as_resource`` always returns a Resource wrapping the same Language.
    """

    @property
    def language(self) -> "Language": ...

    def as_resource(self) -> "Resource": ...


@runtime_checkable
class MachineHook(Protocol):
    """
    Hook protocol for dispatch observers. Both methods are optional at runtime;
    the HookManager only calls what a hook defines.
    """

    def on_dispatch(self, command: "Token", result: "ResultValue") -> None: ...

    def on_error(self, error: "AMError") -> None: ...


@runtime_checkable
class ValueCodec(Protocol):
    """
    Capability a tape element kind must offer: text conversion in both
    directions plus the blank value every fresh cell holds.
    """

    default: Any

    def from_text(self, text: str) -> Any: ...

    def to_text(self, value: Any) -> str: ...

    def make_buffer(self, size: int) -> Any: ...

    def is_blank(self, value: Any) -> bool: ...
