# amcore/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from amcore.core.tokens import Atom, Sequence

StateID = int
Cell = Any

# Callback Types
Syntax = Callable[["Atom | Sequence"], bool]
Semantic = Callable[["Atom | Sequence"], Any]
Thunk = Callable[[], Any]
