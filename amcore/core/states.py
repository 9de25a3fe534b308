# amcore/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import hashlib
import logging
from enum import IntEnum
from typing import Dict, FrozenSet, List, NamedTuple, Optional

from amcore.core.charclasses import is_alphabetic, is_digits
from amcore.core.errors import InvalidIdentifierError
from amcore.core.language import Language
from amcore.core.resources import Resource
from amcore.core.tokens import Buffer, Sequence, Token, TokenLike, lower, text_of, to_token
from amcore.core.values import Reference
from amcore.interfaces.types import StateID

logger = logging.getLogger(__name__)

START_STATE: StateID = 0

LOAD_COMMANDS = ("load", "ld")
UNLOAD_COMMANDS = ("unload", "ud")
CALL_COMMANDS = ("call", "cl")
STATE_COMMANDS = ("state", "se")
ACCEPT_MARKERS = ("accept", "at")
NAME_MARKERS = ("name", "ne")


class StateKind(IntEnum):
    ERROR = -1
    NORMAL = 0
    ACCEPTING = 1


class LoadResult(NamedTuple):
    kind: StateKind
    state_id: StateID


def state_id(token: TokenLike) -> StateID:
    """Stable 64-bit identifier of a state-identifying token."""
    digest = hashlib.blake2b(text_of(token).encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")


class StateRegistry:
    """
    Named automaton states keyed by the hash of their identifier, an accept
    set, and a history stack used to fall back when the current state is
    unloaded. State 0 is the implicit start state and is never stored.
    """

    def __init__(self) -> None:
        self._language = Language(character_concepts=False)
        self._states: Dict[StateID, Token] = {}
        self._labels: Dict[StateID, str] = {}
        self._accepting: set = set()
        self._history: List[StateID] = []
        self._current: StateID = START_STATE
        self._register_concepts()

    def _register_concepts(self) -> None:
        lang = self._language
        lang.interpret_command("load", LOAD_COMMANDS, lambda p: Reference(self.load(p)), requires_argument=True)
        lang.interpret_command("unload", UNLOAD_COMMANDS, self.unload, strip=False)
        lang.interpret_command("call", CALL_COMMANDS, self.call, requires_argument=True)
        lang.interpret_command("state", STATE_COMMANDS, lambda p: self._current)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def current(self) -> StateID:
        return self._current

    @property
    def history(self) -> List[StateID]:
        return list(self._history)

    @property
    def accepting(self) -> FrozenSet[StateID]:
        return frozenset(self._accepting)

    @property
    def states(self) -> Dict[StateID, Token]:
        return dict(self._states)

    def is_accepting(self, sid: StateID) -> bool:
        return sid in self._accepting

    def label(self, sid: StateID) -> Optional[str]:
        """The name given to a state with a ``name <id>`` clause, if any."""
        return self._labels.get(sid)

    def as_resource(self) -> Resource:
        return Resource(language=self._language, payload=self)

    def load(self, program: TokenLike) -> LoadResult:
        """
        Register a state from ``[accept] [name <label>] <identifier>``.

        :return: The state's kind and id, or ``(ERROR, 0)`` when no usable
            identifier remains.
        """
        buffer = Buffer(program)
        kind = StateKind.NORMAL
        if lower(self._language.lick(buffer.text)).text in ACCEPT_MARKERS:
            kind = StateKind.ACCEPTING
            self._language.munch(buffer)
        label = None
        try:
            if buffer and lower(self._language.lick(buffer.text)).text in NAME_MARKERS:
                self._language.munch(buffer)
                label = self._take_alphabetic(buffer)
            identifier = self._take_alphabetic(buffer)
            if buffer:
                raise InvalidIdentifierError(f"Unexpected text after identifier: {buffer.text!r}")
        except InvalidIdentifierError as e:
            logger.debug("Load of %r rejected: %s", text_of(program), e.message)
            return LoadResult(StateKind.ERROR, 0)

        sid = state_id(identifier)
        self._states[sid] = to_token(program)
        if label is not None:
            self._labels[sid] = label.text
        if kind is StateKind.ACCEPTING:
            self._accepting.add(sid)
        logger.debug("Loaded state %s as %d (%s)", identifier.text, sid, kind.name)
        return LoadResult(kind, sid)

    def unload(self, program: TokenLike = "") -> StateID:
        """
        Remove a state. ``program`` starts with the command word; with no
        identifier after it the current state is targeted. When the current
        state is removed, the previous one is restored from history.

        :return: The new current state, or 0 if the target is unknown.
        """
        buffer = Buffer(program)
        self._language.munch(buffer)
        if not buffer:
            target = self._current
        else:
            target = self._resolve(self._language.munch(buffer))
            if target is None:
                return 0
        if target not in self._states:
            return 0
        del self._states[target]
        self._accepting.discard(target)
        self._labels.pop(target, None)
        if self._current == target:
            self._current = self._history.pop() if self._history else START_STATE
        return self._current

    def call(self, program: TokenLike) -> StateID:
        """
        Make a loaded state current, remembering the previous one on the history stack.

        :return: The new current state, or 0 if the target is unknown.
        """
        target = self._resolve(self._language.lick(program))
        if target is None or target not in self._states:
            return 0
        self._history.append(self._current)
        self._current = target
        return target

    @staticmethod
    def _resolve(identifier: Sequence) -> Optional[StateID]:
        if not identifier:
            return None
        if is_alphabetic(identifier):
            return state_id(identifier)
        if is_digits(identifier):
            return int(identifier.text)
        return None

    def _take_alphabetic(self, buffer: Buffer) -> Sequence:
        identifier = self._language.munch(buffer)
        if not identifier or not is_alphabetic(identifier):
            raise InvalidIdentifierError(
                f"Expected an alphabetic identifier, got {identifier.text!r}", {"identifier": identifier.text}
            )
        return identifier
