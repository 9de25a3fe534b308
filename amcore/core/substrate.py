# amcore/core/substrate.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Dict

from amcore.core.errors import CapacityExceededError, NumericParseError, TapeRangeError
from amcore.core.language import Language
from amcore.core.resources import Resource
from amcore.core.tokens import Buffer, Sequence
from amcore.core.values import DEFAULT_CELL_KIND, INT64_MAX, INT64_MIN, CellKind, Diagnostic, ResultValue, Text, result_of
from amcore.interfaces.protocols import ValueCodec
from amcore.interfaces.types import Cell

logger = logging.getLogger(__name__)

DEFAULT_ORDER = 16
MAX_ORDER = 64

WRITE_COMMANDS = ("write", "we")
RENDER_RADIUS = 4


class Substrate:
    """
    A doubly-infinite tape with a movable head. Logical position ``p`` is
    stored at buffer index ``p + size // 2``; the buffer always holds
    ``2 ** order`` cells and doubles whenever the head walks off either end.
    """

    def __init__(
        self,
        kind: CellKind = DEFAULT_CELL_KIND,
        order: int = DEFAULT_ORDER,
        max_order: int = MAX_ORDER,
    ) -> None:
        """
        :param kind: Element kind stored in every cell; fixed for the tape's lifetime.
        :param order: Initial tape order (size is ``2 ** order``).
        :param max_order: Exclusive ceiling on the order, the host integer width.
        :raises TapeRangeError: If ``order`` is not below ``max_order``.
        """
        self._kind = kind
        self._codec: ValueCodec = kind.codec
        self._max_order = max_order
        self._tape = self.make_tape(order)
        self._order = order
        self._head = 0
        self._language = Language(character_concepts=False)
        self._register_concepts()

    def _register_concepts(self) -> None:
        lang = self._language
        lang.interpret_nullary("read", lambda: self._cell_result(self.read()))
        lang.interpret_nullary("head", lambda: self.head)
        lang.interpret_nullary("left", self.left)
        lang.interpret_nullary("right", self.right)
        lang.interpret_nullary("shrink", self._shrink_command)
        lang.interpret_nullary("show", self.render)
        lang.interpret_command("write", WRITE_COMMANDS, self._write_command, requires_argument=True)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def language(self) -> Language:
        return self._language

    @property
    def kind(self) -> CellKind:
        return self._kind

    @property
    def head(self) -> int:
        return self._head

    @property
    def order(self) -> int:
        return self._order

    @property
    def size(self) -> int:
        return len(self._tape)

    @property
    def max_order(self) -> int:
        return self._max_order

    def as_resource(self) -> Resource:
        return Resource(language=self._language, payload=self)

    # -------------------------------------------------------------------------
    # Allocation
    # -------------------------------------------------------------------------

    def make_tape(self, order: int):
        """
        Allocate a blank buffer of ``2 ** order`` cells.

        :raises TapeRangeError: If ``order`` is negative or not below the ceiling.
        """
        if order < 0 or order >= self._max_order:
            raise TapeRangeError(
                f"Tape order {order} is outside [0, {self._max_order})",
                {"order": order, "max_order": self._max_order},
            )
        return self._codec.make_buffer(1 << order)

    def new_tape(self, order: int) -> None:
        """Replace the tape with a blank one of the given order and return the head to 0."""
        self._tape = self.make_tape(order)
        self._order = order
        self._head = 0

    def grow(self) -> None:
        """
        Double the tape, keeping every cell at its logical position.

        :raises CapacityExceededError: If the next order reaches the ceiling.
        """
        if self._order + 1 >= self._max_order:
            logger.warning("Max tape order reached (%d)", self._order)
            raise CapacityExceededError(
                f"Cannot grow tape past order {self._order}",
                {"order": self._order, "max_order": self._max_order},
            )
        old_size = len(self._tape)
        tape = self.make_tape(self._order + 1)
        offset = len(tape) // 2 - old_size // 2
        tape[offset : offset + old_size] = self._tape
        self._tape = tape
        self._order += 1
        logger.debug("Tape grown to order %d", self._order)

    def shrink(self) -> None:
        """
        Compact the tape to the smallest power-of-two buffer holding every
        non-default cell and the head. Cells keep their distances to each other
        and to the head; the leftmost one lands at buffer index 0.
        """
        used = [i for i, value in enumerate(self._tape) if not self._codec.is_blank(value)]
        if not used:
            self.new_tape(1)
            return
        head_index = self._index(self._head)
        low = min(used[0], head_index)
        high = max(used[-1], head_index)
        span = high - low + 1
        order = (span - 1).bit_length()
        tape = self.make_tape(order)
        first = max(low, 0)
        last = min(high, len(self._tape) - 1)
        tape[first - low : last - low + 1] = self._tape[first : last + 1]
        self._tape = tape
        self._order = order
        self._head = head_index - low - len(tape) // 2
        logger.debug("Tape shrunk to order %d, head rebased to %d", order, self._head)

    # -------------------------------------------------------------------------
    # Head and cells
    # -------------------------------------------------------------------------

    def _index(self, position: int) -> int:
        return position + len(self._tape) // 2

    def _on_tape(self, position: int) -> bool:
        return 0 <= self._index(position) < len(self._tape)

    def _cover(self, position: int) -> None:
        while not self._on_tape(position):
            self.grow()

    def read(self) -> Cell:
        """Return the cell under the head, growing the tape first if the head is off it."""
        self._cover(self._head)
        return self._tape[self._index(self._head)]

    def write(self, value: Cell) -> bool:
        """Store ``value`` under the head, growing the tape first if the head is off it."""
        self._cover(self._head)
        self._tape[self._index(self._head)] = value
        return True

    def left(self) -> bool:
        return self._reposition(self._head - 1)

    def right(self) -> bool:
        return self._reposition(self._head + 1)

    def move(self, delta: int) -> bool:
        return self._reposition(self._head + delta)

    def goto(self, position: int) -> bool:
        return self._reposition(position)

    def _reposition(self, position: int) -> bool:
        if not INT64_MIN <= position <= INT64_MAX:
            return False
        try:
            self._cover(position)
        except CapacityExceededError:
            return False
        self._head = position
        return True

    def render(self, radius: int = RENDER_RADIUS) -> str:
        """
        Text view of the cells within ``radius`` of the head, each rendered by
        the cell kind's ``to_text``. The head cell is bracketed; positions off
        the tape show the blank value.
        """
        parts = []
        for position in range(self._head - radius, self._head + radius + 1):
            value = self._tape[self._index(position)] if self._on_tape(position) else self._codec.default
            text = self._codec.to_text(value)
            parts.append(f"[{text}]" if position == self._head else text)
        return " ".join(parts)

    def cells(self) -> Dict[int, Any]:
        """Map logical positions to every non-default cell."""
        zero = len(self._tape) // 2
        return {i - zero: value for i, value in enumerate(self._tape) if not self._codec.is_blank(value)}

    # -------------------------------------------------------------------------
    # Command semantics
    # -------------------------------------------------------------------------

    def _cell_result(self, value: Cell) -> ResultValue:
        if self._kind is CellKind.TEXT:
            return Text(value)
        return result_of(value)

    def _shrink_command(self) -> int:
        self.shrink()
        return self._order

    def _write_command(self, argument: Sequence) -> ResultValue:
        literal = Language.munch(Buffer(argument)).text
        try:
            value = self._codec.from_text(literal)
        except NumericParseError as e:
            logger.warning("Rejected write of %r: %s", literal, e.message)
            return Diagnostic(e.kind, e.message)
        return result_of(self.write(value))
