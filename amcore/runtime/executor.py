# amcore/runtime/executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Iterable, List

from amcore.core.machine import AbstractMachine
from amcore.core.values import EMPTY, ResultValue

logger = logging.getLogger(__name__)


class Executor:
    """
    Runs a program, one instruction per line, through a machine and collects
    the result of every instruction in order.
    """

    def __init__(self, machine: AbstractMachine) -> None:
        """
        :param machine: AbstractMachine instance to run.
        """
        self.machine = machine
        self._executed = 0

    @property
    def executed(self) -> int:
        """Number of non-blank lines run so far."""
        return self._executed

    def execute_line(self, line: str) -> ResultValue:
        """
        Run a single instruction. Blank lines yield EMPTY without reaching the machine.
        """
        instruction = line.strip()
        if not instruction:
            return EMPTY
        self._executed += 1
        result = self.machine.run(instruction)
        logger.debug("%d: %s -> %r", self._executed, instruction, result)
        return result

    def execute(self, program: Iterable[str]) -> List[ResultValue]:
        """
        Run every non-blank line of ``program`` in order.

        :return: One result per non-blank line.
        """
        results = []
        for line in program:
            if not line.strip():
                continue
            results.append(self.execute_line(line))
        return results
