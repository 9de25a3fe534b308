# amcore/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from amcore.core.errors import AMError
    from amcore.core.tokens import Token
    from amcore.core.values import ResultValue
    from amcore.interfaces.protocols import MachineHook


class HookManager:
    """
    Manages the registration and execution of hooks that observe machine
    dispatch (on_dispatch, on_error). Users can attach logging, tracing, or
    custom side effects without altering core logic.
    """

    def __init__(self, hooks: Optional[List["MachineHook"]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List["MachineHook"] = list(hooks or [])

    @property
    def hooks(self) -> List["MachineHook"]:
        return list(self._hooks)

    def register_hook(self, hook: "MachineHook") -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing any of the MachineHook methods.
        """
        self._hooks.append(hook)

    def execute_on_dispatch(self, command: "Token", result: "ResultValue") -> None:
        """
        Run all hooks' on_dispatch logic after a command has been run.
        """
        for hook in self._hooks:
            if hasattr(hook, "on_dispatch"):
                hook.on_dispatch(command, result)

    def execute_on_error(self, error: "AMError") -> None:
        """
        Run all hooks' on_error logic when a command fails.
        """
        for hook in self._hooks:
            if hasattr(hook, "on_error"):
                hook.on_error(error)
