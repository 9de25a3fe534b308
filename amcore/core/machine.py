# amcore/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from amcore.core.charclasses import ALPHABETIC, is_alphabetic
from amcore.core.errors import AMError
from amcore.core.hooks import HookManager
from amcore.core.language import Language
from amcore.core.resources import Resource
from amcore.core.tokens import Buffer, Sequence, Token, TokenLike, lower, text_of, to_token
from amcore.core.values import EMPTY, Diagnostic, ResultValue
from amcore.interfaces.protocols import Interpreter

logger = logging.getLogger(__name__)

RUN_COMMANDS = ("run", "rn")


class ErrorRecoveryStrategy:
    """
    Abstract interface for custom error recovery strategies.
    Subclasses can implement custom logic in `recover`.
    """

    def recover(self, error: AMError, machine: "AbstractMachine") -> None:
        pass


class AbstractMachine:
    """
    Orchestrates a host Language and an ordered list of Resources. A command is
    evaluated by the host when it is well-formed there, otherwise by the first
    Resource whose Language accepts it.
    """

    def __init__(
        self,
        hooks: Optional[List] = None,
        error_recovery: Optional[ErrorRecoveryStrategy] = None,
    ) -> None:
        """
        :param hooks: Optional hook objects implementing on_dispatch and/or on_error.
        :param error_recovery: Optional strategy told about every failed command.
        """
        self._language = Language(character_concepts=False)
        self._resources: List[Resource] = []
        self._hooks = HookManager(hooks)
        self._error_recovery = error_recovery
        self._language.interpret_command("run", RUN_COMMANDS, self._run_command)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return tuple(self._resources)

    @property
    def hooks(self) -> HookManager:
        return self._hooks

    def run(self, command: TokenLike) -> ResultValue:
        """
        Evaluate ``command`` and return its result, or EMPTY when nothing
        accepts it. Library errors raised by a semantic handler are reported to
        hooks and the recovery strategy and returned as a Diagnostic.
        """
        command = to_token(command)
        try:
            result = self._dispatch(command)
        except AMError as error:
            logger.error("Command %r failed: %s", text_of(command), error.message)
            self._hooks.execute_on_error(error)
            if self._error_recovery:
                self._error_recovery.recover(error, self)
            result = Diagnostic(error.kind, error.message)
        self._hooks.execute_on_dispatch(command, result)
        return result

    def _run_command(self, program: Sequence) -> ResultValue:
        # "run run ... <command>" dispatches <command> once.
        buffer = Buffer(program)
        while lower(self._language.lick(buffer.text)).text in RUN_COMMANDS:
            self._language.munch(buffer)
        return self.run(buffer.to_sequence())

    def _dispatch(self, command: Token) -> ResultValue:
        if self._language.is_well_formed(command):
            return self._language.evaluate(command).result
        for resource in self._resources:
            if resource.language.is_well_formed(command):
                return resource.language.evaluate(command).result
        logger.debug("No language accepts %r", text_of(command))
        return EMPTY

    def add_resource(self, name: TokenLike, resource: Union[Resource, Interpreter]) -> bool:
        """
        Attach ``resource`` under ``name``. Afterwards ``<name> <command>`` is
        evaluated by the resource's own Language. An Interpreter such as a
        Substrate is wrapped with its ``as_resource``.

        :return: False, with no change, if ``name`` is already taken.
        :raises ValueError: If ``name`` is not a non-empty alphabetic word.
        """
        if isinstance(resource, Interpreter):
            resource = resource.as_resource()
        name = to_token(name)
        label = text_of(name)
        if not label or not is_alphabetic(name):
            raise ValueError(f"Resource name must be alphabetic, got {label!r}")
        folded = lower(name)
        taken = any(lower(existing) == folded for existing in self._language.concept_names())
        if taken or self._language.is_well_formed(name):
            logger.debug("Resource name %r already taken", label)
            return False

        def syntax(token: Token) -> bool:
            return self._qualified_syntax(label, token, resource)

        def semantic(token: Token) -> ResultValue:
            buffer = Buffer(token)
            self._language.munch(buffer)
            return resource.language.evaluate(buffer.to_sequence()).result

        self._language.interpret(ALPHABETIC, name, syntax, semantic)
        self._resources.append(resource)
        logger.debug("Attached resource %r (%d total)", label, len(self._resources))
        return True

    def _qualified_syntax(self, label: str, token: Token, resource: Resource) -> bool:
        if not isinstance(token, Sequence):
            return False
        buffer = Buffer(token)
        leading = self._language.munch(buffer)
        if not leading or not is_alphabetic(leading) or lower(leading).text != label.lower():
            return False
        return resource.language.is_well_formed(buffer.to_sequence())
