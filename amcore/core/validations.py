# amcore/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING

from amcore.core.errors import ValidationError
from amcore.core.tokens import symbols, text_of

if TYPE_CHECKING:
    from amcore.core.language import Language
    from amcore.core.machine import AbstractMachine
    from amcore.core.substrate import Substrate


class Validator:
    """
    Checks the structural invariants of languages, tapes, and machines.
    """

    def __init__(self) -> None:
        self._rules = _DefaultValidationRules

    def validate_language(self, language: "Language") -> None:
        """
        :raises ValidationError: If a concept name repeats or uses a symbol missing from the alphabet.
        """
        self._rules.validate_language(language)

    def validate_substrate(self, substrate: "Substrate") -> None:
        """
        :raises ValidationError: If the tape size is not ``2 ** order``.
        """
        self._rules.validate_substrate(substrate)

    def validate_machine(self, machine: "AbstractMachine") -> None:
        """
        Validate the host Language and every resource Language.

        :raises ValidationError: If any of them is invalid.
        """
        self._rules.validate_language(machine.language)
        for resource in machine.resources:
            self._rules.validate_language(resource.language)


class _DefaultValidationRules:
    """
    Provides built-in validation rules.
    """

    @staticmethod
    def validate_language(language: "Language") -> None:
        alphabet = language.alphabet
        seen = set()
        for concept in language.concepts:
            if concept.name in seen:
                raise ValidationError(f"Concept {text_of(concept.name)!r} is registered twice.")
            seen.add(concept.name)
            missing = [s for s in symbols(concept.name) if s not in alphabet]
            if missing:
                raise ValidationError(
                    f"Concept {text_of(concept.name)!r} uses symbols outside the alphabet: {missing}",
                    {"name": text_of(concept.name), "missing": missing},
                )

    @staticmethod
    def validate_substrate(substrate: "Substrate") -> None:
        if substrate.size != 1 << substrate.order:
            raise ValidationError(
                f"Tape size {substrate.size} does not match order {substrate.order}.",
                {"size": substrate.size, "order": substrate.order},
            )
        if substrate.order >= substrate.max_order:
            raise ValidationError(f"Tape order {substrate.order} reaches the ceiling {substrate.max_order}.")
