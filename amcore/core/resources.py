# amcore/core/resources.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass, field
from typing import Any

from amcore.core.language import Language


@dataclass(eq=False)
class Resource:
    """
    A named sub-interpreter attached to a machine: its own Language plus the
    domain object that Language operates on.
    """

    language: Language = field(default_factory=lambda: Language(character_concepts=False))
    payload: Any = None
