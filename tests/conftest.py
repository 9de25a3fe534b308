# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def language():
    """A Language with the built-in character-class concepts."""
    from amcore.core.language import Language

    return Language()


@pytest.fixture
def command_language():
    """A Language seeded with the character alphabet but no class concepts."""
    from amcore.core.language import Language

    return Language(character_concepts=False)


@pytest.fixture
def substrate():
    """A default integer tape of order 16."""
    from amcore.core.substrate import Substrate

    return Substrate()


@pytest.fixture
def small_substrate():
    """A small integer tape so growth is cheap to trigger."""
    from amcore.core.substrate import Substrate

    return Substrate(order=2, max_order=8)


@pytest.fixture
def registry():
    """An empty StateRegistry."""
    from amcore.core.states import StateRegistry

    return StateRegistry()


@pytest.fixture
def machine():
    """An AbstractMachine with no resources."""
    from amcore.core.machine import AbstractMachine

    return AbstractMachine()


@pytest.fixture
def tape_machine(substrate):
    """A machine with the default tape attached as 'tape'."""
    from amcore.core.machine import AbstractMachine

    m = AbstractMachine()
    m.add_resource("tape", substrate.as_resource())
    return m


@pytest.fixture
def dummy_hooks():
    """A list of hook mocks for testing HookManager."""
    hook = MagicMock()
    hook.on_dispatch = MagicMock()
    hook.on_error = MagicMock()
    return [hook]
