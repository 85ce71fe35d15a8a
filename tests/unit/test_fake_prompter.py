"""Tests for FakePrompter test infrastructure."""

from pathlib import Path

import pytest

from sf_utils.core.catalog import DEFAULT_CATALOG
from sf_utils.core.errors import PromptInterrupted
from sf_utils.core.installer import PACKAGE_MANAGERS
from tests.fakes.prompter import FakePrompter


def test_fake_prompter_returns_configured_answers() -> None:
    prompter = FakePrompter(utility_id="strip", confirm_overwrite=True, package_manager="npm")
    socket = DEFAULT_CATALOG.get("socket")

    assert prompter.select_utility(DEFAULT_CATALOG) == "strip"
    assert prompter.confirm_overwrite(socket, Path("/p/utilities/sf-socketio")) is True
    assert prompter.select_package_manager(PACKAGE_MANAGERS) == "npm"
    assert prompter.asked == ["select", "confirm", "package_manager"]
    assert prompter.overwrite_questions == [Path("/p/utilities/sf-socketio")]


def test_fake_prompter_interrupt() -> None:
    prompter = FakePrompter(interrupt_at="package_manager")

    assert prompter.select_utility(DEFAULT_CATALOG) == "socket"
    with pytest.raises(PromptInterrupted):
        prompter.select_package_manager(PACKAGE_MANAGERS)
