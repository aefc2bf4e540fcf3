import io

import pytest
from rich.console import Console

from console_ui import ConsoleUI
from eidos_config import ConfigManager


class ScriptedUI(ConsoleUI):
    """ConsoleUI that answers menus and confirmations from queued replies."""

    def __init__(self, selections=None, confirmations=None):
        super().__init__(console=Console(file=io.StringIO(), width=400, color_system=None))
        self.selections = list(selections or [])
        self.confirmations = list(confirmations or [])
        self.menus = []

    def select_option(self, title, options):
        values = [value for _label, value in options]
        self.menus.append((title, values))
        choice = self.selections.pop(0)
        if callable(choice):
            choice = choice(values)
        assert choice in values, f"{choice!r} not offered in {title!r}: {values!r}"
        return choice

    def confirm(self, question, default=False):
        answer = self.confirmations.pop(0)
        if callable(answer):
            answer = answer()
        return answer

    def pause(self, message="Press Enter to continue..."):
        pass

    @property
    def output(self) -> str:
        return self.console.file.getvalue()


@pytest.fixture
def config_manager(tmp_path):
    return ConfigManager(tmp_path / "config")


@pytest.fixture
def scripted_ui():
    return ScriptedUI
