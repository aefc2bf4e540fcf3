import io

from rich.console import Console

import console_ui
from categorizer import CategorySummary
from console_ui import ConsoleUI


def make_ui() -> ConsoleUI:
    return ConsoleUI(console=Console(file=io.StringIO(), width=200, color_system=None))


def test_select_option_returns_value_of_chosen_number(monkeypatch):
    ui = make_ui()
    asked = {}

    def fake_ask(prompt, choices=None, show_choices=True, console=None):
        asked["choices"] = choices
        return "2"

    monkeypatch.setattr(console_ui.Prompt, "ask", fake_ask)

    selected = ui.select_option("Pick one:", [("[weird] name.txt", "first"), ("Exit", "exit")])

    assert selected == "exit"
    assert asked["choices"] == ["1", "2"]
    output = ui.console.file.getvalue()
    assert "[weird] name.txt" in output
    assert "Pick one:" in output


def test_show_categories_table():
    ui = make_ui()

    ui.show_categories(
        [
            CategorySummary(key=".log", label=".LOG", count=1200, total_size=3 * 1024**2),
            CategorySummary(key="no_extension", label="Files with No Extension", count=1, total_size=10),
        ]
    )

    output = ui.console.file.getvalue()
    assert ".LOG" in output
    assert "1,200" in output
    assert "3.0 MiB" in output
    assert "Files with No Extension" in output


def test_show_file_content_keeps_markup_literal():
    ui = make_ui()

    ui.show_file_content("notes.txt", "[bold]not markup[/bold]")

    output = ui.console.file.getvalue()
    assert "Content of notes.txt" in output
    assert "[bold]not markup[/bold]" in output
    assert "End of Content" in output


def test_select_option_survives_undecodable_labels_on_utf8_stream(monkeypatch):
    stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    ui = ConsoleUI(console=Console(file=stream, width=200, color_system=None))
    monkeypatch.setattr(console_ui.Prompt, "ask", lambda *args, **kwargs: "1")

    selected = ui.select_option('What do you want to do with "\udcff.txt"?', [("\udcff.txt (3 B)", "odd")])
    ui.print_warning('  Warning: Could not get stats for "\udcfe.lnk"')

    assert selected == "odd"
    stream.flush()
    output = stream.buffer.getvalue().decode("utf-8")
    assert '"\ufffd.txt"?' in output
    assert "\ufffd.txt (3 B)" in output
    assert '"\ufffd.lnk"' in output
