#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled status lines, numbered menus, confirmation prompts and the
category summary table used by the Eidos session.
"""

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from auxiliary import display_safe, format_bytes


class ConsoleUI:
    """Console UI handler using Rich for the interactive menus"""

    def __init__(self, force_terminal: Optional[bool] = None, console: Optional[Console] = None):
        """Initialize console with optional terminal forcing or a preset console"""
        self.console = console or Console(force_terminal=force_terminal, highlight=False)

    # Basic styled output methods
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(display_safe(message), style="green", markup=False)

    def print_error(self, message: str):
        """Print error message in red"""
        self.console.print(display_safe(message), style="red bold", markup=False)

    def print_warning(self, message: str):
        """Print warning message in yellow"""
        self.console.print(display_safe(message), style="yellow", markup=False)

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.console.print(display_safe(message), style="cyan", markup=False)

    def print_progress(self, message: str):
        """Print progress message in dim white"""
        self.console.print(display_safe(message), style="white dim", markup=False)

    def print_plain(self, message: str):
        self.console.print(display_safe(message), style="white", markup=False)

    def print_separator(self, title: str = "", style: str = "magenta"):
        """Print a rule line with an optional title"""
        self.console.rule(escape(display_safe(title)), style=style)

    # Tables
    def show_categories(self, summaries: list, title: str = "Files by Extension"):
        """Show category summaries (already sorted) in a table"""
        table = Table(title=title, box=box.ROUNDED, show_lines=False)
        table.add_column("Category", style="cyan", min_width=20)
        table.add_column("Files", justify="right", min_width=6)
        table.add_column("Size", justify="right", style="yellow", min_width=10)

        for summary in summaries:
            table.add_row(escape(display_safe(summary.label)), f"{summary.count:,}", format_bytes(summary.total_size))

        self.console.print(table)

    def show_file_content(self, name: str, content: str):
        """Print raw file content between header and footer rules"""
        self.console.print()
        self.print_separator(f"Content of {name}", style="blue")
        self.console.print(Text(display_safe(content)), soft_wrap=True)
        self.print_separator("End of Content", style="blue")
        self.console.print()

    # Interactive prompts
    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask for yes/no confirmation"""
        return Confirm.ask(escape(display_safe(question)), default=default, console=self.console)

    def select_option(self, title: str, options: list[tuple[str, Any]]) -> Any:
        """Show a numbered menu and return the value of the chosen option

        Args:
            title: Question shown above the menu
            options: (label, value) pairs in display order
        """
        self.console.print(f"\n[cyan]{escape(display_safe(title))}[/cyan]")
        for i, (label, _value) in enumerate(options, 1):
            self.console.print(f"  [dim]{i:>3}.[/dim] {escape(display_safe(label))}")

        choices = [str(i) for i in range(1, len(options) + 1)]
        response = Prompt.ask("Enter a number", choices=choices, show_choices=False, console=self.console)
        return options[int(response) - 1][1]

    def pause(self, message: str = "Press Enter to continue..."):
        """Pause execution until Enter is pressed"""
        self.console.input(f"[dim]{escape(message)}[/dim]")
