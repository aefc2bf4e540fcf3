#!/usr/bin/env python3
"""
Eidos — Ancient Greek εἶδος (form, kind)

An interactive file categorizer. Scans a directory, groups the files by
extension and lets you browse each group, view a file's content or
delete a file.

Usage:
    eidos <path>                       # Scan and browse interactively
    eidos <path> --fullscan            # Include non-excluded subdirectories
    eidos <path> --exclude fixtures    # Also prune 'fixtures' directories
    eidos <path> --report              # Just print the category summary
    eidos --show-excludes              # Show the configured exclusion set
    eidos --reset-excludes             # Restore the default exclusion set
"""

import argparse
import pathlib
import sys
from typing import Optional

from auxiliary import category_label, format_bytes, format_path_for_display, truncate_path
from categorizer import (
    CategoryMap,
    DirectoryCategorizer,
    ScanError,
    ScanWarning,
    find_entry,
    sorted_by_size,
    summarize,
    total_size,
)
from console_ui import ConsoleUI
from eidos_config import ConfigManager
from file_operations import FileOperations, ReadFailure

EXIT = "exit"
BACK = "back"
VIEW = "view"
DELETE = "delete"


class Eidos:
    """Main application class for the Eidos file categorizer."""

    def __init__(
        self,
        args: argparse.Namespace,
        ui: Optional[ConsoleUI] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.args = args
        self.ui = ui or ConsoleUI()
        self.config_manager = config_manager or ConfigManager()
        self._config = self.config_manager.load()

        self.directory: Optional[pathlib.Path] = None
        self.full_scan = bool(getattr(args, "fullscan", False) or self._config.full_scan)
        self.categories: CategoryMap = {}
        self.files_deleted = 0
        self.bytes_deleted = 0

        exclude_dirs = set(self._config.exclude_dirs) | set(getattr(args, "exclude", None) or [])
        self.categorizer = DirectoryCategorizer(
            exclude_dirs=exclude_dirs,
            warning_callback=self._on_warning,
            skip_callback=None if getattr(args, "quiet", False) else self._on_skip,
            error_callback=self._on_error,
        )
        self.file_ops = FileOperations()

    # -- categorizer callbacks -----------------------------------------------

    def _on_warning(self, warning: ScanWarning):
        self.ui.print_warning(f"  Warning: {warning.message}")

    def _on_skip(self, path: pathlib.Path):
        self.ui.print_progress(f"  Skipping excluded directory: {path.name}")

    def _on_error(self, error: ScanError):
        self.ui.print_error(f"Error: {error}")

    # -- exclusion set commands ------------------------------------------------

    def show_excludes(self):
        names = sorted(self._config.exclude_dirs)
        if not names:
            self.ui.print_info("Exclusion set is empty.")
            return
        self.ui.print_info(f"Excluded directory names ({self.config_manager.config_file}):")
        for name in names:
            self.ui.print_plain(f"  {name}")

    def reset_excludes(self):
        self._config = self.config_manager.reset_excludes()
        self.ui.print_success(f"Exclusion set restored to {len(self._config.exclude_dirs)} default names.")

    # -- scanning ------------------------------------------------------------

    def scan(self) -> Optional[CategoryMap]:
        """Run one categorization pass over the session directory"""
        suffix = " (Full Scan Enabled)" if self.full_scan else ""
        self.ui.print_info(f"\nScanning directory: {format_path_for_display(self.directory)}{suffix}\n")
        return self.categorizer.categorize(self.directory, self.full_scan)

    def refresh(self):
        """Re-scan after a mutating action; a failure ends the process."""
        categories = self.scan()
        if categories is None:
            self.ui.print_error("Failed to re-scan directory after action. Exiting.")
            self._record_run()
            sys.exit(1)
        self.categories = categories

    def report(self):
        summaries = summarize(self.categories)
        if not summaries:
            self.ui.print_plain("No files found in this directory to categorize.")
            return
        self.ui.show_categories(summaries)
        file_count = sum(s.count for s in summaries)
        self.ui.print_info(
            f"{file_count:,} files in {len(summaries)} categories, {format_bytes(total_size(self.categories))} total"
        )

    # -- menus -----------------------------------------------------------------

    def main_menu(self):
        while True:
            summaries = summarize(self.categories)
            if not summaries:
                self.ui.print_plain("No files found in this directory to categorize.")
                return

            options = [(f"{s.label} ({s.count} files, {format_bytes(s.total_size)})", s.key) for s in summaries]
            options.append(("Exit", EXIT))

            selected = self.ui.select_option("Select a file category:", options)
            if selected == EXIT:
                self.ui.print_success("Exiting file categorizer. Goodbye!")
                return

            self.category_menu(selected)

    def category_menu(self, key: str):
        label = category_label(key)
        while True:
            entries = self.categories.get(key)
            if not entries:
                self.ui.print_plain(f"No files left in {label}.")
                return

            self.ui.console.print()
            self.ui.print_separator(f"Files in {label}")
            options = [
                (f"{truncate_path(self._display_path(e.full_path))} ({format_bytes(e.size)})", e.full_path)
                for e in sorted_by_size(entries)
            ]
            options.append(("Go Back to Categories", BACK))

            selected = self.ui.select_option("Select a file or go back:", options)
            if selected == BACK:
                return

            if self.file_action(selected):
                self.refresh()

    def file_action(self, path: pathlib.Path) -> bool:
        """Act on one file. Returns True when the filesystem may have changed."""
        action = self.ui.select_option(
            f'What do you want to do with "{path.name}"?',
            [("View Content", VIEW), ("Delete File", DELETE), ("Go Back to File List", BACK)],
        )
        if action == VIEW:
            self.view_file(path)
            return False
        if action == DELETE:
            return self.delete_file(path)
        return False

    # -- file actions ----------------------------------------------------------

    def view_file(self, path: pathlib.Path):
        result = self.file_ops.read_text(path)
        if result.success:
            self.ui.show_file_content(path.name, result.content)
        elif result.failure is ReadFailure.IS_DIRECTORY:
            self.ui.print_error(f'Error: "{path.name}" is a directory, not a file.')
        elif result.failure is ReadFailure.PERMISSION_DENIED:
            self.ui.print_error(f'Error: Permission denied to read "{path.name}".')
        else:
            self.ui.print_error(f'Error reading file "{path.name}": {result.error_message}')
            self.ui.print_warning("Note: This might not be a text file or it's too large to display.")
        self.ui.pause()

    def delete_file(self, path: pathlib.Path) -> bool:
        """Delete after confirmation. Returns True if removal was attempted."""
        if not self.ui.confirm(f'Are you sure you want to delete "{path.name}"? This cannot be undone!', default=False):
            self.ui.print_plain(f'Deletion of "{path.name}" cancelled.')
            self.ui.pause()
            return False

        entry = find_entry(self.categories, path)
        result = self.file_ops.delete(path)
        if result.success:
            self.files_deleted += 1
            self.bytes_deleted += entry.size if entry else 0
            self.ui.print_success(f'Successfully deleted: "{path.name}"')
        else:
            self.ui.print_error(f'Error deleting "{path.name}": {result.error_message}')
        self.ui.pause()
        return True

    def _display_path(self, path: pathlib.Path) -> str:
        try:
            return str(path.relative_to(self.directory))
        except ValueError:
            return str(path)

    def _record_run(self):
        self._config.record_run(self.files_deleted, self.bytes_deleted)
        try:
            self.config_manager.save(self._config)
        except OSError as e:
            self.ui.print_warning(f"Could not save configuration: {e}")

    # -- main entry point ----------------------------------------------------

    def run(self) -> int:
        if getattr(self.args, "show_excludes", False):
            self.show_excludes()
            return 0
        if getattr(self.args, "reset_excludes", False):
            self.reset_excludes()
            return 0

        path = getattr(self.args, "path", None)
        if not path:
            build_parser().print_usage(sys.stderr)
            self.ui.print_error("Please provide the path to the directory you want to scan.")
            return 1

        self.directory = pathlib.Path(path)
        categories = self.scan()
        if categories is None:
            return 0
        self.categories = categories

        if getattr(self.args, "report", False):
            self.report()
            return 0

        try:
            self.main_menu()
        except (KeyboardInterrupt, EOFError):
            self.ui.console.print()
            self.ui.print_warning("Interrupted.")
            self._record_run()
            return 130

        self._record_run()
        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eidos",
        description="Eidos — browse, view and delete files grouped by extension",
    )
    parser.add_argument("path", nargs="?", help="Directory to scan")
    parser.add_argument("--fullscan", action="store_true", help="Recursively scan non-excluded subdirectories")
    parser.add_argument(
        "--exclude",
        action="append",
        metavar="NAME",
        help="Extra directory name to skip during this run (repeatable)",
    )
    parser.add_argument("--report", action="store_true", help="Print the category summary and exit")
    parser.add_argument("-q", "--quiet", action="store_true", help="Don't list skipped excluded directories")
    parser.add_argument("--show-excludes", action="store_true", help="Show the configured exclusion set")
    parser.add_argument("--reset-excludes", action="store_true", help="Restore the default exclusion set")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    app = Eidos(args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
