#!/usr/bin/env python3
"""
Directory Categorizer Module for Eidos

Walks a directory and groups regular files by extension. In full-scan
mode every subdirectory is visited depth-first, except those whose
basename is in the exclusion set.

Failures on the root path abort the pass. Failures on a single entry or
on a nested subdirectory are recorded as warnings and the walk goes on.
"""

import pathlib
import stat
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from auxiliary import category_label, extension_key

DEFAULT_EXCLUDE_DIRS = frozenset(
    {
        "node_modules",
        "venv",
        ".git",
        ".vscode",
        "__pycache__",
        "build",
        "dist",
        "out",
        "bin",
        "obj",
        "target",  # Rust/Java
        "vendor",  # Go/PHP
        "tmp",
        "temp",
        "log",
        "logs",
        "coverage",
        "docs",
        "test",
        "tests",
        "examples",
    }
)


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileEntry:
    """A single file discovered during a categorization pass"""

    name: str
    full_path: pathlib.Path
    size: int


CategoryMap = dict[str, list[FileEntry]]


@dataclass
class ScanWarning:
    """Non-fatal problem met during a walk"""

    path: pathlib.Path
    message: str


@dataclass
class CategorySummary:
    key: str
    label: str
    count: int
    total_size: int


class ScanError(Exception):
    """Failure that ends a categorization pass (or a subtree of it)"""

    def __init__(self, path: pathlib.Path, message: str):
        super().__init__(message)
        self.path = path


class RootNotFoundError(ScanError):
    pass


class RootNotADirectoryError(ScanError):
    pass


class ListingError(ScanError):
    pass


# ---------------------------------------------------------------------------
# Categorizer
# ---------------------------------------------------------------------------


class DirectoryCategorizer:
    """Groups the files below a directory by extension"""

    def __init__(
        self,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
        warning_callback: Optional[Callable[[ScanWarning], None]] = None,
        skip_callback: Optional[Callable[[pathlib.Path], None]] = None,
        error_callback: Optional[Callable[[ScanError], None]] = None,
    ):
        """Initialize categorizer

        Args:
            exclude_dirs: Directory basenames pruned from the walk
            warning_callback: Called for every non-fatal problem
            skip_callback: Called for every excluded directory encountered
            error_callback: Called by categorize() when the pass fails
        """
        self.exclude_dirs = frozenset(exclude_dirs)
        self.warning_callback = warning_callback
        self.skip_callback = skip_callback
        self.error_callback = error_callback
        self.warnings: list[ScanWarning] = []
        self.last_error: Optional[ScanError] = None

    def categorize(self, directory: Union[str, pathlib.Path], full_scan: bool = False) -> Optional[CategoryMap]:
        """Run a pass and return None instead of raising on failure"""
        try:
            categories = self.scan(directory, full_scan)
        except ScanError as e:
            self.last_error = e
            if self.error_callback:
                self.error_callback(e)
            return None

        self.last_error = None
        return categories

    def scan(self, directory: Union[str, pathlib.Path], full_scan: bool = False) -> CategoryMap:
        """Run a categorization pass

        Args:
            directory: Root of the pass
            full_scan: Descend into non-excluded subdirectories

        Returns:
            Mapping of extension key to the files found, in walk order

        Raises:
            RootNotFoundError: The root does not exist
            RootNotADirectoryError: The root is not a directory
            ListingError: The root cannot be listed
        """
        root = pathlib.Path(directory)
        self.warnings = []

        try:
            root_stat = root.stat()
        except (FileNotFoundError, NotADirectoryError) as e:
            raise RootNotFoundError(root, f'Directory not found at "{root}"') from e
        except OSError as e:
            raise ListingError(root, f'Could not read directory "{root}": {e.strerror or e}') from e

        if not stat.S_ISDIR(root_stat.st_mode):
            raise RootNotADirectoryError(root, f'"{root}" is not a directory.')

        categories: CategoryMap = {}
        self._walk(root, full_scan, categories, (root_stat.st_dev, root_stat.st_ino))
        return categories

    def _walk(self, root: pathlib.Path, full_scan: bool, categories: CategoryMap, root_identity: tuple):
        """Depth-first walk with an explicit stack

        Each directory's files are added before any of its subtrees, and
        subtrees are visited in name order. Every stack frame carries the
        identities of its ancestors for loop detection.
        """
        stack = [(root, frozenset({root_identity}))]

        while stack:
            directory, ancestors = stack.pop()
            try:
                children = self._list_directory(directory)
            except ListingError as e:
                if directory is root:
                    raise
                self._warn(directory, str(e))
                continue

            subdirectories = []
            for child in children:
                try:
                    child_stat = child.stat()
                except OSError as e:
                    self._warn(child, f'Could not get stats for "{child.name}" ({e.strerror or e})')
                    continue

                if stat.S_ISREG(child_stat.st_mode):
                    entry = FileEntry(name=child.name, full_path=child, size=child_stat.st_size)
                    categories.setdefault(extension_key(child.name), []).append(entry)

                elif stat.S_ISDIR(child_stat.st_mode):
                    if child.name in self.exclude_dirs:
                        if self.skip_callback:
                            self.skip_callback(child)
                        continue
                    if not full_scan:
                        continue
                    identity = (child_stat.st_dev, child_stat.st_ino)
                    if identity in ancestors:
                        self._warn(child, f'Skipping "{child}": directory loop detected')
                        continue
                    subdirectories.append((child, ancestors | {identity}))

            # Reversed so the first subdirectory by name is popped first
            stack.extend(reversed(subdirectories))

    def _list_directory(self, directory: pathlib.Path) -> list[pathlib.Path]:
        try:
            return sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ListingError(directory, f'Could not read directory "{directory}": {e.strerror or e}') from e

    def _warn(self, path: pathlib.Path, message: str):
        warning = ScanWarning(path=path, message=message)
        self.warnings.append(warning)
        if self.warning_callback:
            self.warning_callback(warning)


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------


def summarize(categories: CategoryMap) -> list[CategorySummary]:
    """Per-category totals, largest total size first"""
    summaries = [
        CategorySummary(
            key=key,
            label=category_label(key),
            count=len(entries),
            total_size=sum(e.size for e in entries),
        )
        for key, entries in categories.items()
    ]
    summaries.sort(key=lambda s: s.total_size, reverse=True)
    return summaries


def sorted_by_size(entries: list[FileEntry]) -> list[FileEntry]:
    """Copy of entries, largest first"""
    return sorted(entries, key=lambda e: e.size, reverse=True)


def total_size(categories: CategoryMap) -> int:
    return sum(e.size for entries in categories.values() for e in entries)


def find_entry(categories: CategoryMap, path: Union[str, pathlib.Path]) -> Optional[FileEntry]:
    """Look up a file by path in the current map"""
    path = pathlib.Path(path)
    for entries in categories.values():
        for entry in entries:
            if entry.full_path == path:
                return entry
    return None
