#!/usr/bin/env python3
"""
File Operations Module for Eidos

Reads and deletes single files picked from a categorization pass.
Failures are returned as results, never raised.
"""

import pathlib
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OperationType(Enum):
    """Type of file operation"""

    READ = "read"
    DELETE = "delete"


class ReadFailure(Enum):
    """Why a file could not be shown as text"""

    IS_DIRECTORY = "is_directory"
    PERMISSION_DENIED = "permission_denied"
    OTHER = "other"


@dataclass
class OperationResult:
    """Result of a file operation"""

    path: pathlib.Path
    operation_type: OperationType
    success: bool
    error_message: Optional[str] = None


@dataclass
class ReadResult(OperationResult):
    content: Optional[str] = None
    failure: Optional[ReadFailure] = None


class FileOperations:
    """Single-file view and delete operations"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_text(self, path: pathlib.Path) -> ReadResult:
        """Read a file as text

        Undecodable content is reported as ReadFailure.OTHER, the same as
        any other I/O problem.
        """
        path = pathlib.Path(path)
        try:
            content = path.read_text(encoding=self.encoding)
        except IsADirectoryError as e:
            return self._read_failed(path, ReadFailure.IS_DIRECTORY, e)
        except PermissionError as e:
            return self._read_failed(path, ReadFailure.PERMISSION_DENIED, e)
        except (OSError, UnicodeDecodeError) as e:
            return self._read_failed(path, ReadFailure.OTHER, e)

        return ReadResult(path=path, operation_type=OperationType.READ, success=True, content=content)

    def delete(self, path: pathlib.Path) -> OperationResult:
        """Remove a single file"""
        path = pathlib.Path(path)
        try:
            path.unlink()
        except OSError as e:
            return OperationResult(
                path=path,
                operation_type=OperationType.DELETE,
                success=False,
                error_message=e.strerror or str(e),
            )

        return OperationResult(path=path, operation_type=OperationType.DELETE, success=True)

    def _read_failed(self, path: pathlib.Path, failure: ReadFailure, error: Exception) -> ReadResult:
        message = getattr(error, "strerror", None) or str(error)
        return ReadResult(
            path=path,
            operation_type=OperationType.READ,
            success=False,
            error_message=message,
            failure=failure,
        )
