import pathlib

from file_operations import FileOperations, OperationType, ReadFailure


def test_read_text(tmp_path: pathlib.Path):
    target = tmp_path / "notes.md"
    target.write_text("# Title\nbody\n", encoding="utf-8")

    result = FileOperations().read_text(target)

    assert result.success
    assert result.operation_type is OperationType.READ
    assert result.content == "# Title\nbody\n"
    assert result.failure is None


def test_read_directory(tmp_path: pathlib.Path):
    result = FileOperations().read_text(tmp_path)

    assert not result.success
    assert result.failure is ReadFailure.IS_DIRECTORY


def test_read_permission_denied(tmp_path: pathlib.Path, monkeypatch):
    target = tmp_path / "secret.txt"
    target.write_text("x")

    def denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(pathlib.Path, "read_text", denied)
    result = FileOperations().read_text(target)

    assert result.failure is ReadFailure.PERMISSION_DENIED
    assert result.error_message == "Permission denied"


def test_read_binary_is_other(tmp_path: pathlib.Path):
    target = tmp_path / "image.png"
    target.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00")

    result = FileOperations().read_text(target)

    assert not result.success
    assert result.failure is ReadFailure.OTHER
    assert result.content is None


def test_read_missing_is_other(tmp_path: pathlib.Path):
    result = FileOperations().read_text(tmp_path / "missing.txt")

    assert result.failure is ReadFailure.OTHER


def test_delete(tmp_path: pathlib.Path):
    target = tmp_path / "old.log"
    target.write_text("x")

    result = FileOperations().delete(target)

    assert result.success
    assert result.operation_type is OperationType.DELETE
    assert not target.exists()


def test_delete_missing_reports_error(tmp_path: pathlib.Path):
    result = FileOperations().delete(tmp_path / "already_gone.txt")

    assert not result.success
    assert result.error_message
