import io
import os

from pipeline_redirect.errors import COMMAND_NOT_FOUND, format_error
from pipeline_redirect.paths import find_path
from pipeline_redirect.pipeline import NOT_FOUND_STATUS, cleanup, run_pipeline
from pipeline_redirect.redirect import HERE_DOC, TMP_INPUT

PATHS = find_path(os.environ) or ["/bin", "/usr/bin"]


def _run(tmp_path, commands, data):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(data)
    stream = io.StringIO()
    with open(src, "rb") as stdin, open(dst, "wb") as stdout:
        statuses = run_pipeline(PATHS, commands, stdin, stdout, stream)
    return statuses, dst.read_bytes(), stream.getvalue()


def test_cat_chain_copies_input(tmp_path):
    data = b"line one\nline two\n"
    statuses, out, errors = _run(tmp_path, ["cat", "cat", "cat"], data)
    assert out == data
    assert statuses == [0, 0, 0]
    assert errors == ""


def test_arguments_are_split_on_spaces(tmp_path):
    statuses, out, _ = _run(tmp_path, ["cat", "tr a-z A-Z"], b"hello\n")
    assert out == b"HELLO\n"
    assert statuses == [0, 0]


def test_missing_first_command_gives_empty_input(tmp_path):
    statuses, out, errors = _run(tmp_path, ["no-such-cmd-xyz", "cat"], b"data\n")
    assert out == b""
    assert statuses[0] == NOT_FOUND_STATUS
    assert errors == format_error(COMMAND_NOT_FOUND, "no-such-cmd-xyz")


def test_missing_last_command_is_reported(tmp_path):
    statuses, out, errors = _run(tmp_path, ["cat", "no-such-cmd-xyz"], b"data\n")
    assert out == b""
    assert statuses == [0, NOT_FOUND_STATUS]
    assert "no-such-cmd-xyz" in errors


def test_empty_command_is_not_found(tmp_path):
    statuses, _, errors = _run(tmp_path, ["cat", ""], b"x\n")
    assert statuses[-1] == NOT_FOUND_STATUS
    assert errors == format_error(COMMAND_NOT_FOUND)


def test_cleanup_removes_temporary_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / HERE_DOC).write_text("x")
    (tmp_path / TMP_INPUT).write_text("")
    (tmp_path / "keep.txt").write_text("kept")
    assert cleanup() is None
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]
    assert (tmp_path / "keep.txt").read_text() == "kept"


def test_cleanup_without_temporary_files_leaves_directory_alone(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "keep.txt").write_text("kept")
    assert cleanup() is None
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]