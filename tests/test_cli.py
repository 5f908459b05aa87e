import os

from pipeline_redirect.cli import main
from pipeline_redirect.redirect import TMP_INPUT

ENV = {"PATH": os.environ.get("PATH", "/bin:/usr/bin")}


def test_too_few_arguments():
    assert main(["in.txt", "cat", "out.txt"], ENV) == 1


def test_copies_through_commands(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data = b"alpha\nbeta\n"
    (tmp_path / "in.txt").write_bytes(data)
    assert main(["in.txt", "cat", "cat", "out.txt"], ENV) == 0
    assert (tmp_path / "out.txt").read_bytes() == data


def test_missing_input_is_reported_and_cleaned(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.txt", "cat", "cat", "out.txt"], ENV) == 0
    assert "absent.txt" in capsys.readouterr().err
    assert (tmp_path / "out.txt").read_bytes() == b""
    assert not (tmp_path / TMP_INPUT).exists()


def test_without_search_path_nothing_runs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_bytes(b"data\n")
    assert main(["in.txt", "cat", "cat", "out.txt"], {}) == 0
    assert (tmp_path / "out.txt").read_bytes() == b""