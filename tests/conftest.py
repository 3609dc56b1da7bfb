"""Pytest fixtures for wtv tests."""

import subprocess
from pathlib import Path

import pytest
from helpers import ASSEMBLY_INFO


@pytest.fixture
def write_file(tmp_path):
    """
    Factory fixture writing text files under tmp_path.

    Example:
        def test_read(write_file):
            path = write_file("AssemblyInfo.cs", ASSEMBLY_INFO)
    """

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def assembly_info(write_file) -> Path:
    """A typical AssemblyInfo.cs at revision 15."""
    return write_file("AssemblyInfo.cs", ASSEMBLY_INFO)


@pytest.fixture
def fake_subwcrev(tmp_path, monkeypatch):
    """
    Stand-in for SubWCRev.exe.

    Returns a setter: call it with the revision text to write and the exit
    code to return. Each call made is recorded in ``calls``.

    Example:
        def test_revision(fake_subwcrev):
            exe = fake_subwcrev("1234")
            assert get_working_copy_revision(exe, "wc") == 1234
    """
    exe = tmp_path / "SubWCRev.exe"
    exe.write_text("", encoding="utf-8")
    behaviour = {"output": "0", "returncode": 0}
    calls = []

    def _run(cmd, **kwargs):
        calls.append(cmd)
        if behaviour["returncode"] == 0:
            Path(cmd[3]).write_text(behaviour["output"], encoding="utf-8")
        return subprocess.CompletedProcess(cmd, behaviour["returncode"], stdout="")

    monkeypatch.setattr("wtv.subwcrev.subprocess.run", _run)

    def _configure(output: str = "0", returncode: int = 0) -> Path:
        behaviour["output"] = output
        behaviour["returncode"] = returncode
        return exe

    _configure.calls = calls
    return _configure
