import tempfile

import pytest

from dotplan.atoms.directory import Create


def test_it_can_plan():
    atom = Create(path="/some-random-path")
    assert atom.plan().should_run is True

    atom = Create(path=tempfile.gettempdir())
    assert atom.plan().should_run is False


def test_it_can_execute(tmp_path):
    atom = Create(path=tmp_path / "create-me")
    assert not (tmp_path / "create-me").exists()

    atom.execute()
    assert atom.plan().should_run is False
    assert (tmp_path / "create-me").is_dir()


def test_creates_parents(tmp_path):
    atom = Create(path=tmp_path / "a" / "b" / "c")
    atom.execute()
    assert (tmp_path / "a" / "b" / "c").is_dir()


def test_execute_fails_over_a_file(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(OSError):
        Create(path=target).execute()


def test_display(tmp_path):
    assert str(Create(path=tmp_path)) == f"The directory {tmp_path} needs to be created"