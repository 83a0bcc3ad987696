import os

import pytest

from dotplan.atoms.file.link import Link


def test_it_can(tmp_path):
    source = tmp_path / "source"
    source.touch()
    link_dir = tmp_path / "links"
    link_dir.mkdir()

    atom = Link(source=source, target=link_dir / "symlink")
    assert atom.plan().should_run is True
    atom.execute()
    assert atom.plan().should_run is False
    assert os.readlink(link_dir / "symlink") == str(source)


def test_missing_source_is_not_planned(tmp_path):
    atom = Link(source=tmp_path / "absent", target=tmp_path / "link")
    assert atom.plan().should_run is False


def test_existing_regular_target_is_not_replaced(tmp_path):
    source = tmp_path / "source"
    source.touch()
    target = tmp_path / "target"
    target.write_text("keep me")

    assert Link(source=source, target=target).plan().should_run is False


def test_link_to_elsewhere_should_run(tmp_path):
    source = tmp_path / "source"
    source.touch()
    other = tmp_path / "other"
    other.touch()
    target = tmp_path / "link"
    os.symlink(other, target)

    assert Link(source=source, target=target).plan().should_run is True


def test_execute_over_existing_file_raises(tmp_path):
    source = tmp_path / "source"
    source.touch()
    target = tmp_path / "target"
    target.touch()

    with pytest.raises(FileExistsError):
        Link(source=source, target=target).execute()


def test_display(tmp_path):
    atom = Link(source=tmp_path / "s", target=tmp_path / "t")
    assert str(atom) == (
        f"The file {tmp_path / 't'} contents needs to be linked from {tmp_path / 's'}"
    )