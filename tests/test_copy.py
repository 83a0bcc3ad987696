from dotplan.atoms.file.copy import Copy


def _files(tmp_path):
    to_file = tmp_path / "to"
    to_file.touch()
    from_file = tmp_path / "from"
    from_file.write_text("This is test content for a test file\n")
    return from_file, to_file


def test_it_can_plan(tmp_path):
    from_file, to_file = _files(tmp_path)

    assert Copy(from_=from_file, to=to_file).plan().should_run is True
    assert Copy(from_=from_file, to=from_file).plan().should_run is False


def test_it_can_execute(tmp_path):
    from_file, to_file = _files(tmp_path)

    atom = Copy(from_=from_file, to=to_file)
    assert atom.plan().should_run is True
    atom.execute()
    assert atom.plan().should_run is False
    assert to_file.read_text() == "This is test content for a test file\n"


def test_it_wont_destroy_directories(tmp_path):
    target_dir = tmp_path / "dir"
    target_dir.mkdir()
    from_file = tmp_path / "from"
    from_file.touch()

    assert Copy(from_=from_file, to=target_dir).plan().should_run is False


def test_missing_target_is_not_planned(tmp_path):
    from_file = tmp_path / "from"
    from_file.write_text("x")
    assert Copy(from_=from_file, to=tmp_path / "absent").plan().should_run is False


def test_same_size_different_bytes_runs(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"abc")
    second.write_bytes(b"abd")
    assert Copy(from_=first, to=second).plan().should_run is True


def test_display(tmp_path):
    atom = Copy(from_=tmp_path / "a", to=tmp_path / "b")
    assert str(atom) == (
        f"The file {tmp_path / 'b'} contents needs to be copied from {tmp_path / 'a'}"
    )