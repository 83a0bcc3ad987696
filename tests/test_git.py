import pytest

from dotplan.atoms.git import Clone


def test_it_can_plan(tmp_path):
    git_clone = Clone(repository="https://example.com/dotplan/dotplan", directory=tmp_path)
    assert git_clone.plan().should_run is False

    git_clone = Clone(
        repository="https://example.com/dotplan/dotplan",
        directory=tmp_path / "nonexistent",
    )
    assert git_clone.plan().should_run is True


def test_display_defaults_to_main(tmp_path):
    git_clone = Clone(repository="https://example.com/r", directory=tmp_path)
    assert str(git_clone) == f'GitClone https://example.com/r#main to "{tmp_path}"'


def test_display_with_reference(tmp_path):
    git_clone = Clone(repository="https://example.com/r", directory=tmp_path, reference="dev")
    assert str(git_clone) == f'GitClone https://example.com/r#dev to "{tmp_path}"'


def test_execute_fails_for_missing_repository(tmp_path):
    git_clone = Clone(
        repository=str(tmp_path / "no-such-repository"),
        directory=tmp_path / "clone",
    )
    with pytest.raises(RuntimeError):
        git_clone.execute()
    assert not (tmp_path / "clone" / ".git").exists()