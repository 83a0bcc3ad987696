import jinja2
import pytest

from dotplan.templating import read_file_contents, register_functions, render_string


def test_can_read_from_file(tmp_path):
    path = tmp_path / "content.txt"
    path.write_text("\nFKBR\nKUCI\nSXOE\n\n")
    template = f'{{{{ read_file_contents(path="{path.as_posix()}") }}}}'
    assert render_string(template, {}) == "FKBR\nKUCI\nSXOE"


def test_read_file_contents_requires_path():
    with pytest.raises(ValueError, match="Argument 'path' not set"):
        read_file_contents()


def test_read_file_contents_rejects_non_string():
    with pytest.raises(TypeError, match="Cannot convert argument 'path' to str"):
        read_file_contents(5)


def test_read_file_contents_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_file_contents(str(tmp_path / "missing"))


def test_register_functions_adds_global():
    environment = jinja2.Environment()
    register_functions(environment)
    assert environment.globals["read_file_contents"] is read_file_contents


def test_render_uses_context():
    rendered = render_string("{{ user.username }}\n", {"user": {"username": "rawkode"}})
    assert rendered == "rawkode\n"


def test_render_undefined_name_raises():
    with pytest.raises(jinja2.UndefinedError):
        render_string("{{ nothing.here }}", {})