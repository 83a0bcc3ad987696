import getpass
from pathlib import Path

import platformdirs

from dotplan.contexts.user import UserContextProvider
from dotplan.values import Value


def _as_dict():
    return {context.key: str(context.value) for context in UserContextProvider().get_contexts()}


def test_prefix():
    assert UserContextProvider().prefix == "user"


def test_keys_in_order():
    keys = [context.key for context in UserContextProvider().get_contexts()]
    assert keys == [
        "id",
        "name",
        "username",
        "home_dir",
        "config_dir",
        "data_dir",
        "data_local_dir",
        "document_dir",
    ]


def test_all_values_are_non_empty_strings():
    contexts = UserContextProvider().get_contexts()
    assert len(contexts) == 8
    for context in contexts:
        text = str(context.value)
        assert text != ""
        assert context.value == Value.string(text)


def test_id_is_numeric():
    assert _as_dict()["id"].isdigit()


def test_username_matches_getpass():
    assert _as_dict()["username"] == getpass.getuser()


def test_directories_match_platform():
    values = _as_dict()
    assert values["home_dir"] == str(Path.home())
    assert values["config_dir"] == platformdirs.user_config_dir()
    assert values["data_local_dir"] == platformdirs.user_data_dir(roaming=False)


def test_home_follows_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert _as_dict()["home_dir"] == str(tmp_path)