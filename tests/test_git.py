"""Tests for git module."""

from git import Repo

from taskboard.git import (
    has_branch_sync,
    init_repo,
    is_git_repo,
    load_settings,
    read_git_config,
    write_git_config_key,
)


def test_is_git_repo(temp_repo, tmp_path):
    assert is_git_repo(temp_repo)
    not_repo = tmp_path / "plain"
    not_repo.mkdir()
    assert not is_git_repo(not_repo)
    assert not is_git_repo(tmp_path / "missing")


def test_init_repo(tmp_path):
    path = tmp_path / "new"
    path.mkdir()
    init_repo(path)
    assert is_git_repo(path)


def test_read_git_config_defaults(temp_repo):
    config = read_git_config(temp_repo)
    assert config["columns"] == "todo:To Do,wait:Wait,inprogress:In Progress,done:Done"
    assert config["move_timeout"] == 10


def test_write_and_read_git_config(temp_repo):
    write_git_config_key(temp_repo, "columns", "a:Alpha,b:Beta")
    write_git_config_key(temp_repo, "move_timeout", 3)

    config = read_git_config(temp_repo)
    assert config["columns"] == "a:Alpha,b:Beta"
    assert config["move_timeout"] == 3

    reader = Repo(temp_repo).config_reader("repository")
    assert reader.get_value("taskboard", "move-timeout") == 3


def test_unknown_key_kept_as_string(temp_repo):
    write_git_config_key(temp_repo, "theme", "dark")
    assert read_git_config(temp_repo)["theme"] == "dark"


def test_load_settings(temp_repo):
    write_git_config_key(temp_repo, "columns", "a:Alpha,b:Beta")
    settings = load_settings(temp_repo)
    assert settings.columns.ids == ["a", "b"]
    assert settings.move_timeout == 10


def test_load_settings_zero_timeout_disables(temp_repo):
    write_git_config_key(temp_repo, "move_timeout", 0)
    assert load_settings(temp_repo).move_timeout is None


def test_has_branch_sync(temp_repo):
    assert not has_branch_sync(temp_repo, "taskboard")
    Repo(temp_repo).create_head("taskboard")
    assert has_branch_sync(temp_repo, "taskboard")
