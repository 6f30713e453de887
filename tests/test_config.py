from pathlib import Path

from gh_local_sync.config import DISPLAY_LIMIT, REPO_LIST_LIMIT, Settings


def test_defaults_from_empty_env():
    settings = Settings.from_env({})
    assert settings.display_limit == DISPLAY_LIMIT
    assert settings.repo_list_limit == REPO_LIST_LIMIT
    assert settings.start_directory == Path.cwd()


def test_overrides(tmp_path):
    settings = Settings.from_env(
        {
            "GH_LOCAL_SYNC_DISPLAY_LIMIT": "5",
            "GH_LOCAL_SYNC_REPO_LIMIT": "200",
            "GH_LOCAL_SYNC_START_DIR": str(tmp_path),
        }
    )
    assert settings.display_limit == 5
    assert settings.repo_list_limit == 200
    assert settings.start_directory == tmp_path.resolve()


def test_invalid_values_fall_back(tmp_path, capsys):
    settings = Settings.from_env(
        {
            "GH_LOCAL_SYNC_DISPLAY_LIMIT": "many",
            "GH_LOCAL_SYNC_REPO_LIMIT": "0",
            "GH_LOCAL_SYNC_START_DIR": str(tmp_path / "missing"),
        }
    )
    assert settings.display_limit == DISPLAY_LIMIT
    assert settings.repo_list_limit == REPO_LIST_LIMIT
    assert settings.start_directory == Path.cwd()
    assert "GH_LOCAL_SYNC_DISPLAY_LIMIT" in capsys.readouterr().out


def test_start_dir_with_unknown_home_falls_back(capsys):
    settings = Settings.from_env({"GH_LOCAL_SYNC_START_DIR": "~no_such_user_4711"})

    assert settings.start_directory == Path.cwd()
    assert "GH_LOCAL_SYNC_START_DIR" in capsys.readouterr().out
