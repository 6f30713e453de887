from gh_local_sync.core.scan import list_local_repos, list_subfolder_names


def _layout(root):
    (root / "Alpha" / ".git").mkdir(parents=True)
    (root / "beta" / ".git").mkdir(parents=True)
    (root / "plain").mkdir()
    (root / "notes.txt").write_text("x", encoding="utf-8")
    (root / "plain" / "nested" / ".git").mkdir(parents=True)


def test_subfolder_names_include_non_repositories(tmp_path):
    _layout(tmp_path)
    assert list_subfolder_names(tmp_path) == ["Alpha", "beta", "plain"]


def test_local_repos_only_direct_children_with_marker(tmp_path):
    _layout(tmp_path)
    repos = list_local_repos(tmp_path)

    assert [repo.name for repo in repos] == ["Alpha", "beta"]
    assert repos[0].path == str((tmp_path / "Alpha").resolve())


def test_unreadable_directory_yields_empty(tmp_path, capsys):
    missing_dir = tmp_path / "gone"
    assert list_subfolder_names(missing_dir) == []
    assert list_local_repos(missing_dir) == []
    assert "Could not read directory" in capsys.readouterr().err
