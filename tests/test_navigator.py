from gh_local_sync.ui.navigator import select_directory


def _dirs(root, *names):
    for name in names:
        (root / name).mkdir()


def test_enter_and_select(tmp_path, scripted_ask):
    _dirs(tmp_path, "a", "b", "c")
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("2", "s"))
    assert result == (tmp_path / "b").resolve()


def test_select_current_directory(tmp_path, scripted_ask):
    assert select_directory(tmp_path, display_limit=10, ask=scripted_ask("S")) == tmp_path.resolve()


def test_cancel(tmp_path, scripted_ask):
    assert select_directory(tmp_path, display_limit=10, ask=scripted_ask("q")) is None


def test_parent(tmp_path, scripted_ask):
    _dirs(tmp_path, "child")
    result = select_directory(tmp_path / "child", display_limit=10, ask=scripted_ask("..", "s"))
    assert result == tmp_path.resolve()


def test_create_folder_then_select(tmp_path, scripted_ask):
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("c", "workspace", "s"))
    assert result == (tmp_path / "workspace").resolve()
    assert (tmp_path / "workspace").is_dir()


def test_invalid_folder_name_is_rejected(tmp_path, scripted_ask):
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("c", "..", "s"))
    assert result == tmp_path.resolve()


def test_paging_respects_display_limit(tmp_path, scripted_ask, capsys):
    _dirs(tmp_path, "a", "b", "c")
    result = select_directory(tmp_path, display_limit=2, ask=scripted_ask(">", "3", "s"))

    assert result == (tmp_path / "c").resolve()
    out = capsys.readouterr().out
    assert "page 1/2" in out
    assert "page 2/2" in out


def test_typed_path_and_unknown_command(tmp_path, scripted_ask, capsys):
    _dirs(tmp_path, "x")
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("what", "p", "x", "s"))

    assert result == (tmp_path / "x").resolve()
    assert "Unknown command" in capsys.readouterr().out


def test_hidden_folders_are_not_listed(tmp_path, scripted_ask, capsys):
    _dirs(tmp_path, ".hidden", "shown")
    select_directory(tmp_path, display_limit=10, ask=scripted_ask("q"))
    out = capsys.readouterr().out
    assert "shown" in out
    assert ".hidden" not in out


def test_typed_path_with_unknown_home_stays_in_navigator(tmp_path, scripted_ask, capsys):
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("p", "~no_such_user_4711/x", "s"))

    assert result == tmp_path.resolve()
    assert "Not a directory" in capsys.readouterr().out


def test_typed_path_with_null_byte_stays_in_navigator(tmp_path, scripted_ask):
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("p", "a\x00b", "s"))
    assert result == tmp_path.resolve()


def test_folder_name_with_null_byte_is_reported(tmp_path, scripted_ask, capsys):
    result = select_directory(tmp_path, display_limit=10, ask=scripted_ask("c", "a\x00b", "s"))

    assert result == tmp_path.resolve()
    assert "Could not create" in capsys.readouterr().err
