import json

from nestconf.cli import EXIT_INVALID, EXIT_MISSING, EXIT_UNREADABLE, main


def _write(tmp_path, text: str):
    path = tmp_path / "app.conf"
    path.write_text(text)
    return path


def test_cli_dumps_table_as_json(tmp_path, capsys) -> None:
    path = _write(tmp_path, "top=1\n[db primary]\nhost = x\n")
    assert main([str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"": {"": {"top": "1"}}, "db": {"primary": {"host": "x"}}}


def test_cli_get_field_with_type(tmp_path, capsys) -> None:
    path = _write(tmp_path, "[db]\nport = 5432\nssl = yes\n")
    assert main([str(path), "--get", "db", "", "port", "--as", "int32"]) == 0
    assert capsys.readouterr().out.strip() == "5432"
    assert main([str(path), "--get", "db", "", "ssl", "--as", "bool"]) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert main([str(path), "--get", "db", "", "port"]) == 0
    assert capsys.readouterr().out.strip() == '"5432"'


def test_cli_missing_field(tmp_path, capsys) -> None:
    path = _write(tmp_path, "[db]\n")
    assert main([str(path), "--get", "db", "", "port"]) == EXIT_MISSING
    assert "no field 'port'" in capsys.readouterr().err


def test_cli_decode_failure(tmp_path, capsys) -> None:
    path = _write(tmp_path, "port = 99999999999\n")
    assert main([str(path), "--get", "", "", "port", "--as", "int32"]) == EXIT_INVALID
    assert "not representable" in capsys.readouterr().err


def test_cli_parse_failure(tmp_path, capsys) -> None:
    path = _write(tmp_path, "ok = 1\nbroken\n")
    assert main([str(path)]) == EXIT_INVALID
    assert "line 2" in capsys.readouterr().err


def test_cli_unreadable_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.conf")]) == EXIT_UNREADABLE
    assert "error:" in capsys.readouterr().err


def test_cli_uses_settings_file(tmp_path, capsys) -> None:
    settings = tmp_path / "settings.conf"
    settings.write_text("[reader]\nencoding = latin-1\n")
    path = tmp_path / "app.conf"
    path.write_bytes("name = caf\xe9\n".encode("latin-1"))
    assert main([str(path), "--settings", str(settings), "--get", "", "", "name"]) == 0
    assert json.loads(capsys.readouterr().out) == "caf\xe9"
