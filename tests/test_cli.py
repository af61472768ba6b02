import json

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def _write_config(tmp_path, data, name="pw.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_generate_json_output(tmp_path, clean_env):
    config = _write_config(tmp_path, {"db-pass": {"len": 12, "encoding": "sha256", "env": True}})

    result = runner.invoke(app, ["generate", str(config), "--json"])

    assert result.exit_code == 0, result.output
    records = json.loads(result.stdout)
    assert records[0]["name"] == "db-pass"
    assert records[0]["tags"] == ["toolkit", "pwgen"]
    assert len(records[0]["value"]["plain"]) == 12
    assert clean_env["DB_PASS_PLAIN"] == records[0]["value"]["plain"]


def test_generate_table_masks_plaintext(tmp_path):
    config = _write_config(tmp_path, {"a": {"len": 30}})

    result = runner.invoke(app, ["generate", str(config)])

    assert result.exit_code == 0, result.output
    assert "Generated Passwords" in result.stdout
    assert "••••" in result.stdout


def test_generate_export_json_and_print_env(tmp_path, clean_env):
    config = _write_config(tmp_path, {"b": {"encoding": "md5", "env": True}})
    out = tmp_path / "records.json"

    result = runner.invoke(app, ["generate", str(config), "--export-json", str(out), "--print-env"])

    assert result.exit_code == 0, result.output
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved[0]["value"]["encoding"] == "md5"
    assert f"export B_PLAIN='{saved[0]['value']['plain']}'" in result.stdout


def test_generate_empty_config(tmp_path):
    config = _write_config(tmp_path, {})

    result = runner.invoke(app, ["generate", str(config)])

    assert result.exit_code == 0
    assert "No passwords generated" in result.stdout


def test_generate_bad_config_exits_with_error(tmp_path):
    config = tmp_path / "pw.json"
    config.write_text("[]", encoding="utf-8")

    result = runner.invoke(app, ["generate", str(config)])

    assert result.exit_code == 1


def test_new_json():
    result = runner.invoke(app, ["new", "--length", "20", "--encoding", "base64", "--json"])

    assert result.exit_code == 0, result.output
    record = json.loads(result.stdout)
    assert record["name"] == "password"
    assert record["value"]["length"] == 20
    assert record["value"]["encoding"] == "base64"


def test_doctor_runs():
    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Random source" in result.stdout


def test_new_with_empty_name_exits_with_error():
    result = runner.invoke(app, ["new", "--name", ""])

    assert result.exit_code == 1
    assert "invalid password options" in result.output


def test_malformed_settings_exit_with_error(tmp_path, monkeypatch):
    monkeypatch.setenv("PWGEN_DEFAULT_LENGTH", "not-a-number")
    config = _write_config(tmp_path, {"a": {}})

    result = runner.invoke(app, ["generate", str(config)])

    assert result.exit_code == 1
    assert "PWGEN_" in result.output


def test_generate_skips_unexportable_name(tmp_path, clean_env):
    config = _write_config(tmp_path, {"bad": {"name": "a=b", "env": True}, "ok": {"len": 6}})

    result = runner.invoke(app, ["generate", str(config), "--json"])

    assert result.exit_code == 0, result.output
    assert [r["name"] for r in json.loads(result.stdout)] == ["ok"]
