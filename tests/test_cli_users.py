"""
Tests para comandos CLI de usuarios y preferencias.

Usa typer.testing.CliRunner para simular invocaciones CLI y una función
de respuestas guionada en lugar de questionary para los formularios.
"""

import json
import os
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from userforms.cli import app
from userforms.cli.theme import CLITheme
from userforms.cli.users import edit_user, find_user, register_user
from userforms.config import ThemeName
from userforms.models import User

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_cli(monkeypatch):
    """Sin overrides de entorno y con el tema claro al terminar."""
    for var in list(os.environ):
        if var.upper().startswith("USERFORMS_"):
            monkeypatch.delenv(var, raising=False)
    yield
    CLITheme.set_theme(ThemeName.LIGHT)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


def scripted(answers: dict):
    """
    Crea una función ask que responde por nombre de campo.

    Un valor lista se consume en orden (reintentos); un campo sin entrada
    acepta el valor por defecto.
    """
    asked = []

    def ask(fld, default):
        asked.append(fld.name)
        if fld.name not in answers:
            return default
        answer = answers[fld.name]
        if isinstance(answer, list):
            return answer.pop(0)
        return answer

    ask.asked = asked
    return ask


def invoke(config_path, *args):
    return runner.invoke(app, ["--config", str(config_path), *args])


class TestFindUser:
    """Tests para find_user."""

    def test_matches_as_text(self):
        users = [User(id=7, first_name="Al"), User(id="x9")]
        assert find_user(users, "7").first_name == "Al"
        assert find_user(users, "x9").id == "x9"
        assert find_user(users, "8") is None


class TestListCommand:
    """Tests para el comando list."""

    def test_lists_users(self, config_path, populated_api):
        with patch("userforms.cli.users.get_api", return_value=populated_api):
            result = invoke(config_path, "list")
        assert result.exit_code == 0
        assert "Users (1)" in result.output
        assert "Al" in result.output

    def test_empty(self, config_path, fake_api):
        with patch("userforms.cli.users.get_api", return_value=fake_api):
            result = invoke(config_path, "list")
        assert result.exit_code == 0
        assert "No users registered yet." in result.output

    def test_connection_failure(self, config_path, failing_api):
        with patch("userforms.cli.users.get_api", return_value=failing_api):
            result = invoke(config_path, "list")
        assert result.exit_code == 1
        assert "Could not connect to the API" in result.output

    def test_invalid_config(self, config_path):
        config_path.write_text("{broken")
        result = invoke(config_path, "list")
        assert result.exit_code == 1
        assert "Invalid config file" in result.output


class TestDeleteCommand:
    """Tests para el comando delete."""

    def test_delete_with_yes(self, config_path, populated_api):
        with patch("userforms.cli.users.get_api", return_value=populated_api):
            result = invoke(config_path, "delete", "7", "--yes")
        assert result.exit_code == 0
        assert "User deleted successfully" in result.output
        assert populated_api.calls == [("delete", "7")]

    def test_declined_confirmation(self, config_path, populated_api):
        confirm = MagicMock()
        confirm.return_value.ask.return_value = False
        with patch("userforms.cli.users.get_api", return_value=populated_api), \
             patch("userforms.cli.users.questionary.confirm", confirm):
            result = invoke(config_path, "delete", "7")
        assert result.exit_code == 0
        assert "Cancelled." in result.output
        assert populated_api.calls == []

    def test_failure(self, config_path, failing_api):
        with patch("userforms.cli.users.get_api", return_value=failing_api):
            result = invoke(config_path, "delete", "7", "-y")
        assert result.exit_code == 1
        assert "Failed to delete user." in result.output


class TestRegisterUser:
    """Tests para el alta interactiva."""

    def test_register(self, fake_api, valid_inputs, capsys):
        ask = scripted({**valid_inputs, "dob": "1815-12-10", "address": ""})
        register_user(fake_api, ask=ask)

        out = capsys.readouterr().out
        assert "User registered successfully!" in out
        assert "ID: 101" in out
        op, payload = fake_api.calls[0]
        assert op == "create"
        assert payload["dob"] == "1815-12-10"
        assert payload["firstName"] == "Ada"
        assert "id" not in payload

    def test_field_reprompted_until_valid(self, fake_api, valid_inputs, capsys):
        ask = scripted({
            **valid_inputs,
            "email": ["not-an-email", "ada@example.com"],
            "dob": ["10/12/1815", "1815-12-10"],
            "address": "",
        })
        register_user(fake_api, ask=ask)

        out = capsys.readouterr().out
        assert "Please enter a valid email address" in out
        assert "Use the format YYYY-MM-DD" in out
        assert ask.asked.count("email") == 2
        assert ask.asked.count("dob") == 2
        assert fake_api.calls[0][1]["email"] == "ada@example.com"

    def test_cancel(self, fake_api, capsys):
        register_user(fake_api, ask=lambda fld, default: None)
        assert "Cancelled, nothing was saved." in capsys.readouterr().out
        assert fake_api.calls == []

    def test_long_phone_not_reported_as_missing(self, fake_api, valid_inputs, capsys):
        ask = scripted({
            **valid_inputs,
            "phone": ["12a3456789012", "5550001111"],
            "dob": "1815-12-10",
            "address": "",
        })
        register_user(fake_api, ask=ask)

        out = capsys.readouterr().out
        assert "Phone number must be exactly 10 digits" in out
        assert "is required" not in out
        assert fake_api.calls[0][1]["phone"] == "5550001111"

    def test_persistence_error_exits(self, failing_api, valid_inputs, capsys):
        ask = scripted({**valid_inputs, "dob": "1815-12-10", "address": ""})
        with pytest.raises(typer.Exit):
            register_user(failing_api, ask=ask)
        assert "Error saving user data." in capsys.readouterr().out


class TestEditUser:
    """Tests para la edición interactiva."""

    def test_edit_prefilled(self, populated_api, capsys):
        ask = scripted({"address": "1 Main St"})
        edit_user(populated_api, "7", ask=ask)

        assert "User updated successfully!" in capsys.readouterr().out
        op, user_id, payload = populated_api.calls[-1]
        assert op == "update"
        assert user_id == 7
        assert payload["firstName"] == "Al"
        assert payload["dob"] == "1990-05-01"
        assert payload["address"] == "1 Main St"

    def test_phone_over_ten_digits_reprompted(self, populated_api, capsys):
        ask = scripted({"phone": ["55512345678", "5559876543"]})
        edit_user(populated_api, "7", ask=ask)

        assert "Phone number must be exactly 10 digits" in capsys.readouterr().out
        assert ask.asked.count("phone") == 2
        assert populated_api.calls[-1][2]["phone"] == "5559876543"

    def test_not_found(self, populated_api, capsys):
        with pytest.raises(typer.Exit):
            edit_user(populated_api, "99", ask=scripted({}))
        assert "User '99' not found." in capsys.readouterr().out


class TestSettingsCommands:
    """Tests para los comandos theme y config."""

    def test_theme_set(self, config_path):
        result = invoke(config_path, "theme", "dark")
        assert result.exit_code == 0
        assert "Theme set to dark" in result.output
        assert json.loads(config_path.read_text())["theme"] == "dark"

    def test_theme_keeps_env_overrides_out_of_file(self, config_path, monkeypatch):
        config_path.write_text(json.dumps({"storage": "demo"}))
        monkeypatch.setenv("USERFORMS_API_URL", "http://temporary:9999/users")
        result = invoke(config_path, "theme", "dark")
        assert result.exit_code == 0
        assert json.loads(config_path.read_text()) == {"storage": "demo", "theme": "dark"}

    def test_theme_toggle(self, config_path):
        config_path.write_text(json.dumps({"theme": "dark"}))
        result = invoke(config_path, "theme")
        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["theme"] == "light"

    def test_config(self, config_path):
        config_path.write_text(json.dumps({"storage": "demo"}))
        result = invoke(config_path, "config")
        assert result.exit_code == 0
        assert "storage" in result.output
        assert "demo" in result.output
