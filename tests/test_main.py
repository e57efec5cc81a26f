import io
import json

import pytest

from docker_credential_env.cli import parse_args
from docker_credential_env.main import main


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("DOCKER_CREDENTIALS_ENV_OPTIONAL", raising=False)
    monkeypatch.delenv("DOCKER_CREDENTIALS_ENV_MAIN_EXAMPLE_USER", raising=False)
    monkeypatch.delenv("DOCKER_CREDENTIALS_ENV_MAIN_EXAMPLE_PASSWORD", raising=False)
    return monkeypatch


def test_parse_args_collects_action():
    args = parse_args(["get"])

    assert args.action == ["get"]


def test_main_get(clean_env, capsys):
    clean_env.setenv("DOCKER_CREDENTIALS_ENV_MAIN_EXAMPLE_USER", "mainuser")
    clean_env.setenv("DOCKER_CREDENTIALS_ENV_MAIN_EXAMPLE_PASSWORD", "")
    clean_env.setattr("sys.stdin", io.StringIO("main.example"))

    with pytest.raises(SystemExit) as exc_info:
        main(["get"])

    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out) == {
        "ServerURL": "main.example",
        "Username": "mainuser",
        "Secret": "",
    }


def test_main_get_not_found(clean_env, capsys):
    clean_env.setattr("sys.stdin", io.StringIO("main.example"))

    with pytest.raises(SystemExit) as exc_info:
        main(["get"])

    assert exc_info.value.code == 1
    assert "DOCKER_CREDENTIALS_ENV_MAIN_EXAMPLE_USER" in capsys.readouterr().out


def test_main_get_optional(clean_env, capsys):
    clean_env.setenv("DOCKER_CREDENTIALS_ENV_OPTIONAL", "true")
    clean_env.setattr("sys.stdin", io.StringIO("main.example"))

    with pytest.raises(SystemExit) as exc_info:
        main(["get"])

    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out)["Username"] == ""


def test_main_logs_stay_off_stdout(clean_env, capsys):
    clean_env.setattr("sys.stdin", io.StringIO('{"ServerURL": "main.example", "Username": "u"}'))

    with pytest.raises(SystemExit) as exc_info:
        main(["store"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == ""


def test_main_usage_names_the_helper(clean_env, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert capsys.readouterr().out == (
        "Usage: docker-credential-env <store|get|erase|list|version>\n"
    )
