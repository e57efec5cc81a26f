import json
import logging
import os

from docker_credential_env.logging_conf import JsonFormatter


def _record(msg, **extra):
    record = logging.LogRecord("service.helper", logging.INFO, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields_and_extras():
    line = JsonFormatter().format(_record("credentials.get", event="get", server_url="example.com"))
    payload = json.loads(line)

    assert payload["level"] == "INFO"
    assert payload["logger"] == "service.helper"
    assert payload["message"] == "credentials.get"
    assert payload["pid"] == os.getpid()
    assert payload["event"] == "get"
    assert payload["server_url"] == "example.com"
    assert "lineno" not in payload


def test_json_formatter_formats_message_args():
    record = logging.LogRecord("protocol", logging.INFO, __file__, 1, "listed %d servers", (2,), None)
    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "listed 2 servers"
    assert "args" not in payload


def test_json_formatter_does_not_overwrite_core_keys():
    payload = json.loads(JsonFormatter().format(_record("x", pid=-1)))

    assert payload["pid"] == os.getpid()
