from __future__ import annotations

import logging
import os

import pytest

from meshbridge.shared.env import load_secret_file_variables


def _unset(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.delenv(key, raising=False)


def test_load_secret_file_variables_reads_content(tmp_path, monkeypatch):
    secret_file = tmp_path / "token.txt"
    secret_file.write_text("s3cr3t\n", encoding="utf-8")

    monkeypatch.setenv("REGISTRY_TOKEN_FILE", str(secret_file))
    _unset(monkeypatch, "REGISTRY_TOKEN")

    resolved = load_secret_file_variables()

    assert os.environ["REGISTRY_TOKEN"] == "s3cr3t"
    assert "REGISTRY_TOKEN" in resolved


def test_load_secret_file_variables_uses_given_mapping(tmp_path):
    secret_file = tmp_path / "token.txt"
    secret_file.write_text("abc", encoding="utf-8")
    environ = {"APP_SECRET_FILE": str(secret_file)}

    resolved = load_secret_file_variables(environ)

    assert environ["APP_SECRET"] == "abc"
    assert resolved == ["APP_SECRET"]


def test_load_secret_file_variables_logs_missing_file(caplog):
    environ = {"MISSING_SECRET_FILE": "/tmp/does-not-exist-meshbridge"}

    with caplog.at_level(logging.WARNING):
        resolved = load_secret_file_variables(environ)

    assert resolved == []
    assert "MISSING_SECRET" not in environ
    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_load_secret_file_variables_handles_decode_error(tmp_path, caplog):
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")
    environ = {"BINARY_SECRET_FILE": str(binary_file)}

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(environ)

    assert "BINARY_SECRET" not in environ
    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_load_secret_file_variables_skips_existing_target():
    environ = {"EXISTING_SECRET": "present", "EXISTING_SECRET_FILE": "/tmp/ignored"}

    assert load_secret_file_variables(environ) == []
    assert environ["EXISTING_SECRET"] == "present"


def test_load_secret_file_variables_skips_empty_path():
    environ = {"EMPTY_SECRET_FILE": ""}

    load_secret_file_variables(environ)

    assert "EMPTY_SECRET" not in environ
