import importlib
import sys
import builtins
import types
import logging
import os
from pathlib import Path

import pytest


def _reload_config():
    sys.modules.pop("docscrawl.config", None)
    return importlib.import_module("docscrawl.config")


def test_missing_dotenv_logs_warning(monkeypatch, caplog):
    orig_import = builtins.__import__

    def fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name == "dotenv" or name.startswith("dotenv."):
            raise ImportError
        return orig_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    caplog.set_level(logging.WARNING)
    cfg = _reload_config()
    assert "python-dotenv not available" in caplog.text

    # environment fallback works
    monkeypatch.setenv("DOCSCRAWL_BASE_URL", "https://docs.example.com")
    cfg = _reload_config()
    assert cfg.get_str_env("DOCSCRAWL_BASE_URL", "https://docs.spring.io/spring-boot") == "https://docs.example.com"


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("DOCSCRAWL_BATCH_SIZE=3")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("DOCSCRAWL_BATCH_SIZE=3")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOCSCRAWL_BATCH_SIZE", raising=False)

    def fake_load():
        # emulate dotenv behavior: read .env and set os.environ
        p = Path(".env")
        for line in p.read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                os.environ[k] = v
        return True

    fake = types.SimpleNamespace(load_dotenv=fake_load)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    cfg = _reload_config()
    try:
        assert cfg.get_int_env("DOCSCRAWL_BATCH_SIZE", 5) == 3
    finally:
        os.environ.pop("DOCSCRAWL_BATCH_SIZE", None)


def test_invalid_numbers_fall_back_to_default(monkeypatch, caplog):
    cfg = importlib.import_module("docscrawl.config")
    monkeypatch.setenv("DOCSCRAWL_BATCH_SIZE", "many")
    monkeypatch.setenv("DOCSCRAWL_BATCH_DELAY", "soon")
    assert cfg.get_int_env("DOCSCRAWL_BATCH_SIZE", 5) == 5
    assert cfg.get_float_env("DOCSCRAWL_BATCH_DELAY", 0.5) == 0.5
    assert "Invalid DOCSCRAWL_BATCH_SIZE" in caplog.text


def test_empty_values_are_unset(monkeypatch):
    cfg = importlib.import_module("docscrawl.config")
    monkeypatch.setenv("DOCSCRAWL_OUTPUT_DIR", "")
    assert cfg.get_optional_str_env("DOCSCRAWL_OUTPUT_DIR") is None
    assert cfg.get_str_env("DOCSCRAWL_OUTPUT_DIR", "export") == "export"
