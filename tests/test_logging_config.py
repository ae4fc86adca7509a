"""Root logger setup shared by the API and the reindex command."""

import logging

import pytest

from supergooalros_api.app.core import logging_config


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    yield root
    for handler in root.handlers:
        handler.close()


def test_log_file_is_resolved_like_data_files(bare_root, tmp_path, monkeypatch):
    monkeypatch.setattr(logging_config, "resolve_data_path", lambda url: str(tmp_path / "var" / url))

    logging_config.setup_logging("debug", "api.log")

    file_handlers = [h for h in bare_root.handlers if isinstance(h, logging.FileHandler)]
    assert [h.baseFilename for h in file_handlers] == [str(tmp_path / "var" / "api.log")]
    assert (tmp_path / "var").is_dir()
    assert bare_root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(bare_root):
    logging_config.setup_logging("chatty")

    assert bare_root.level == logging.INFO
    assert len(bare_root.handlers) == 1


def test_second_call_keeps_existing_handlers(bare_root):
    logging_config.setup_logging("INFO")
    logging_config.setup_logging("DEBUG")

    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.INFO
