"""Unit tests for session log setup."""

import pytest
from loguru import logger

from tailor.contexts.templating.logger import (
    _log_debug,
    _log_info,
    _log_warning,
    setup_templating_logger,
)


@pytest.fixture
def reset_logger():
    yield
    logger.remove()


@pytest.mark.unit
def test_session_log_has_provenance_and_prefix(tmp_path, reset_logger):
    """The log file starts with the run header and records prefixed messages."""
    log_file = setup_templating_logger(tmp_path / "export_session", phase="build")
    _log_warning("Template not found")

    assert log_file == tmp_path / "export_session" / "template.log"
    content = log_file.read_text(encoding="utf-8")
    assert "TAILOR" in content
    assert "(template)" in content
    assert "Phase: build" in content
    assert "[template] Template not found" in content


@pytest.mark.unit
def test_debug_messages_reach_file_only(tmp_path, reset_logger, capsys, monkeypatch):
    """DEBUG goes to the session file; the console starts at INFO."""
    monkeypatch.setattr("tailor.utils.logger.CONSOLE_LEVEL", "INFO")
    log_file = setup_templating_logger(tmp_path / "export_session")
    _log_debug("No placeholders left for the raw pass")
    _log_info("Exported from template")

    content = log_file.read_text(encoding="utf-8")
    assert "[template] No placeholders left for the raw pass" in content
    console = capsys.readouterr().err
    assert "[template] Exported from template" in console
    assert "No placeholders left" not in console
