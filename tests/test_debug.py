"""
Tests for the DebugManager logging wrapper.
"""

import pytest

from connect_four.debug import DebugLevel, DebugManager, debug


@pytest.fixture
def manager(tmp_path):
    """A manager with its own logger, writing to a temporary file."""
    log_file = tmp_path / "connect_four.log"
    mgr = DebugManager(name=f"connect_four.test.{tmp_path.name}")
    mgr.configure(level=DebugLevel.DEBUG, log_file=str(log_file))
    yield mgr, log_file
    mgr.configure(log_file="")


def read_log(log_file):
    return log_file.read_text()


def test_messages_at_or_below_level_are_written(manager):
    mgr, log_file = manager
    mgr.info("game started", "engine")
    mgr.debug("landing row 5", "board")
    mgr.trace("too detailed", "board")

    text = read_log(log_file)
    assert "[engine] game started" in text
    assert "[board] landing row 5" in text
    assert "too detailed" not in text


def test_trace_level_includes_trace_messages(manager):
    mgr, log_file = manager
    mgr.configure(level=DebugLevel.TRACE)
    mgr.trace("every cell", "board")
    assert "TRACE: [board] every cell" in read_log(log_file)


def test_component_filter(manager):
    mgr, log_file = manager
    mgr.configure(components=["engine"])
    mgr.info("kept", "engine")
    mgr.info("dropped", "cli")

    text = read_log(log_file)
    assert "kept" in text
    assert "dropped" not in text


def test_disabled_and_none_level_log_nothing(manager):
    mgr, log_file = manager
    mgr.configure(enabled=False)
    mgr.error("hidden while disabled")
    mgr.configure(enabled=True, level=DebugLevel.NONE)
    mgr.error("hidden at NONE")
    assert read_log(log_file) == ""


def test_set_from_string(manager):
    mgr, _ = manager
    assert mgr.set_from_string("error")
    assert mgr.level == DebugLevel.ERROR
    assert not mgr.set_from_string("verbose")
    assert mgr.level == DebugLevel.ERROR


def test_timer_reports_elapsed_time(manager):
    mgr, _ = manager
    mgr.start_timer("win_check")
    elapsed = mgr.end_timer("win_check")
    assert elapsed is not None and elapsed >= 0
    assert mgr.end_timer("win_check") is None


def test_shared_instance_uses_package_logger():
    assert debug.logger.name == "connect_four"
    assert not debug.logger.propagate
