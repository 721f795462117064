import logging

import pytest

from cloudusage.log import setup_logger
from cloudusage.parseargs import argp


@pytest.fixture
def root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    yield root
    for handler in root.handlers:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


def own_handlers(root):
    return [h for h in root.handlers if getattr(h, "cloudusage", False)]


def test_log_file_under_data_dir(tmp_path, monkeypatch, root_handlers):
    monkeypatch.chdir(tmp_path)

    log_file = setup_logger("cloud_usage")
    logging.debug("written to the file only")

    assert log_file.parent == tmp_path / "data" / "cloud_usage" / "logs"
    levels = sorted(h.level for h in own_handlers(root_handlers))
    assert levels == [logging.DEBUG, logging.INFO]
    for handler in own_handlers(root_handlers):
        handler.flush()
    assert "written to the file only" in log_file.read_text()


def test_setup_twice_does_not_duplicate(tmp_path, monkeypatch, root_handlers):
    monkeypatch.chdir(tmp_path)

    setup_logger("cloud_usage")
    setup_logger("cloud_usage")

    assert len(own_handlers(root_handlers)) == 2


def test_debug_flag_lowers_console(tmp_path, monkeypatch, root_handlers):
    monkeypatch.chdir(tmp_path)
    setup_logger("cloud_usage")

    args = argp(script_name="cloud_usage", parse=False)
    args.parse(["-cl", "cluster1", "-de"])

    assert all(h.level == logging.DEBUG for h in own_handlers(root_handlers))
