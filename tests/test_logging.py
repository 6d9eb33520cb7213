import logging

import pytest

from wrua_forum_api.app.core.logging_config import installed_handlers, setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    previous = installed_handlers()
    level = root.level
    for handler in previous:
        root.removeHandler(handler)
    yield root
    for handler in installed_handlers():
        root.removeHandler(handler)
        handler.close()
    for handler in previous:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_installs_handlers_once(clean_root, tmp_path) -> None:
    logfile = tmp_path / "logs" / "api.log"
    setup_logging("debug", str(logfile))
    setup_logging("warning", str(logfile))

    assert len(installed_handlers()) == 2
    assert clean_root.level == logging.WARNING

    logging.getLogger("wrua_forum_api.test").warning("river level rising")
    for handler in installed_handlers():
        handler.flush()
    line = logfile.read_text(encoding="utf-8").strip()
    assert line.endswith("[WARNING] wrua_forum_api.test: river level rising")


def test_unknown_level_means_info(clean_root) -> None:
    setup_logging("chatty")
    assert clean_root.level == logging.INFO
    assert len(installed_handlers()) == 1
