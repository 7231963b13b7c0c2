import logging

import pytest

from sitemap_batcher.logger import LOGGER_NAME, configure, get_logger, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging()


def test_child_loggers_share_the_project_tree():
    assert get_logger().name == LOGGER_NAME
    assert get_logger("crawler").name == f"{LOGGER_NAME}.crawler"
    assert get_logger("crawler").parent is logging.getLogger(LOGGER_NAME)


def test_file_output_and_handler_replacement(tmp_path):
    log_file = tmp_path / "run.log"
    root = init_logging(level="DEBUG", log_file=log_file)

    assert root.level == logging.DEBUG
    assert not root.propagate
    assert len(root.handlers) == 2

    get_logger("exporter").debug("Exported %d batches", 3)
    for handler in root.handlers:
        handler.flush()
    assert "DEBUG    | SitemapBatcher.exporter | Exported 3 batches" in log_file.read_text(encoding="utf-8")

    assert len(init_logging().handlers) == 1
    assert len(configure(replace_handlers=False).handlers) == 2


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        configure(level="verbose")
