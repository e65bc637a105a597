import logging

from tesstune.logger import ROOT_LOGGER, get_logger


def test_module_loggers_share_package_handler():
    log = get_logger("tesstune.dataset.split")
    other = get_logger("tesstune.ml.train")
    root = logging.getLogger(ROOT_LOGGER)

    assert not log.handlers
    assert not other.handlers
    assert log.propagate and other.propagate
    assert len(root.handlers) == 1
    get_logger("tesstune.scoring.evaluate")
    assert len(root.handlers) == 1


def test_foreign_names_are_nested_under_package():
    assert get_logger("scripts").name == "tesstune.scripts"
    assert get_logger().name == ROOT_LOGGER


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    get_logger("tesstune.pipeline")
    assert logging.getLogger(ROOT_LOGGER).level == logging.WARNING
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    get_logger("tesstune.pipeline")
    assert logging.getLogger(ROOT_LOGGER).level == logging.INFO


def test_records_reach_caplog(caplog):
    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER):
        get_logger("tesstune.dataset.materialize").info("Written to %s: %d", "out", 3)
    assert "Written to out: 3" in caplog.text
