import logging

import pytest

from elasticnet.logging_config import ENGINE_LOGGER, SOLVER_LOGGER, reset_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    reset_logging()


def test_subsystem_levels() -> None:
    setup_logging(logging.INFO, solver_level=logging.WARNING)

    package_logger = logging.getLogger("elasticnet")
    assert package_logger.level == logging.INFO
    assert len(package_logger.handlers) == 1
    assert logging.getLogger(SOLVER_LOGGER).level == logging.WARNING
    assert logging.getLogger(ENGINE_LOGGER).level == logging.NOTSET
    assert not logging.getLogger("elasticnet.solvers.elastic_net").isEnabledFor(logging.INFO)
    assert logging.getLogger("elasticnet.controller.engine").isEnabledFor(logging.INFO)


def test_handlers_follow_the_most_verbose_level() -> None:
    setup_logging(logging.WARNING, engine_level=logging.DEBUG)
    handler = logging.getLogger("elasticnet").handlers[0]
    assert handler.level == logging.DEBUG
    assert logging.getLogger("elasticnet.controller.engine").isEnabledFor(logging.DEBUG)


def test_log_file(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    setup_logging(logging.INFO, log_file=str(log_file))
    assert len(logging.getLogger("elasticnet").handlers) == 2

    reset_logging()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")


def test_setup_twice_replaces_handlers() -> None:
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)
    assert len(logging.getLogger("elasticnet").handlers) == 1


def test_reset_logging() -> None:
    setup_logging(logging.DEBUG, solver_level=logging.ERROR, engine_level=logging.ERROR)
    reset_logging()

    assert logging.getLogger("elasticnet").handlers == []
    assert logging.getLogger("elasticnet").level == logging.NOTSET
    assert logging.getLogger(SOLVER_LOGGER).level == logging.NOTSET
    assert logging.getLogger(ENGINE_LOGGER).level == logging.NOTSET
