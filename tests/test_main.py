import logging

import pytest

from elasticnet.logging_config import SOLVER_LOGGER, reset_logging
from elasticnet.main import ProgressReporter, build_parser, run


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    reset_logging()


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.cities == 30
    assert args.alpha == 0.2
    assert args.max_iter == 100000
    assert args.solver_log_level is None


def test_run_prints_tour(capsys: pytest.CaptureFixture) -> None:
    code = run(["--cities", "6", "--seed", "1", "--max-iter", "40", "--log-level", "WARNING"])
    assert code == 0

    out = capsys.readouterr().out
    tour_line = next(line for line in out.splitlines() if line.startswith("Tour:"))
    assert sorted(int(i) for i in tour_line.split()[1:]) == list(range(6))
    assert "Length:" in out


def test_run_applies_solver_log_level() -> None:
    code = run(["--cities", "3", "--seed", "2", "--max-iter", "10",
                "--log-level", "ERROR", "--solver-log-level", "WARNING"])
    assert code == 0
    assert logging.getLogger(SOLVER_LOGGER).level == logging.WARNING


def test_run_rejects_empty_city_set() -> None:
    assert run(["--cities", "0", "--log-level", "ERROR"]) == 2


def test_logging_is_restored_between_tests() -> None:
    # Runs after the CLI tests above, which all install handlers
    package_logger = logging.getLogger("elasticnet")
    assert package_logger.handlers == []
    assert package_logger.level == logging.NOTSET


class _FakeSolver:
    iteration = 10
    k = 0.1
    worst_distance = 0.5


class _FakeEngine:
    solver = _FakeSolver()


def test_progress_reporter_counts_solution_events(caplog: pytest.LogCaptureFixture) -> None:
    reporter = ProgressReporter(_FakeEngine(), every=2)
    with caplog.at_level(logging.INFO, logger="elasticnet.main"):
        for _ in range(5):
            reporter.on_solution([])

    assert reporter.count == 5
    assert sum("Iteration 10" in r.getMessage() for r in caplog.records) == 2
