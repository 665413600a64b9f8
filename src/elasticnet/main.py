"""
Application Initialization
==========================
This module wires the Engine to a headless Qt event loop and runs one
Elastic Net computation on random cities.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Sets up logging.
2. Creates the Qt core application (event loop, no GUI).
3. Instantiates the Engine and a client talking to it through messages.
4. Starts the run and reports progress until the engine stops.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication

from elasticnet.config import DEFAULT_PARAMS
from elasticnet.controller.client import EngineClient
from elasticnet.controller.engine import Engine
from elasticnet.logging_config import setup_logging
from elasticnet.model.geometry import Point, random_cities
from elasticnet.model.params import ElasticNetParams
from elasticnet.solvers.tour import tour_length

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elasticnet",
        description="Approximate a closed TSP tour with the Elastic Net heuristic.",
    )
    parser.add_argument("--cities", type=int, default=30, help="number of random cities")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the cities")
    parser.add_argument("--alpha", type=float, default=DEFAULT_PARAMS["alpha"])
    parser.add_argument("--beta", type=float, default=DEFAULT_PARAMS["beta"])
    parser.add_argument("--max-iter", type=int, default=int(DEFAULT_PARAMS["max_num_iter"]))
    parser.add_argument("--report-every", type=int, default=100,
                        help="batches between two progress lines")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--solver-log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="level of the solver loggers (defaults to --log-level)")
    parser.add_argument("--log-file", default=None)
    return parser


class ProgressReporter:
    """Logs the solver state every `every` solution events."""

    def __init__(self, engine: Engine, every: int) -> None:
        self.engine = engine
        self.every = max(1, every)
        self.count = 0

    def on_solution(self, ring: List[Point]) -> None:
        self.count += 1
        if self.count % self.every:
            return
        solver = self.engine.solver
        logger.info(
            f"Iteration {solver.iteration}: k={solver.k:.4f}, "
            f"worst distance={solver.worst_distance:.5f}"
        )


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(
        level=getattr(logging, args.log_level),
        log_file=args.log_file,
        solver_level=getattr(logging, args.solver_log_level) if args.solver_log_level else None,
    )

    if args.cities < 1:
        logger.error("At least one city is required.")
        return 2

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    engine = Engine()
    client = EngineClient(engine)
    reporter = ProgressReporter(engine, args.report_every)
    client.on_solution(reporter.on_solution)
    client.on_stopped(app.quit)

    params = ElasticNetParams(alpha=args.alpha, beta=args.beta, max_num_iter=args.max_iter)
    client.create(random_cities(args.cities, seed=args.seed), params)
    client.start()
    app.exec()

    solver = engine.solver
    order = solver.tour()
    length = tour_length(solver.cities, order)
    logger.info(
        f"Finished after {solver.iteration} iterations "
        f"({reporter.count} batches), worst distance {solver.worst_distance:.5f}."
    )
    print("Tour:", " ".join(str(i) for i in order))
    print(f"Length: {length:.6f}")

    engine.shutdown()
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
