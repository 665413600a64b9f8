"""
Elastic Net Engine
==================
This module drives an ElasticNetSolver from a stream of commands.

Why is this file needed?
------------------------
1. Responsiveness: The solver runs inside the caller's Qt event loop, in
   batches of a few iterations, so the host never freezes.
2. Signals: Results and state changes are reported through Qt Signals, the
   same way a background worker reports progress to the GUI.
3. Lifecycle: The engine owns exactly one solver at a time and guarantees
   that a stopped or replaced run never advances again.

Classes:
    Engine: Command/event surface around the solver.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from PySide6.QtCore import QObject, Signal

from elasticnet.config import BATCH_SIZE
from elasticnet.controller.scheduling import DeferredCall
from elasticnet.model.geometry import PointLike
from elasticnet.model.params import ElasticNetParams
from elasticnet.solvers.elastic_net import ElasticNetSolver

logger = logging.getLogger(__name__)

ParamsLike = Union[ElasticNetParams, Mapping[str, Any], None]


class Engine(QObject):
    # Signals to report back to the caller
    created = Signal(object, object)  # (cities, ring)
    started = Signal()
    stopped = Signal()
    solution = Signal(object)  # (ring,)

    # Message name -> method name
    COMMANDS = {
        "create": "create",
        "start": "start",
        "stop": "stop",
        "getSolution": "get_solution",
        "get_solution": "get_solution",
        "setParam": "set_param",
        "set_param": "set_param",
    }

    def __init__(self, parent: Optional[QObject] = None, batch_size: int = BATCH_SIZE) -> None:
        super().__init__(parent)
        self.batch_size = batch_size
        self._solver: Optional[ElasticNetSolver] = None
        self._running = False
        self._continuation = DeferredCall(self._run_batch, parent=self)

    @property
    def solver(self) -> Optional[ElasticNetSolver]:
        return self._solver

    @property
    def is_running(self) -> bool:
        return self._running

    def dispatch(self, name: str, args: Sequence[Any] = ()) -> None:
        """
        Route a command message to its handler.

        Args:
            name: Command name ('create', 'start', 'stop', 'getSolution', 'setParam').
            args: Positional arguments of the command.
        """
        method_name = self.COMMANDS.get(name)
        if method_name is None:
            raise ValueError(f"Unknown command: '{name}'")
        getattr(self, method_name)(*args)

    def create(self, cities: Sequence[PointLike], params: ParamsLike = None) -> None:
        """Replace the solver with a fresh one and report its initial ring."""
        self._continuation.cancel()
        self._running = False

        if params is None:
            params = ElasticNetParams()
        elif not isinstance(params, ElasticNetParams):
            params = ElasticNetParams.from_dict(params)

        self._solver = ElasticNetSolver(cities, params)
        logger.info(
            f"Created elastic net: {self._solver.num_cities} cities, "
            f"{self._solver.num_points} ring points."
        )
        self.created.emit(self._solver.city_points(), self._solver.solution())

    def set_param(self, name: str, value: Any) -> None:
        """Write into the live parameters; the next iteration picks it up."""
        if self._solver is None:
            logger.debug(f"Ignoring setParam('{name}') without a solver.")
            return
        self._solver.params.set(name, value)
        logger.debug(f"Parameter '{name}' set to {value}.")

    def get_solution(self) -> None:
        self.solution.emit(self._require_solver().solution())

    def start(self) -> None:
        solver = self._require_solver()
        if self._running:
            logger.debug("Engine already running, start ignored.")
            return

        self._running = True
        logger.info(f"Starting at iteration {solver.iteration}.")
        # Armed before the signal so that a listener calling stop() or create() cancels it
        self._continuation.schedule()
        self.started.emit()

    def stop(self) -> None:
        self._continuation.cancel()
        if self._running:
            logger.info(f"Stopped at iteration {self._solver.iteration}.")
        self._running = False
        self.stopped.emit()

    def shutdown(self) -> None:
        """Cancel any pending batch and release the solver."""
        self._continuation.cancel()
        self._running = False
        self._solver = None
        logger.debug("Engine shut down.")

    def _require_solver(self) -> ElasticNetSolver:
        if self._solver is None:
            raise RuntimeError("No elastic net created yet, send 'create' first.")
        return self._solver

    def _run_batch(self) -> None:
        if not self._running or self._solver is None:
            return

        solver = self._solver
        count = 0
        done = False

        while not done and count < self.batch_size:
            done = solver.advance()
            count += 1

        logger.debug(
            f"Batch finished: iteration={solver.iteration}, k={solver.k:.4f}, "
            f"worst distance={solver.worst_distance:.5f}"
        )
        self.solution.emit(solver.solution())

        # A listener may have stopped the run or replaced the solver meanwhile
        if not self._running or solver is not self._solver:
            return

        if done:
            logger.info(
                f"Converged after {solver.iteration} iterations "
                f"(worst distance {solver.worst_distance:.5f})."
            )
            self.stop()
        else:
            self._continuation.schedule()
