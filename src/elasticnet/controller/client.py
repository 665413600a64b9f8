from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Sequence, Set, Union

from elasticnet.controller.engine import Engine
from elasticnet.model.geometry import Point, PointLike
from elasticnet.model.params import ElasticNetParams


class EngineClient:
    """
    Caller-side facade of the Engine.

    Every command goes through `Engine.dispatch` as a (name, args) message, so
    the client only relies on the message contract.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._solution_listeners: Set[Callable[..., Any]] = set()

    # Commands
    def create(
        self,
        cities: Sequence[PointLike],
        params: Union[ElasticNetParams, Mapping[str, Any], None] = None,
    ) -> None:
        self.engine.dispatch("create", [cities, params])

    def start(self) -> None:
        self.engine.dispatch("start")

    def stop(self) -> None:
        self.engine.dispatch("stop")

    def get_solution(self) -> None:
        self.engine.dispatch("getSolution")

    def set_param(self, name: str, value: Any) -> None:
        self.engine.dispatch("setParam", [name, value])

    # Events
    def on_created(self, listener: Callable[[List[Point], List[Point]], Any]) -> None:
        self.engine.created.connect(listener)

    def on_started(self, listener: Callable[[], Any]) -> None:
        self.engine.started.connect(listener)

    def on_stopped(self, listener: Callable[[], Any]) -> None:
        self.engine.stopped.connect(listener)

    def on_solution(self, listener: Callable[[List[Point]], Any]) -> None:
        if listener in self._solution_listeners:
            return
        self._solution_listeners.add(listener)
        self.engine.solution.connect(listener)

    def remove_on_solution(self, listener: Callable[[List[Point]], Any]) -> None:
        """Detach a solution listener. Unknown listeners are ignored."""
        if listener not in self._solution_listeners:
            return
        self._solution_listeners.discard(listener)
        self.engine.solution.disconnect(listener)


class SolutionHistory:
    """
    Records every ring the engine reports, oldest first.

    The ring of a `created` event starts a new history.
    """

    def __init__(self) -> None:
        self.cities: List[Point] = []
        self._rings: List[List[Point]] = []

    @classmethod
    def attach(cls, client: EngineClient) -> SolutionHistory:
        history = cls()
        client.on_created(history.on_created)
        client.on_solution(history.on_solution)
        return history

    def on_created(self, cities: List[Point], ring: List[Point]) -> None:
        self.cities = list(cities)
        self._rings = [list(ring)]

    def on_solution(self, ring: List[Point]) -> None:
        self._rings.append(list(ring))

    @property
    def latest(self) -> Optional[List[Point]]:
        return self._rings[-1] if self._rings else None

    def clear(self) -> None:
        self.cities = []
        self._rings = []

    def __len__(self) -> int:
        return len(self._rings)

    def __getitem__(self, index: int) -> List[Point]:
        return self._rings[index]
