"""
Elastic Net Parameters
======================
This module defines the tunable parameter set of the solver.

Why is this file needed?
------------------------
1. Single source of truth: The solver reads every tunable from one object,
   so a change made between two iterations is picked up by the next one.
2. Wire compatibility: Callers may address a parameter by its camelCase
   message name ('kAlpha') or by the Python attribute ('k_alpha').

Classes:
    ElasticNetParams: Mutable parameter container.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Mapping

from elasticnet.config import DEFAULT_PARAMS, PARAM_ALIASES


@dataclass
class ElasticNetParams:
    """
    Tunables of the Elastic Net heuristic.

    Attributes:
        alpha: Gain of the attraction force towards the cities.
        beta: Gain of the tension (ring length) force.
        initial_k: Initial neighborhood radius of the gaussian weighting.
        epsilon: Convergence threshold on the worst city distance.
        k_alpha: Multiplier applied to k at every decay.
        k_update_period: Iterations between two decays of k.
        max_num_iter: Hard iteration cap.
        num_points_factor: Ring points per city.
        radius: Radius of the initial ring around the city centroid.
    """
    alpha: float = DEFAULT_PARAMS["alpha"]
    beta: float = DEFAULT_PARAMS["beta"]
    initial_k: float = DEFAULT_PARAMS["initial_k"]
    epsilon: float = DEFAULT_PARAMS["epsilon"]
    k_alpha: float = DEFAULT_PARAMS["k_alpha"]
    k_update_period: int = int(DEFAULT_PARAMS["k_update_period"])
    max_num_iter: int = int(DEFAULT_PARAMS["max_num_iter"])
    num_points_factor: float = DEFAULT_PARAMS["num_points_factor"]
    radius: float = DEFAULT_PARAMS["radius"]

    @staticmethod
    def resolve_name(name: str) -> str:
        """Map a wire name or an attribute name onto the attribute name."""
        if name in PARAM_ALIASES:
            return PARAM_ALIASES[name]
        if name in DEFAULT_PARAMS:
            return name
        raise KeyError(f"Unknown parameter: '{name}'")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ElasticNetParams:
        """Build a parameter set; missing entries keep their defaults."""
        params = cls()
        for name, value in data.items():
            params.set(name, value)
        return params

    def get(self, name: str) -> Any:
        return getattr(self, self.resolve_name(name))

    def set(self, name: str, value: Any) -> None:
        setattr(self, self.resolve_name(name), value)

    def to_dict(self) -> Dict[str, Any]:
        """Parameters keyed by their wire names."""
        values = asdict(self)
        return {wire: values[attr] for wire, attr in PARAM_ALIASES.items()}

    def copy(self) -> ElasticNetParams:
        return replace(self)
