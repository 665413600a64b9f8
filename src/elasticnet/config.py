"""
Configuration & Global Constants
================================
This module serves as the central registry for tuning constants and the
default parameter set of the Elastic Net solver.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (batch size, radius floor)
   scattered throughout the solver and the engine.
2. Wire names: Callers speak the camelCase parameter identifiers of the
   message contract, while the Python code uses snake_case attributes.
   The alias table below is the single place where the two meet.

Exports:
    BATCH_SIZE (int): Iterations run back-to-back before yielding.
    K_FLOOR (float): Lower bound of the neighborhood radius k.
    DEFAULT_PARAMS (dict): Default parameter values keyed by attribute name.
    PARAM_ALIASES (dict): Wire name -> attribute name.
"""
from typing import Dict

# Iterations per batch between two yields to the host event loop
BATCH_SIZE: int = 5

# k never drops below this, keeps the gaussian denominator away from zero
K_FLOOR: float = 0.01

DEFAULT_PARAMS: Dict[str, float] = {
    "alpha": 0.2,
    "beta": 0.2,
    "initial_k": 0.2,
    "epsilon": 0.02,
    "k_alpha": 0.99,
    "k_update_period": 25,
    "max_num_iter": 100000,
    "num_points_factor": 2.5,
    "radius": 0.1,
}

PARAM_ALIASES: Dict[str, str] = {
    "alpha": "alpha",
    "beta": "beta",
    "initialK": "initial_k",
    "epsilon": "epsilon",
    "kAlpha": "k_alpha",
    "kUpdatePeriod": "k_update_period",
    "maxNumIter": "max_num_iter",
    "numPointsFactor": "num_points_factor",
    "radius": "radius",
}
