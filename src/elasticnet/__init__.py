"""Elastic Net approximation of the Euclidean Traveling Salesman Problem."""
from elasticnet.model.geometry import Point
from elasticnet.model.params import ElasticNetParams
from elasticnet.solvers.elastic_net import ElasticNetSolver
from elasticnet.controller.engine import Engine
from elasticnet.controller.client import EngineClient, SolutionHistory

__all__ = [
    "Point",
    "ElasticNetParams",
    "ElasticNetSolver",
    "Engine",
    "EngineClient",
    "SolutionHistory",
]
