from elasticnet.solvers.elastic_net import ElasticNetSolver
from elasticnet.solvers.tour import ring_length, tour_length, tour_order
