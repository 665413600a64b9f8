from elasticnet.model.geometry import Point, array_to_points, points_to_array, random_cities
from elasticnet.model.params import ElasticNetParams
