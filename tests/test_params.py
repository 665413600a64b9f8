import pytest

from elasticnet.model.params import ElasticNetParams


def test_defaults() -> None:
    params = ElasticNetParams()
    assert params.alpha == 0.2
    assert params.beta == 0.2
    assert params.initial_k == 0.2
    assert params.epsilon == 0.02
    assert params.k_alpha == 0.99
    assert params.k_update_period == 25
    assert params.max_num_iter == 100000
    assert params.num_points_factor == 2.5
    assert params.radius == 0.1


def test_wire_and_attribute_names() -> None:
    params = ElasticNetParams()
    params.set("kAlpha", 0.5)
    params.set("max_num_iter", 10)
    assert params.k_alpha == 0.5
    assert params.get("maxNumIter") == 10
    assert params.get("k_alpha") == 0.5


def test_unknown_name_raises() -> None:
    params = ElasticNetParams()
    with pytest.raises(KeyError):
        params.set("gamma", 1.0)
    with pytest.raises(KeyError):
        params.get("gamma")


def test_from_dict_and_to_dict() -> None:
    params = ElasticNetParams.from_dict({"alpha": 0.3, "numPointsFactor": 2})
    assert params.alpha == 0.3
    assert params.num_points_factor == 2
    assert params.beta == 0.2

    wire = params.to_dict()
    assert set(wire) == {
        "alpha", "beta", "initialK", "epsilon", "kAlpha",
        "kUpdatePeriod", "maxNumIter", "numPointsFactor", "radius",
    }
    assert wire["numPointsFactor"] == 2
    assert ElasticNetParams.from_dict(wire) == params


def test_copy_is_independent() -> None:
    params = ElasticNetParams()
    clone = params.copy()
    clone.alpha = 0.9
    assert params.alpha == 0.2
