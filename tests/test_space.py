import pytest

from evomin.rng import Random
from evomin.space import (
    Constraint,
    OOBMethod,
    Parameter,
    SearchSpace,
    violates_any,
)


def _space(seed=17):
    space = SearchSpace(3)
    space.set_seed(seed)
    space.set_parameter(0, "x", -1.0, 1.0, False)
    space.set_parameter(1, "y", 10.0, 20.0, False)
    space.set_parameter(2, "", 0.0, 5.0, True)
    return space


@pytest.mark.parametrize(
    "inequality,value,violated",
    [
        ("<", -1.0, False),
        ("<", 0.0, True),
        ("<=", 0.0, False),
        ("<=", 0.5, True),
        (">=", 0.0, False),
        (">=", -0.5, True),
        (">", 0.1, False),
        (">", 0.0, True),
    ],
)
def test_constraint_inequalities(inequality, value, violated):
    c = Constraint(lambda x: x[0], inequality)
    assert c.is_violated([value]) is violated


def test_constraint_accepts_sequence_result():
    c = Constraint(lambda x: [x[0] - 1.0, 100.0], "<")
    assert c.is_violated([2.0])
    assert not c.is_violated([0.0])


def test_violates_any():
    constraints = [
        Constraint(lambda x: x[0], ">="),
        Constraint(lambda x: x[1], "<="),
    ]
    assert not violates_any(constraints, [1.0, -1.0])
    assert violates_any(constraints, [1.0, 1.0])
    assert violates_any(constraints, [-1.0, -1.0])
    assert not violates_any([], [5.0])


def test_oob_method_from_name():
    assert OOBMethod("PBC") is OOBMethod.PBC
    with pytest.raises(ValueError):
        OOBMethod("XYZ")


def test_parameter_width():
    assert Parameter("a", -2.0, 3.0).width() == pytest.approx(5.0)
    assert Parameter().width() == 0.0


def test_set_parameter_names_and_ranges():
    space = _space()
    assert len(space) == 3
    assert space[0].name == "x"
    assert space[2].name == "p2"
    assert space[2].integer
    assert (space[1].min_val, space[1].max_val) == (10.0, 20.0)


def test_random_component_in_range():
    space = _space()
    values = [space.random_component(1) for _ in range(200)]
    assert all(10.0 <= v < 20.0 for v in values)


def test_random_point_in_box():
    space = _space()
    for _ in range(100):
        point = space.random_point()
        assert len(point) == 3
        for value, par in zip(point, space.parameters):
            assert par.min_val <= value < par.max_val


def test_seed_reproducible():
    first = _space(5).random_point()
    second = _space(5).random_point()
    assert first == second
    rng = Random(5)
    expected = [rng.rand(-1.0, 1.0), rng.rand(10.0, 20.0), rng.rand(0.0, 5.0)]
    assert first == expected


def test_seeded_space_uses_seeded_generator():
    space = SearchSpace(1)
    space.set_seed(77)
    space.set_parameter(0, "a", 0.0, 1.0, False)
    assert space.rand() == Random(77).rand()


def test_constrained_init_respects_constraints():
    space = _space()
    space.constraints = [Constraint(lambda x: x[0], "<")]
    space.constrained_init = True
    points = [space.random_point() for _ in range(100)]
    assert all(p[0] < 0 for p in points)


def test_unconstrained_init_ignores_constraints():
    space = _space()
    space.constraints = [Constraint(lambda x: x[0], "<")]
    points = [space.random_point() for _ in range(200)]
    assert any(p[0] >= 0 for p in points)


def test_custom_generator():
    space = _space()
    space.set_generator(lambda: [0.25, 15, 3])
    assert space.random_point() == [0.25, 15.0, 3.0]


def test_custom_generator_with_constraints_retries():
    candidates = iter([[5.0], [4.0], [-1.0]])
    space = SearchSpace(1)
    space.set_generator(lambda: next(candidates))
    space.constraints = [Constraint(lambda x: x[0], "<=")]
    space.constrained_init = True
    assert space.random_point() == [-1.0]


def test_rand_unit_interval():
    space = _space()
    values = [space.rand() for _ in range(100)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        SearchSpace(2)[2]