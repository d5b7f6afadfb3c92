import sys

import pytest

from evomin.individual import Individual
from evomin.population import Population
from evomin.space import Constraint, OOBMethod, SearchSpace


def _space(*ranges, integer=False):
    space = SearchSpace(len(ranges))
    for i, (lo, hi) in enumerate(ranges):
        space.set_parameter(i, f"x{i}", lo, hi, integer)
    space.set_seed(11)
    return space


def _population(obj=sum, ranges=((0.0, 10.0),), integer=False):
    pop = Population(obj)
    pop.search_space = _space(*ranges, integer=integer)
    pop.set_seed(3)
    return pop


def _individual(*values):
    ind = Individual(len(values))
    ind.position = list(values)
    return ind


class _Moving(Individual):
    has_velocity = True

    def __init__(self, dimension=0):
        super().__init__(dimension)
        self.velocity = [0.0] * dimension

    def get_velocity(self, index):
        return self.velocity[index]

    def set_velocity(self, index, value):
        self.velocity[index] = value


def test_scale_penalty_coeff_grows_then_caps():
    pop = _population()
    pop.penalty_coeff = 3.0
    pop.penalty_scaling = 2.0
    pop.max_penalty_coeff = 10.0
    pop.scale_penalty_coeff()
    assert pop.penalty_coeff == pytest.approx(6.0)
    pop.scale_penalty_coeff()
    assert pop.penalty_coeff == pop.max_penalty_coeff


def test_violates_constraints():
    pop = _population()
    pop.constraints = [Constraint(lambda x: x[0] - 1.0, "<=")]
    assert pop.violates_constraints([0.5]) is False
    assert pop.violates_constraints([2.0]) is True


def test_barrier_cost():
    pop = _population()
    pop.constraints = [Constraint(lambda x: x[0] - 1.0, "<=")]
    assert pop.barrier_cost([2.0]) == sys.float_info.max
    assert pop.barrier_cost([0.5]) == pytest.approx(0.5)


def test_penalty_cost_adds_scaled_violation():
    pop = _population()
    pop.constraints = [Constraint(lambda x: x[0] - 1.0, "<=")]
    assert pop.penalty_cost([0.5]) == pytest.approx(0.5)
    excess = pop.penalty_cost([2.0]) - 2.0
    assert excess == pytest.approx(pop.penalty_coeff * 1.0)


def test_penalty_cost_subtracts_for_maximization():
    pop = _population()
    pop.maximization = True
    pop.constraints = [Constraint(lambda x: x[0] - 1.0, "<=")]
    assert pop.penalty_cost([2.0]) - 2.0 == pytest.approx(-pop.penalty_coeff)


def test_evaluate_cost_methods():
    pop = _population()
    pop.constraints = [Constraint(lambda x: x[0] - 1.0, "<=")]
    pop.constrained_method = "PENALTY"
    assert pop.evaluate_cost([2.0]) == pytest.approx(pop.penalty_cost([2.0]))
    pop.constrained_method = "BARRIER"
    assert pop.evaluate_cost([2.0]) == sys.float_info.max


def test_evaluate_cost_negates_for_maximization():
    pop = _population()
    pop.maximization = True
    assert pop.evaluate_cost([4.0]) == pytest.approx(-4.0)


def test_evaluate_cost_rounds_integer_parameters_half_away():
    pop = _population(ranges=((0.0, 5.0),), integer=True)
    x = [2.5]
    pop.evaluate_cost(x)
    assert x == [3.0]


def test_evaluate_cost_integer_rounding_stays_in_range():
    pop = _population(ranges=((0.5, 3.0),), integer=True)
    x = [0.4]
    value = pop.evaluate_cost(x)
    assert x == [1.0]
    assert value == pytest.approx(x[0])


def test_evaluate_cost_regenerates_violating_point():
    pop = _population()
    pop.constraints = [Constraint(lambda x: x[0] - 1.0, "<=")]
    pop.search_space.constraints = pop.constraints
    pop.search_space.constrained_init = True
    x = [5.0]
    value = pop.evaluate_cost(x)
    assert x[0] <= 1.0
    assert value == pytest.approx(x[0])


def test_check_boundary_bab_clamps():
    pop = _population(ranges=((0.0, 10.0), (0.0, 10.0)))
    pop.oob_method = OOBMethod.BAB
    ind = _individual(-3.0, 14.0)
    pop.check_boundary(ind)
    assert ind.position == [0.0, 10.0]


def test_check_boundary_rbc_reflects_and_reverses_velocity():
    pop = _population(ranges=((0.0, 10.0), (0.0, 10.0)))
    pop.oob_method = OOBMethod.RBC
    ind = _Moving(2)
    ind.position = [-1.0, 12.0]
    ind.velocity = [0.5, -2.0]
    pop.check_boundary(ind)
    assert ind.position == pytest.approx([1.0, 8.0])
    assert ind.velocity == [-0.5, 2.0]


def test_check_boundary_pbc_wraps():
    pop = _population(ranges=((0.0, 10.0), (0.0, 10.0)))
    pop.oob_method = OOBMethod.PBC
    ind = _individual(-1.0, 11.0)
    pop.check_boundary(ind)
    assert ind.position == pytest.approx([9.0, 1.0])


def test_check_boundary_pbc_far_out_lands_inside():
    pop = _population()
    pop.oob_method = OOBMethod.PBC
    ind = _individual(-25.0)
    pop.check_boundary(ind)
    assert 0.0 <= ind[0] <= 10.0


def test_check_boundary_dis_replaces_only_out_of_bounds():
    pop = _population(ranges=((0.0, 10.0), (0.0, 10.0)))
    pop.oob_method = OOBMethod.DIS
    ind = _individual(4.0, 30.0)
    pop.check_boundary(ind)
    assert ind[0] == 4.0
    assert 0.0 <= ind[1] <= 10.0


def test_check_boundary_dis_with_constraints_regenerates_whole_point():
    pop = _population(ranges=((0.0, 10.0), (0.0, 10.0)))
    pop.oob_method = OOBMethod.DIS
    pop.constraints = [Constraint(lambda x: x[0] - 100.0, "<=")]
    ind = _individual(4.0, 5.0)
    pop.check_boundary(ind)
    assert ind.position != [4.0, 5.0]
    assert all(0.0 <= v <= 10.0 for v in ind.position)


def test_seeded_populations_are_reproducible():
    results = []
    for _ in range(2):
        pop = _population()
        pop.set_seed(7)
        pop.oob_method = OOBMethod.DIS
        ind = _individual(20.0)
        pop.check_boundary(ind)
        results.append(ind[0])
    assert results[0] == results[1]
    assert 0.0 <= results[0] <= 10.0


def test_seed_zero_keeps_generator():
    pop = _population()
    generator = pop.random
    pop.set_seed(0)
    assert pop.random is generator