"""Run settings shared by all algorithms, plus per-algorithm extras."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Settings common to every population-based minimiser.

    ``max_iterations`` is the largest number of iterations to run.
    ``absolute_tol`` is the largest improvement between two iterations
    for which their costs still count as the same; zero means machine
    precision. ``max_iterations_same_cost`` is how many consecutive
    iterations at the same cost are allowed before the run stops.
    ``population_size`` is the number of individuals.
    """

    max_iterations: int = 0
    absolute_tol: float = 0.0
    max_iterations_same_cost: int = 0
    population_size: int = 0


@dataclass
class ABCConfig(Config):
    """Settings for the artificial bee colony algorithm.

    ``employed_fraction`` is the share of the colony made of employed
    bees, which is also the number of food sources; ``n_scout`` is the
    number of scout bees.
    """

    employed_fraction: float = 0.5
    n_scout: int = 1


@dataclass
class BATConfig(Config):
    """Settings for the bat algorithm.

    ``alpha`` in [0, 1] controls how quickly the loudness decays and
    ``gamma`` how quickly the pulse rate grows; bats fly with a frequency
    drawn from [``freq_min``, ``freq_max``).
    """

    initial_loudness: float = 0.0
    alpha: float = 0.0
    initial_pulse_rate: float = 0.0
    gamma: float = 0.0
    freq_min: float = 0.0
    freq_max: float = 0.0


@dataclass
class CSConfig(Config):
    """Settings for the cuckoo search algorithm.

    ``discovery_rate`` is the fraction of nests abandoned each iteration
    and ``step_size`` scales the Lévy flights.
    """

    discovery_rate: float = 0.0
    step_size: float = 0.0