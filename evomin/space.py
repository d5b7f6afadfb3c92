"""Parameters, constraints and the search space they span."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from evomin.rng import Random


class OOBMethod(enum.Enum):
    """How to treat a solution that falls outside the parameter bounds."""

    PBC = "PBC"  # periodic boundary condition
    RBC = "RBC"  # reflective boundary condition
    BAB = "BAB"  # back at boundaries
    DIS = "DIS"  # disregard and regenerate


def _first_value(result: object) -> float:
    if isinstance(result, (list, tuple)):
        return float(result[0])
    return float(result)  # type: ignore[arg-type]


@dataclass
class Constraint:
    """A constraint ``func(x) <inequality> 0``."""

    func: Callable[[list[float]], float]
    inequality: str = "<="

    def is_violated(self, x: Sequence[float]) -> bool:
        """Return whether the point ``x`` violates this constraint."""
        value = _first_value(self.func(list(x)))
        if self.inequality == "<":
            return value >= 0
        if self.inequality == "<=":
            return value > 0
        if self.inequality == ">=":
            return value < 0
        if self.inequality == ">":
            return value <= 0
        return False


def violates_any(constraints: Iterable[Constraint], x: Sequence[float]) -> bool:
    """Return whether ``x`` violates at least one of ``constraints``."""
    return any(c.is_violated(x) for c in constraints)


@dataclass
class Parameter:
    """A named parameter with a range, possibly restricted to integers."""

    name: str = ""
    min_val: float = 0.0
    max_val: float = 0.0
    integer: bool = False

    def width(self) -> float:
        """Return the width of the parameter range."""
        return self.max_val - self.min_val


@dataclass
class _Generator:
    func: Callable[[], Sequence[float]]


class SearchSpace:
    """The box spanned by the parameters, with a random point generator."""

    def __init__(self, n: int = 0) -> None:
        self.parameters: list[Parameter] = [Parameter() for _ in range(n)]
        self.constraints: list[Constraint] = []
        self.constrained_init: bool = False
        self._random = Random()
        self._generator: _Generator | None = None

    def set_seed(self, seed: int) -> None:
        """Reseed the generator; a seed of zero keeps the current one."""
        if seed > 0:
            self._random = Random(seed)

    def set_parameter(
        self,
        index: int,
        name: str,
        min_val: float,
        max_val: float,
        integer: bool = False,
    ) -> None:
        """Define the parameter at ``index``; an empty name becomes ``p<index>``."""
        self.parameters[index] = Parameter(
            name=name or f"p{index}",
            min_val=min_val,
            max_val=max_val,
            integer=integer,
        )

    def __getitem__(self, index: int) -> Parameter:
        return self.parameters[index]

    def __len__(self) -> int:
        return len(self.parameters)

    def random_component(self, index: int) -> float:
        """Return a uniform random value within the range of one parameter."""
        par = self.parameters[index]
        return self._random.rand(par.min_val, par.max_val)

    def _draw(self) -> list[float]:
        if self._generator is not None:
            return [float(v) for v in self._generator.func()]
        return [self.random_component(i) for i in range(len(self.parameters))]

    def random_point(self) -> list[float]:
        """Return a random point, satisfying the constraints if so configured."""
        point = self._draw()
        while self.constrained_init and violates_any(self.constraints, point):
            point = self._draw()
        return point

    def set_generator(self, func: Callable[[], Sequence[float]]) -> None:
        """Use ``func`` instead of uniform sampling to generate random points."""
        self._generator = _Generator(func)

    def rand(self) -> float:
        """Return a uniform random float in [0, 1)."""
        return self._random.rand()