"""A candidate solution: a point in the search space and its cost."""

from __future__ import annotations

import copy
import sys
from collections.abc import Iterable


class Individual:
    """A position in the search space together with its cost.

    A fresh individual sits at the origin with the largest finite cost,
    so any evaluated solution compares as better. Individuals order by
    cost, lowest first. Subclasses that set ``has_velocity`` to true also
    carry a velocity vector, starting at rest.
    """

    has_velocity: bool = False

    def __init__(self, dimension: int = 0) -> None:
        self._position: list[float] = [0.0] * dimension
        self._velocity: list[float] | None = (
            [0.0] * dimension if self.has_velocity else None
        )
        self.cost: float = sys.float_info.max

    @property
    def position(self) -> list[float]:
        """The coordinates of the individual."""
        return self._position

    @position.setter
    def position(self, values: Iterable[float]) -> None:
        self._position = [float(v) for v in values]

    @property
    def parameters(self) -> list[float]:
        """The parameter values, which are the coordinates of the individual."""
        return self._position

    @property
    def dimension(self) -> int:
        """The number of dimensions of the search space."""
        return len(self._position)

    def __getitem__(self, index: int) -> float:
        return self._position[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._position[index] = value

    def __len__(self) -> int:
        return len(self._position)

    def __lt__(self, other: Individual) -> bool:
        return self.cost < other.cost

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position!r}, cost={self.cost!r})"

    def copy(self) -> Individual:
        """Return an independent copy of this individual."""
        return copy.deepcopy(self)

    def _check_index(self, index: int) -> None:
        size = len(self._position)
        if not -size <= index < size:
            raise IndexError(f"component {index} out of range for dimension {size}")

    def get_velocity(self, index: int) -> float:
        """Return a velocity component; individuals without velocity are at rest."""
        self._check_index(index)
        if self._velocity is None:
            return 0.0
        return self._velocity[index]

    def set_velocity(self, index: int, value: float) -> None:
        """Set a velocity component; individuals without velocity ignore it."""
        self._check_index(index)
        if self._velocity is not None:
            self._velocity[index] = float(value)