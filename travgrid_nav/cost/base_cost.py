#!/usr/bin/env python

"""
    Cost values and base optimization objective (with documentation)
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Any, Callable, Iterable

from travgrid_nav.config import Config
from travgrid_nav.planning import spaces
from travgrid_nav.utils import pairwise

log = logging.getLogger(__name__)

# Largest finite cost. Used for impassable terrain so that costs can still be
# summed and compared; infinite costs are reserved for forbidden transitions.
MAX_FINITE_COST = sys.float_info.max


class Cost:
    """Non-negative cost, either finite or explicitly infinite"""

    __slots__ = ('_value', '_infinite')

    def __init__(self, value: float=0.0, infinite: bool=False) -> None:
        """Init a cost

        Args:
            value: non-negative cost value. Ignored if infinite is True
            infinite: whether the cost is the infinite cost
        """

        if infinite or value == math.inf:
            self._value = math.inf
            self._infinite = True
            return

        if math.isnan(value) or value < 0:
            raise ValueError(f"Invalid cost value: {value}")
        self._value = min(float(value), MAX_FINITE_COST)
        self._infinite = False

    @classmethod
    def infinite(cls) -> Cost:
        return cls(infinite=True)

    @classmethod
    def max_finite(cls) -> Cost:
        return cls(MAX_FINITE_COST)

    @property
    def value(self) -> float:
        return self._value

    @property
    def is_infinite(self) -> bool:
        return self._infinite

    @property
    def is_finite(self) -> bool:
        return not self._infinite

    def __add__(self, other: Any) -> Cost:
        if not isinstance(other, Cost):
            other = Cost(other)
        if self._infinite or other._infinite:
            return Cost.infinite()
        # Finite sums saturate at MAX_FINITE_COST
        return Cost(min(self._value + other._value, MAX_FINITE_COST))

    __radd__ = __add__

    def __float__(self) -> float:
        return self._value

    def _key(self) -> tuple:
        return (self._infinite, self._value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Cost):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Cost) -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self._key() >= other._key()

    def __repr__(self) -> str:
        if self._infinite:
            return "Cost(inf)"
        return f"Cost({self._value})"


def trapezoid(c1: Cost, c2: Cost, dist: float) -> Cost:
    """Cost of a segment of length dist between two states of costs c1, c2"""
    if c1.is_infinite or c2.is_infinite:
        return Cost.infinite()
    # Halve before summing, two max finite costs would overflow otherwise
    value = dist*(0.5*c1.value + 0.5*c2.value)
    return Cost(min(value, MAX_FINITE_COST))


class StateCostIntegralObjective(object):
    """Base class of objectives that integrate a state cost along motions"""

    def __init__(self, config: Config) -> None:
        """Initialize an objective

        Args:
            config: the evaluator configuration. Its environment type defines
                how states are compared and interpolated. Intermediate states
                are only evaluated if config.enable_motion_cost_interpolation
                is set, otherwise only the start and end states are used.
        """

        self.config = config

    @property
    def env_type(self):
        return self.config.env_type

    @property
    def interpolate_motion_cost(self) -> bool:
        return self.config.enable_motion_cost_interpolation

    def state_cost(self, state: Any) -> Cost:
        """Cost of a single state

        Args:
            state: a pose matching the configured environment type
        """
        raise NotImplementedError

    def distance(self, s1: Any, s2: Any) -> float:
        return spaces.distance(s1, s2, self.env_type)

    def segment_count(self, s1: Any, s2: Any) -> int:
        """Number of segments the motion from s1 to s2 is split into"""
        d = self.distance(s1, s2)
        return max(1, int(math.ceil(d / self.config.segment_resolution)))

    def motion_cost(self, s1: Any, s2: Any) -> Cost:
        """Cost of the motion from s1 to s2

        Trapezoidal integration of the state cost with respect to the
        distance travelled.

        Args:
            s1: start state
            s2: end state

        Return:
            the motion cost
        """

        return self.integrate(s1, s2, self.state_cost)

    def integrate(
        self, s1: Any, s2: Any, state_cost: Callable[[Any], Cost]) -> Cost:
        """Trapezoidal integration of a state cost function from s1 to s2"""

        if not self.interpolate_motion_cost:
            return trapezoid(
                state_cost(s1), state_cost(s2),
                self.distance(s1, s2))

        n = self.segment_count(s1, s2)
        total = self.identity_cost()
        prev_state = s1
        prev_cost = state_cost(s1)
        for j in range(1, n):
            next_state = spaces.interpolate(s1, s2, j/n, self.env_type)
            next_cost = state_cost(next_state)
            total += trapezoid(
                prev_cost, next_cost, self.distance(prev_state, next_state))
            prev_state, prev_cost = next_state, next_cost

        total += trapezoid(
            prev_cost, state_cost(s2), self.distance(prev_state, s2))
        return total

    def path_cost(self, states: Iterable[Any]) -> Cost:
        """Sum of motion costs along a sequence of states"""
        total = self.identity_cost()
        for s1, s2 in pairwise(states):
            total = self.combine_costs(total, self.motion_cost(s1, s2))
        return total

    @staticmethod
    def identity_cost() -> Cost:
        return Cost(0.0)

    @staticmethod
    def infinite_cost() -> Cost:
        return Cost.infinite()

    @staticmethod
    def combine_costs(c1: Cost, c2: Cost) -> Cost:
        return c1 + c2

    @staticmethod
    def is_cost_better_than(c1: Cost, c2: Cost) -> bool:
        return c1 < c2
