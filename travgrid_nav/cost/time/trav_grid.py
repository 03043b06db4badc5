#!/usr/bin/env python

"""
    Traversal time over a traversability grid, with footprint adaptation
"""

import functools
import logging
import math
import threading
from typing import Any, Iterable

import numpy as np
import pandas as pd

from travgrid_nav.config import Config
from travgrid_nav.cost.base_cost import (
    Cost, StateCostIntegralObjective, MAX_FINITE_COST)
from travgrid_nav.errors import NoTravGridError, InvalidStateError
from travgrid_nav.planning.spaces import extract_pose, planar_distance
from travgrid_nav.planning.types import EnvType
from travgrid_nav.site.trav_grid import TraversabilityGrid

log = logging.getLogger(__name__)


class TravGridObjective(StateCostIntegralObjective):
    """Time to traverse the cells of a traversability grid

    The grid and its class raster are set once before querying. Queries do
    not modify the objective and can run concurrently, but replacing the grid
    while queries are in flight is not supported.
    """

    def __init__(
        self, config: Config, trav_grid: TraversabilityGrid=None,
        trav_data: np.ndarray=None) -> None:
        """Init the objective

        Args:
            config: the evaluator configuration
            trav_grid: the traversability grid (optional, see set_trav_grid)
            trav_data: class raster of the grid, indexed [row][col]. Defaults
                to a snapshot of trav_grid
        """
        super().__init__(config)

        self._lock = threading.Lock()
        self._trav = (None, None)
        if trav_grid is not None:
            self.set_trav_grid(trav_grid, trav_data)

    def set_trav_grid(
        self, trav_grid: TraversabilityGrid,
        trav_data: np.ndarray=None) -> None:
        """Attach (or replace) the traversability grid

        Args:
            trav_grid: the traversability grid, owned by the caller
            trav_data: class raster of the grid, indexed [row][col]. Defaults
                to a snapshot of trav_grid
        """

        if trav_data is None:
            trav_data = trav_grid.snapshot()
        with self._lock:
            self._trav = (trav_grid, trav_data)
        log.debug(f"Traversability grid set ({trav_grid.width}x"
                  f"{trav_grid.height} cells)")

    @property
    def trav_grid(self) -> TraversabilityGrid:
        return self._trav[0]

    def _get_trav(self) -> tuple:
        trav_grid, trav_data = self._trav
        if trav_grid is None:
            raise NoTravGridError(
                "TravGridObjective: No traversability grid available")
        return trav_grid, trav_data

    def _lookup(self, state: Any, trav: tuple) -> tuple:
        """Position, footprint class and driveability at a state"""

        trav_grid, trav_data = trav
        x, y, fp_class = extract_pose(state, self.env_type)

        if (x < 0 or x >= trav_grid.width or
                y < 0 or y >= trav_grid.height):
            log.warning(
                f"Invalid state ({x:4.2f}, {y:4.2f}) outside of the "
                f"{trav_grid.width}x{trav_grid.height} traversability grid")
            raise InvalidStateError(f"Invalid state received: ({x}, {y})")

        class_value = trav_data[int(y)][int(x)]
        return x, y, fp_class, trav_grid.driveability_of(class_value)

    def state_cost(self, state: Any) -> Cost:
        """Time to traverse the cell occupied by a state

        Args:
            state: a pose matching the configured environment type

        Return:
            the traverse time at full speed for the cell's driveability.
            Impassable cells (or a rover that cannot move) cost
            MAX_FINITE_COST.
        """
        return self._state_cost(state, self._get_trav())

    def _state_cost(self, state: Any, trav: tuple) -> Cost:
        _, _, fp_class, driveability = self._lookup(state, trav)
        return self._cell_cost(trav[0], fp_class, driveability)

    def _cell_cost(
        self, trav_grid: TraversabilityGrid, fp_class: int,
        driveability: float) -> Cost:
        speed = self.config.mobility.speed

        if driveability == 0 or speed == 0:
            return Cost(MAX_FINITE_COST)

        # A driveability of 1.0 means the cell is traversed at full speed
        cost = (trav_grid.scale / speed) / driveability

        # Max footprint means full speed, min footprint multiplies the cost
        # by the number of footprint classes + 1
        if self.env_type is EnvType.XYTHETA_FOOTPRINT:
            if fp_class < 0:
                log.warning(f"Invalid footprint class {fp_class}")
                return self.infinite_cost()
            cost /= (fp_class + 1) / (self.config.num_footprint_classes + 1)

        return Cost(min(cost, MAX_FINITE_COST))

    def motion_cost(self, s1: Any, s2: Any) -> Cost:
        """Cost of the motion from s1 to s2

        Integrated state cost along the motion. For footprint-aware states,
        the time to adapt the footprint and a fixed penalty (if it changes)
        are added. The motion is forbidden (infinite cost) if adapting the
        footprint takes longer than driving from s1 to s2.

        Args:
            s1: start state
            s2: end state

        Return:
            the motion cost
        """

        trav = self._get_trav()
        cost = self.integrate(
            s1, s2, functools.partial(self._state_cost, trav=trav))
        if self.env_type is not EnvType.XYTHETA_FOOTPRINT:
            return cost

        footprint = self.config.footprint
        _, _, fp_class_1 = extract_pose(s1, self.env_type)
        _, _, fp_class_2 = extract_pose(s2, self.env_type)

        fp_time = footprint.change_duration(fp_class_1, fp_class_2)
        cost += fp_time
        if fp_time > 0:
            cost += footprint.adapt_penalty

        # Not enough time to adapt the footprint while driving the segment
        mov_time = self.movement_time(s1, s2, trav[0].scale)
        if fp_time > mov_time:
            log.debug(f"Footprint change from class {fp_class_1} to "
                      f"{fp_class_2} takes {fp_time:.2f} s, "
                      f"motion takes {mov_time:.2f} s")
            return self.infinite_cost()

        return cost

    def movement_time(self, s1: Any, s2: Any, scale: float) -> float:
        """Time to drive in a straight line between two states at full speed

        A rover that cannot move never completes the motion, whatever its
        length.
        """
        if self.config.mobility.speed == 0:
            return math.inf
        return planar_distance(s1, s2) * scale / self.config.mobility.speed

    def cost_report(self, states: Iterable[Any]) -> pd.DataFrame:
        """State costs along a sequence of states

        Args:
            states: sequence of n poses

        Returns:
            pd.DataFrame: (n,5) dataframe with columns X, Y, FP_CLASS,
                DRIVEABILITY and COST
        """

        trav = self._get_trav()
        rows = []
        for state in states:
            x, y, fp_class, driveability = self._lookup(state, trav)
            cost = self._cell_cost(trav[0], fp_class, driveability)
            rows.append([x, y, fp_class, driveability, float(cost)])

        return pd.DataFrame(
            rows, columns=['X', 'Y', 'FP_CLASS', 'DRIVEABILITY', 'COST'])
