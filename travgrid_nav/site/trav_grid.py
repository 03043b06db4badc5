#!/usr/bin/env python

"""
    Traversability grid: terrain class of every cell and driveability of
    every terrain class
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Union

import numpy as np

from travgrid_nav.site.layers import TerrainLayer

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraversabilityClass:
    # 0 = impassable, 1 = full speed
    driveability: float = 0.0

    def __post_init__(self):
        if not 0.0 <= self.driveability <= 1.0:
            raise ValueError(
                f"Invalid driveability: {self.driveability} "
                f"(must be within [0,1])")


# Terrain class values without an explicit class
UNKNOWN_CLASS = TraversabilityClass(0.0)


class TraversabilityGrid:
    """Queryable grid of terrain classes"""

    def __init__(
        self, raster: np.ndarray,
        classes: Dict[int,Union[TraversabilityClass,float]],
        scale: float=1.0) -> None:
        """Init a traversability grid

        Args:
            raster: (height, width) array of terrain class values, indexed
                as [row][col] (i.e. [y][x])
            classes: terrain class value : TraversabilityClass (or
                driveability value)
            scale: map units per cell, along both x and y
        """

        raster = np.array(raster)
        if raster.ndim != 2:
            raise ValueError(f"Expected a 2D raster, got shape {raster.shape}")
        if scale <= 0:
            raise ValueError(f"Invalid grid scale: {scale}")

        raster.setflags(write=False)
        self._raster = raster
        self._scale = float(scale)
        self._classes = dict()
        for value, tclass in classes.items():
            if not isinstance(tclass, TraversabilityClass):
                tclass = TraversabilityClass(float(tclass))
            self._classes[int(value)] = tclass

        log.info(f"Traversability grid of {self.width}x{self.height} cells, "
                 f"scale {self._scale} and {len(self._classes)} classes")

    @classmethod
    def from_layer(cls, layer: TerrainLayer) -> TraversabilityGrid:
        """Create a grid from a terrain layer and its driveability values"""
        return cls(layer.get_raster(), layer.driveability, layer.resolution)

    @property
    def width(self) -> int:
        """Number of cells along x"""
        return self._raster.shape[1]

    @property
    def height(self) -> int:
        """Number of cells along y"""
        return self._raster.shape[0]

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def classes(self) -> Dict[int,TraversabilityClass]:
        return dict(self._classes)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def class_of(self, col: int, row: int) -> int:
        """Terrain class value of a cell"""
        return int(self._raster[row][col])

    def get_traversability_class(self, class_value: int) -> TraversabilityClass:
        try:
            return self._classes[int(class_value)]
        except KeyError:
            log.debug(f"No traversability class {class_value}, impassable")
            return UNKNOWN_CLASS

    def driveability_of(self, class_value: int) -> float:
        return self.get_traversability_class(class_value).driveability

    def snapshot(self) -> np.ndarray:
        """Read-only view of the terrain class raster, indexed [row][col]"""
        return self._raster.view()
