#!/usr/bin/env python

""" 
    Custom types for planning over a traversability grid
"""

from enum import Enum
from dataclasses import dataclass


class EnvType(Enum):
    """Supported state representations"""
    XY = 'xy'
    XYTHETA = 'xytheta'
    XYTHETA_FOOTPRINT = 'xytheta_footprint'


@dataclass(frozen=True)
class PoseXY:
    # Position in grid cells
    x: float
    y: float


@dataclass(frozen=True)
class PoseSE2:
    # Position in grid cells, heading in radians
    x: float
    y: float
    theta: float = 0.0


@dataclass(frozen=True)
class PoseFootprint:
    # Position in grid cells, heading in radians and footprint class index
    # (0 = minimum footprint, N-1 = maximum footprint)
    x: float
    y: float
    theta: float = 0.0
    footprint_class: int = 0
