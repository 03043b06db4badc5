#!/usr/bin/env python

"""
    Per-environment access to the state representations: position
    extraction, distance and interpolation between two states
"""

import logging
import math
from typing import Any, Tuple

from travgrid_nav.errors import UnsupportedEnvironmentError
from travgrid_nav.planning.types import (
    EnvType, PoseXY, PoseSE2, PoseFootprint)

log = logging.getLogger(__name__)

# Weight of the heading difference in the distance between two states
ANGULAR_DISTANCE_WEIGHT = 0.5


def _extract_xy(state) -> Tuple[float,float,int]:
    return state.x, state.y, 0

def _extract_xytheta(state) -> Tuple[float,float,int]:
    # Heading is not used by the cost
    return state.x, state.y, 0

def _extract_footprint(state) -> Tuple[float,float,int]:
    return state.x, state.y, int(state.footprint_class)


_EXTRACTORS = {
    EnvType.XY: _extract_xy,
    EnvType.XYTHETA: _extract_xytheta,
    EnvType.XYTHETA_FOOTPRINT: _extract_footprint,
}


def extract_pose(state: Any, env_type: EnvType) -> Tuple[float,float,int]:
    """Position and footprint class of a state

    Values are returned as-is, range checks are up to the caller.

    Args:
        state: a pose matching the environment type
        env_type: the environment type

    Return:
        (x, y, footprint class) tuple. The footprint class is 0 unless the
        environment is footprint-aware.
    """

    try:
        extractor = _EXTRACTORS[env_type]
    except (KeyError, TypeError):
        raise UnsupportedEnvironmentError(
            f"Received an unknown environment: {env_type}")
    return extractor(state)


def normalize_angle(theta: float) -> float:
    """Wrap an angle to [-pi, pi)"""
    return (theta + math.pi) % (2*math.pi) - math.pi


def planar_distance(s1: Any, s2: Any) -> float:
    """Euclidean distance (grid cells) between the positions of two states"""
    return math.hypot(s2.x - s1.x, s2.y - s1.y)


def distance(s1: Any, s2: Any, env_type: EnvType) -> float:
    """Distance between two states, in grid cells

    Heading differences count for half their value in radians.
    Footprint classes do not contribute.
    """

    d = planar_distance(s1, s2)
    if env_type is EnvType.XY:
        return d
    elif env_type in (EnvType.XYTHETA, EnvType.XYTHETA_FOOTPRINT):
        dtheta = abs(normalize_angle(s2.theta - s1.theta))
        return d + ANGULAR_DISTANCE_WEIGHT*dtheta
    else:
        raise UnsupportedEnvironmentError(
            f"Received an unknown environment: {env_type}")


def interpolate(s1: Any, s2: Any, t: float, env_type: EnvType) -> Any:
    """State at fraction t in [0,1] of the way from s1 to s2

    Positions are interpolated linearly, headings along the shortest arc and
    footprint classes linearly, rounded to the nearest class.
    """

    x = s1.x + t*(s2.x - s1.x)
    y = s1.y + t*(s2.y - s1.y)

    if env_type is EnvType.XY:
        return PoseXY(x, y)

    theta = normalize_angle(
        s1.theta + t*normalize_angle(s2.theta - s1.theta))
    if env_type is EnvType.XYTHETA:
        return PoseSE2(x, y, theta)
    elif env_type is EnvType.XYTHETA_FOOTPRINT:
        fp = s1.footprint_class + t*(s2.footprint_class - s1.footprint_class)
        return PoseFootprint(x, y, theta, int(round(fp)))
    else:
        raise UnsupportedEnvironmentError(
            f"Received an unknown environment: {env_type}")
