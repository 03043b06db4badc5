#!/usr/bin/env python

"""
    Rover and evaluator configuration
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from travgrid_nav.errors import UnsupportedEnvironmentError
from travgrid_nav.planning.types import EnvType
from travgrid_nav.utils import load_yaml_with_includes

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mobility:
    # Forward speed in map units per second. 0 means the rover cannot move
    speed: float

    def __post_init__(self):
        if self.speed < 0:
            raise ValueError(f"Invalid speed: {self.speed}")


@dataclass(frozen=True)
class FootprintModel:
    """Footprint classes of a rover with an adaptable footprint

    Class 0 is the minimum footprint, class num_classes-1 the maximum one.
    """

    num_classes: int = 1
    time_to_adapt: float = 0.0  # Time (s) to go from min to max footprint
    adapt_penalty: float = 0.0  # Added once whenever the footprint changes

    def __post_init__(self):
        if self.num_classes < 1:
            raise ValueError(
                f"Invalid number of footprint classes: {self.num_classes}")
        if self.time_to_adapt < 0:
            raise ValueError(
                f"Invalid footprint adaptation time: {self.time_to_adapt}")
        if self.adapt_penalty < 0:
            raise ValueError(
                f"Invalid footprint adaptation penalty: {self.adapt_penalty}")

    def change_duration(self, fp_class_1: int, fp_class_2: int) -> float:
        """Time (s) needed to go from one footprint class to another

        The full-range adaptation time is scaled by the fraction of the
        class range that is crossed.
        """
        return (abs(int(fp_class_1) - int(fp_class_2)) / self.num_classes) \
            * self.time_to_adapt


def parse_env_type(env: Union[str,EnvType]) -> EnvType:
    """Environment type from its name ('xy', 'xytheta', 'xytheta_footprint')"""
    if isinstance(env, EnvType):
        return env
    try:
        return EnvType(str(env).lower())
    except ValueError:
        raise UnsupportedEnvironmentError(
            f"Invalid environment type: {env} "
            f"(expects one of {[e.value for e in EnvType]})")


@dataclass(frozen=True)
class Config:
    env_type: EnvType
    mobility: Mobility
    footprint: FootprintModel = field(default_factory=FootprintModel)

    # Evaluate intermediate states along motions, not only the end states
    enable_motion_cost_interpolation: bool = False

    # Longest motion segment (grid cells) between two evaluated states
    segment_resolution: float = 1.0

    def __post_init__(self):
        if self.segment_resolution <= 0:
            raise ValueError(
                f"Invalid segment resolution: {self.segment_resolution}")

    @property
    def num_footprint_classes(self) -> int:
        return self.footprint.num_classes

    @classmethod
    def from_dict(cls, rover_cfg: dict) -> Config:
        """Create a configuration from a rover configuration dictionary

        Args:
            rover_cfg: dictionary with an 'env' entry, a 'motion' subdictionary
                (with 'velocity') and optional 'footprint' and 'planning'
                subdictionaries. See dev/models.py for an example.
        """

        try:
            env_type = parse_env_type(rover_cfg['env'])
            mobility = Mobility(float(rover_cfg['motion']['velocity']))
        except KeyError as e:
            raise ValueError(f"Missing rover configuration entry: {e}")

        fp_cfg = rover_cfg.get('footprint') or dict()
        footprint = FootprintModel(
            num_classes=int(fp_cfg.get('num_classes', 1)),
            time_to_adapt=float(fp_cfg.get('time_to_adapt', 0.0)),
            adapt_penalty=float(fp_cfg.get('adapt_penalty', 0.0)))

        planning_cfg = rover_cfg.get('planning') or dict()
        config = cls(
            env_type=env_type,
            mobility=mobility,
            footprint=footprint,
            enable_motion_cost_interpolation=bool(
                planning_cfg.get('interpolate_motion_cost', False)),
            segment_resolution=float(
                planning_cfg.get('segment_resolution', 1.0)))

        log.info(f"Loaded {env_type.value} configuration, speed "
                 f"{mobility.speed} and {footprint.num_classes} "
                 f"footprint class(es)")
        return config

    @classmethod
    def load(cls, fpath: Union[str,Path]) -> Config:
        """Create a configuration from a rover configuration yaml file"""
        return cls.from_dict(load_yaml_with_includes(fpath))
