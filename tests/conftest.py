import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from travgrid_nav.config import Config, Mobility, FootprintModel
from travgrid_nav.dev.models import DUMMY_DRIVEABILITY
from travgrid_nav.planning.types import EnvType
from travgrid_nav.site.trav_grid import TraversabilityGrid

# 4 cells wide, 3 cells high, indexed [row][col]
# Driveability: class 0 -> 1.0, 1 -> 0.5, 2 -> 0.25, 3 -> 0.0
RASTER = np.array([
    [0, 1, 2, 3],
    [1, 1, 1, 1],
    [0, 0, 0, 0],
], dtype=np.uint8)


@pytest.fixture
def raster():
    return RASTER.copy()


@pytest.fixture
def trav_grid():
    return TraversabilityGrid(RASTER, DUMMY_DRIVEABILITY, scale=1.0)


def make_config(env_type, speed=1.0, num_classes=3, time_to_adapt=6.0,
                adapt_penalty=1.0, interpolate=False, resolution=1.0):
    return Config(
        env_type=env_type,
        mobility=Mobility(speed),
        footprint=FootprintModel(num_classes, time_to_adapt, adapt_penalty),
        enable_motion_cost_interpolation=interpolate,
        segment_resolution=resolution)


@pytest.fixture
def xy_config():
    return make_config(EnvType.XY)


@pytest.fixture
def fp_config():
    return make_config(EnvType.XYTHETA_FOOTPRINT)
