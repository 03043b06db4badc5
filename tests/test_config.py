import copy

import pytest
import yaml

from travgrid_nav.config import Config, FootprintModel, Mobility
from travgrid_nav.dev.models import DUMMY_ROVER_CFG
from travgrid_nav.errors import UnsupportedEnvironmentError
from travgrid_nav.planning.types import EnvType


def test_from_dict():
    config = Config.from_dict(DUMMY_ROVER_CFG)

    assert config.env_type is EnvType.XYTHETA_FOOTPRINT
    assert config.mobility.speed == 0.1
    assert config.num_footprint_classes == 3
    assert config.footprint.time_to_adapt == 6.0
    assert config.footprint.adapt_penalty == 1.0
    assert not config.enable_motion_cost_interpolation
    assert config.segment_resolution == 1.0

def test_from_dict_defaults():
    config = Config.from_dict({'env': 'XY', 'motion': {'velocity': 2}})

    assert config.env_type is EnvType.XY
    assert config.footprint == FootprintModel()
    assert config.footprint.change_duration(0, 0) == 0.0

def test_config_is_immutable():
    config = Config.from_dict(DUMMY_ROVER_CFG)
    with pytest.raises(AttributeError):
        config.mobility = Mobility(1.0)

def test_unknown_environment():
    rover_cfg = copy.deepcopy(DUMMY_ROVER_CFG)
    rover_cfg['env'] = 'hexapod'
    with pytest.raises(UnsupportedEnvironmentError):
        Config.from_dict(rover_cfg)

def test_missing_entries():
    with pytest.raises(ValueError):
        Config.from_dict({'env': 'xy'})

@pytest.mark.parametrize('kwargs', [
    dict(num_classes=0),
    dict(time_to_adapt=-1.0),
    dict(adapt_penalty=-0.5),
])
def test_invalid_footprint_model(kwargs):
    with pytest.raises(ValueError):
        FootprintModel(**kwargs)

def test_invalid_speed():
    with pytest.raises(ValueError):
        Mobility(-0.1)

def test_change_duration():
    footprint = FootprintModel(num_classes=3, time_to_adapt=6.0)

    assert footprint.change_duration(0, 2) == pytest.approx(4.0)
    assert footprint.change_duration(2, 0) == footprint.change_duration(0, 2)
    assert footprint.change_duration(1, 1) == 0.0

def test_load_yaml_with_include(tmp_path):
    with open(tmp_path / 'footprint.yaml', 'w') as f:
        yaml.dump(DUMMY_ROVER_CFG['footprint'], f)
    with open(tmp_path / 'rover.yaml', 'w') as f:
        f.write(
            "env: xytheta_footprint\n"
            "motion:\n"
            "  velocity: 0.5\n"
            "footprint: !include footprint.yaml\n"
            "planning:\n"
            "  interpolate_motion_cost: true\n"
            "  segment_resolution: 0.5\n")

    config = Config.load(tmp_path / 'rover.yaml')
    assert config.mobility.speed == 0.5
    assert config.footprint.num_classes == 3
    assert config.enable_motion_cost_interpolation
    assert config.segment_resolution == 0.5
