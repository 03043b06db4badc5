import matplotlib.pyplot as plt
import numpy as np
import pytest
import yaml

from travgrid_nav.dev.models import DUMMY_DRIVEABILITY
from travgrid_nav.site import loader
from travgrid_nav.site.layers import TerrainLayer
from travgrid_nav.site.trav_grid import TraversabilityClass, TraversabilityGrid


def test_grid_queries(trav_grid):
    assert trav_grid.width == 4
    assert trav_grid.height == 3
    assert trav_grid.scale == 1.0
    # col 2, row 0
    assert trav_grid.class_of(2, 0) == 2
    assert trav_grid.driveability_of(2) == 0.25
    assert trav_grid.get_traversability_class(1) == TraversabilityClass(0.5)
    assert trav_grid.in_bounds(3, 2)
    assert not trav_grid.in_bounds(4, 0)

def test_unknown_class_is_impassable(trav_grid):
    assert trav_grid.driveability_of(42) == 0.0

def test_snapshot_is_read_only(trav_grid):
    data = trav_grid.snapshot()
    assert data[0][2] == 2
    with pytest.raises(ValueError):
        data[0][0] = 3

def test_grid_copies_raster(raster):
    grid = TraversabilityGrid(raster, DUMMY_DRIVEABILITY)
    raster[0][0] = 3
    assert grid.class_of(0, 0) == 0

@pytest.mark.parametrize('driveability', [-0.1, 1.5])
def test_invalid_driveability(raster, driveability):
    with pytest.raises(ValueError):
        TraversabilityGrid(raster, {0: driveability})

def test_invalid_grid(raster):
    with pytest.raises(ValueError):
        TraversabilityGrid(raster, DUMMY_DRIVEABILITY, scale=0.0)
    with pytest.raises(ValueError):
        TraversabilityGrid(raster[0], DUMMY_DRIVEABILITY)

def test_terrain_layer_from_raster(raster):
    layer = TerrainLayer.from_raster(
        raster, resolution=0.5, driveability=DUMMY_DRIVEABILITY)

    assert layer.shape == (3, 4)
    assert layer.resolution == pytest.approx(0.5)
    np.testing.assert_array_equal(layer.get_raster(), raster)
    assert layer.driveability_raster()[0].tolist() == [1.0, 0.5, 0.25, 0.0]

    grid = TraversabilityGrid.from_layer(layer)
    assert grid.scale == pytest.approx(0.5)
    assert grid.class_of(1, 0) == 1
    assert grid.driveability_of(1) == 0.5

def test_terrain_layer_invalid_driveability(raster):
    with pytest.raises(ValueError):
        TerrainLayer.from_raster(raster, driveability={0: 2.0})

def test_load_site(tmp_path, raster):
    layer = TerrainLayer.from_raster(
        raster, resolution=2.0, driveability=DUMMY_DRIVEABILITY)
    layer.save(tmp_path / 'terrain.tif')
    assert (tmp_path / 'terrain_classes.yaml').exists()

    with open(tmp_path / 'settings.yaml', 'w') as f:
        yaml.dump({'terrain': {
            'fpath': 'terrain.tif',
            'driveability': DUMMY_DRIVEABILITY,
            'labels': {0: 'bedrock', 1: 'gravel', 2: 'sand', 3: 'rocks'},
        }}, f)

    grid = loader.load(str(tmp_path))
    assert (grid.width, grid.height) == (4, 3)
    assert grid.scale == pytest.approx(2.0)
    assert grid.class_of(3, 0) == 3
    assert grid.driveability_of(grid.class_of(3, 0)) == 0.0

def test_load_missing_site(tmp_path):
    assert loader.load(str(tmp_path / 'nowhere')) is None

def test_terrain_layer_plot(raster):
    layer = TerrainLayer.from_raster(
        raster, resolution=0.5, driveability=DUMMY_DRIVEABILITY)

    fig, ax = plt.subplots()
    assert layer.plot(ax) is ax

    im = ax.get_images()[0]
    assert im.get_clim() == (0, 1)
    np.testing.assert_array_equal(im.get_array(), layer.driveability_raster())
    assert list(im.get_extent()) == pytest.approx([0.0, 2.0, 0.0, 1.5])
    assert ax.get_title() == "Driveability"
    plt.close(fig)
