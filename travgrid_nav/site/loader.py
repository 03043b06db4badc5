#!/usr/bin/env python

"""
    Load the traversability grid of a site from a dataset directory

    The directory holds a terrain class raster (.tif) and a settings.yaml
    file such as:

        terrain:
          fpath: terrain.tif
          driveability:
            0: 1.0
            1: 0.5
          labels:
            0: bedrock
            1: sand
"""

import os
import logging
from pathlib import Path

from travgrid_nav.utils import load_yaml_with_includes
from travgrid_nav.site.layers import TerrainLayer
from travgrid_nav.site.trav_grid import TraversabilityGrid


log = logging.getLogger(__name__)


def load(dirpath: str) -> TraversabilityGrid:
    """Load a site's traversability grid by its absolute directory path"""
    if not os.path.exists(dirpath):
        log.error(f"Configuration not found: {dirpath}")
        return None

    log.info(f"Loading dataset from: {dirpath}")
    settings = load_yaml_with_includes(Path(dirpath, 'settings.yaml'))

    try:
        t_attrs = dict(settings['terrain'])
    except (KeyError, TypeError):
        raise ValueError(f"No 'terrain' settings in {dirpath}")

    t_attrs['fpath'] = os.path.join(dirpath, t_attrs['fpath'])
    layer = TerrainLayer(**t_attrs)

    log.info(f"Dataset {os.path.basename(dirpath)} was loaded")
    return TraversabilityGrid.from_layer(layer)
