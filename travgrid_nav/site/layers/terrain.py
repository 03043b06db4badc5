#!/usr/bin/env python

"""
    Terrain layer class
"""

from __future__ import annotations
from pathlib import Path
from tempfile import NamedTemporaryFile
import logging
from typing import Dict

import yaml
import numpy as np
import rasterio
from rasterio.transform import from_origin
from matplotlib.axes import Axes
import matplotlib.pyplot as plt
from mpl_toolkits.axes_grid1 import make_axes_locatable

from travgrid_nav.site.layers.base import BaseLayer

log = logging.getLogger(__name__)


class TerrainLayer(BaseLayer):

    def __init__(
        self, fpath: str, driveability: Dict[int,float]=None,
        labels: Dict[int,str]=None) -> None:
        """ Init terrain layer

        Args:
            fpath: absolute path to .tif raster of integer terrain classes
            driveability: dictionary of terrain class : driveability, within
                [0,1]. Classes without a driveability are impassable
            labels: dictionary of terrain class : name (optional)
        """
        super().__init__(fpath)

        self.fpath = fpath
        self.driveability = dict() if driveability is None \
            else {int(k): float(v) for k, v in driveability.items()}
        self.labels = labels

        for tclass, d in self.driveability.items():
            if not 0.0 <= d <= 1.0:
                raise ValueError(
                    f"Invalid driveability {d} for terrain class {tclass} "
                    f"(must be within [0,1])")

        unknown = set(np.unique(self.get_raster()).tolist()) \
            - set(self.driveability.keys())
        if unknown:
            log.warning(f"Terrain classes {sorted(unknown)} have no "
                        f"driveability and will be considered impassable")

    @classmethod
    def from_raster(
        cls, raster: np.ndarray, resolution: float=1.0,
        **params) -> TerrainLayer:
        """Create layer instance from a raster of terrain classes

        Args:
            raster: (height, width) integer array of terrain classes
            resolution: map units per pixel
            params: other parameters fed to TerrainLayer.__init__()

        Return:
            terrain layer instance
        """

        raster = np.asarray(raster)
        if raster.dtype == np.int64:
            raster = raster.astype(np.int32)
        gtif_meta = {
            'driver': 'GTiff',
            'height': raster.shape[0],
            'width': raster.shape[1],
            'count': 1,
            'dtype': raster.dtype.name,
            'crs': None,
            'transform': from_origin(
                0.0, raster.shape[0]*resolution, resolution, resolution),
        }

        with NamedTemporaryFile(suffix='.tif') as f:
            with rasterio.open(f.name, 'w', **gtif_meta) as dst:
                dst.write(raster, 1)

            return cls(f.name, **params)

    def driveability_raster(self) -> np.ndarray:
        """Driveability of every pixel, 0 for classes without driveability"""
        raster = self.get_raster()
        out = np.zeros(raster.shape, dtype=float)
        for tclass, d in self.driveability.items():
            out[raster == tclass] = d
        return out

    def plot(self, ax: Axes, **kwargs) -> Axes:
        """Plot the driveability of the layer

        Args:
            ax: matplotlib ax
            **kwargs: any keyword argument compatible with ax.imshow()

        Return:
            matplotlib ax
        """

        kwargs.setdefault('cmap', plt.get_cmap('viridis'))
        kwargs['vmin'] = 0
        kwargs['vmax'] = 1
        im = ax.imshow(self.driveability_raster(), extent=self.extent, **kwargs)
        ax.axis('equal')
        divider = make_axes_locatable(ax)
        cax = divider.append_axes("right", size="5%", pad=0.05)
        plt.colorbar(im, cax=cax)

        ax.set_title("Driveability", y=1.05)
        ax.set_xlabel("Easting (meters)")
        ax.set_ylabel("Northing (meters)")

        return ax

    def save(self, fpath: Path) -> None:
        """Save the current layer to the provided absolute .tif file path"""
        fpath = Path(fpath)
        super().save(fpath)

        # Save driveability & labels too
        lpath = Path(fpath.parent, fpath.stem + '_classes.yaml')
        with open(lpath, 'w') as f:
            yaml.dump({
                'driveability': self.driveability,
                'labels': self.labels}, f)
