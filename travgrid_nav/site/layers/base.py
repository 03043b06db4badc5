#!/usr/bin/env python

""" 
    Base class of all layer objects
"""

from __future__ import annotations

import os
import numpy as np
import rasterio
import rasterio.plot


class BaseLayer:
    def __init__(self, fpath: str) -> None:
        """ Init layer
        
        Args:
            fpath: absolute path to .tif raster
        """

        self.load_raster(fpath)

    def load_raster(self, fpath: str) -> None:
        """Load a single-channel .tif raster from absolute filepath"""
        self.fpath = fpath
        if not os.path.isfile(fpath):
            raise IOError(f"Could not find {fpath}")

        with rasterio.open(fpath) as gtif:
            if gtif.meta['count'] != 1:
                raise ValueError(
                    f"Expected a single-channel raster, got "
                    f"{gtif.meta['count']} channels in {fpath}")
            self.meta = gtif.meta.copy()
            self.res = gtif.res
            self.extent = rasterio.plot.plotting_extent(gtif)
            self._raster = gtif.read(1)

    def get_raster(self) -> np.ndarray:
        """Return geotiff raster data as a np.ndarray"""
        return self._raster

    @property
    def shape(self) -> tuple:
        return self._raster.shape

    @property
    def resolution(self) -> float:
        """Map units (typically meters) per pixel, along the x axis"""
        return abs(self.res[0])

    def save(self, fpath: str) -> None:
        """Save the current layer to the provided absolute .tif file path"""
        with rasterio.open(fpath, 'w', **self.meta) as dst:
            dst.write(self.get_raster(), 1)
