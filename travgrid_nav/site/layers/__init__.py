__all__ = [
    'BaseLayer',
    'TerrainLayer'
]

from travgrid_nav.site.layers.base import BaseLayer
from travgrid_nav.site.layers.terrain import TerrainLayer
