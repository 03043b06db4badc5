#!/usr/bin/env python

""" 
    Dummy models for the development of the travgrid_nav package
"""

DUMMY_ROVER_CFG = {
    'env': 'xytheta_footprint',
    'motion': {
        'velocity': 0.1, # m/s
    },
    'footprint': {
        'num_classes': 3,
        'time_to_adapt': 6.0, # s, from min to max footprint
        'adapt_penalty': 1.0,
    },
    'planning': {
        'interpolate_motion_cost': False,
        'segment_resolution': 1.0, # grid cells
    },
}

# Driveability of each terrain class, between 0 (impassable) and 1 (full speed)
DUMMY_DRIVEABILITY = {
    0: 1.0,
    1: 0.5,
    2: 0.25,
    3: 0.0,
}
