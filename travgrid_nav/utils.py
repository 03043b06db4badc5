#!/usr/bin/env python

"""
    Utility functions for the travgrid_nav package
"""


import logging
import os
import json
from itertools import tee
from typing import Any, IO

import yaml

log = logging.getLogger(__name__)


def pairwise(iterable):
    """Iterate and provide the current and next element.
       [a,b,c,d] -> (a,b), (b,c), (c,d)
    """
    a, b = tee(iterable)
    next(b, None)
    return zip(a, b)


# Copyright (c) 2018 Josh Bode
# Adapted from https://gist.github.com/joshbode/569627ced3076931b02f
class IncludeLoader(yaml.FullLoader):
    """YAML Loader with `!include` constructor."""

    def __init__(self, stream: IO) -> None:
        """Initialise Loader."""

        try:
            self._root = os.path.split(stream.name)[0]
        except AttributeError:
            self._root = os.path.curdir

        super().__init__(stream)

def construct_include(loader: IncludeLoader, node: yaml.Node) -> Any:
    """Include file referenced at node."""

    filename = os.path.abspath(os.path.join(loader._root, loader.construct_scalar(node)))
    extension = os.path.splitext(filename)[1].lstrip('.')

    with open(filename, 'r') as f:
        if extension in ('yaml', 'yml'):
            return yaml.load(f, IncludeLoader)
        elif extension in ('json', ):
            return json.load(f)
        else:
            return ''.join(f.readlines())


yaml.add_constructor('!include', construct_include, IncludeLoader)


def load_yaml_with_includes(fpath):
    """Load a yaml file that includes other yaml files using !include
    commands"""
    log.debug(f"Loading {fpath}")
    with open(fpath) as f:
        data = yaml.load(f, Loader=IncludeLoader)
    return data
