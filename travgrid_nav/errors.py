#!/usr/bin/env python

""" 
    Exceptions raised by the traversability cost evaluation
"""


class TravGridError(RuntimeError):
    """Base class of all traversability cost errors"""


class NoTravGridError(TravGridError):
    """A cost was requested before a traversability grid was attached"""


class UnsupportedEnvironmentError(TravGridError, ValueError):
    """The environment type is not one of the supported pose representations"""


class InvalidStateError(TravGridError, ValueError):
    """A state lies outside of the traversability grid"""
