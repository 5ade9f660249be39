# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
eulerkit converts orientations between Euler angles, quaternions, and transformation matrices.

Everything of interest lives in :mod:`eulerkit.rotations`.  The configuration machinery shared by the configurable
classes is in :mod:`eulerkit.utilities`.
"""

from eulerkit import rotations
from eulerkit import utilities

__version__ = '1.0.0'
