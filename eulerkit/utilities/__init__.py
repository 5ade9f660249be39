"""
This package provides the configuration machinery shared by the configurable classes in eulerkit.
"""

from eulerkit.utilities.options import UserOptions
from eulerkit.utilities.mixin_classes import UserOptionConfigured

__all__ = ["UserOptions", "UserOptionConfigured"]
