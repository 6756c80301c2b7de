"""
Mod upgrade list builder — interactive editor for ModsUpgrader item lists.
"""

__version__ = "0.1.0"
