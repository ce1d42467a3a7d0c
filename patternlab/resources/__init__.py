"""Packaged data files for the demos."""
from patternlab.resources.menu import load_menu_data

__all__ = ["load_menu_data"]
