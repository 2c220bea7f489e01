"""
taiga-selector - search and pick the current Taiga project
"""

__version__ = "0.1.0"
