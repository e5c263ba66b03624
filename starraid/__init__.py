"""An arcade shooter against descending invaders, with display-free game rules."""

__version__ = "0.1.0"