"""An asteroid-dodging arcade game built on pygame, with window-free game logic."""

__version__ = "0.1.0"