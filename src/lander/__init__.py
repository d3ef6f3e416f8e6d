"""Lunar lander mission supervisor: ordered phases, listeners, controller."""

__version__ = "0.1.0"
