"""Freehand stroke drawing logic with simulated pressure, undo and an HSV colour picker model."""

__version__ = "0.1.0"