"""Headless simulation of projectiles aiming at moving targets under gravity."""

__version__ = "0.1.0"