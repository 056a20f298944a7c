"""Pathfinder Lab - maze generation and grid pathfinding."""

__version__ = "1.0.0"
