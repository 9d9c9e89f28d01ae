"""Bridges puzzle on a hexagonal grid: grid model, puzzle generator, play session and a Tk window."""

__version__ = "0.1.0"