"""Fruit-dropping physics playground: circle collisions, arena walls and a pygame viewer."""

__version__ = "0.1.0"