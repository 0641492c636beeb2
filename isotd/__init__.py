"""Isometric tower-defence game, with a board, turrets, enemies and an outline normaliser."""

__version__ = "0.1.0"