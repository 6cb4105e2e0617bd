"""Headless 2D game physics: vectors, pooled game objects, sprite animation, font metrics, an asteroid field, a collision sandbox and a two-player pong game."""

__version__ = "0.1.0"