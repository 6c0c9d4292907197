"""Pixel Flow - peel a pixel grid clear with shooters orbiting its rail."""

__version__ = "0.1.0"
