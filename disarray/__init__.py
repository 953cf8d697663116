"""Vectors, texture atlases, sprite batching, shader lists, settings files and renderer setup rules."""

__version__ = "0.1.0"