"""Keyframe animation of hierarchical drawable actors on a timeline, rendered with Pillow."""

__version__ = "0.1.0"