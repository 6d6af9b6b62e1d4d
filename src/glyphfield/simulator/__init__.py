"""Pygame simulator host for GLYPHFIELD."""
