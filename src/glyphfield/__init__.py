"""GLYPHFIELD: an interactive grid of scrambling text glyphs."""

__version__ = "0.1.0"
