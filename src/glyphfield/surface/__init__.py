"""Drawing surfaces for GLYPHFIELD."""

from .base import Surface
from .buffer import BufferSurface

__all__ = ["Surface", "BufferSurface"]
