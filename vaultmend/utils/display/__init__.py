"""Display abstraction shared by CLI renderers."""

from .Display import Display

__all__ = ["Display"]
