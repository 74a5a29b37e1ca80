"""Value types stored in property containers."""

from propkit.schema.rgba import Rgba

__all__ = ["Rgba"]
