"""Infrastructure helpers."""

from propkit.utils.format import short_repr, type_name
from propkit.utils.logging import get_logger
from propkit.utils.validation import validate_name, validate_type

__all__ = ["get_logger", "short_repr", "type_name", "validate_name", "validate_type"]
