"""String formatting of type identities and property values."""

import builtins

MAX_REPR_LENGTH = 60


def type_name(cls: type) -> str:
    """
    Return a readable name for a class.

    Builtins are reported by their bare name (``float``); everything else is
    qualified with its module (``numpy.ndarray``, ``propkit.schema.rgba.Rgba``).
    """
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", repr(cls))
    if module in (None, builtins.__name__):
        return qualname
    return f"{module}.{qualname}"


def short_repr(value: object, max_length: int = MAX_REPR_LENGTH) -> str:
    """Single-line repr truncated to `max_length` characters."""
    text = " ".join(repr(value).split())
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text
