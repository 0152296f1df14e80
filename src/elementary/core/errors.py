# elementary/core/errors.py

__all__ = [
    "ElementaryError",
    "QuantityParseError",
]


class ElementaryError(Exception):
    """Base class for errors raised by the elementary package."""


class QuantityParseError(ElementaryError):
    """A rational-fraction expression such as ``"+(1/2)"`` could not be parsed.

    Not a ValueError: pydantic would otherwise fold it into a ValidationError.
    """
