"""Serialize integer-valued enums as their underlying integer representation.

``parse`` validates enum classes; ``derive`` provides the decorators and
JSON helpers.
"""

__version__ = "0.2.0"
__all__ = ["derive", "parse"]