"""A small printf-style formatter: template rendering in ``printer``, single conversions in ``conversions``."""

__version__ = "0.1.0"
__all__ = ["conversions", "printer"]