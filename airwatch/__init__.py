"""Air-quality records, averages, weighted predictions and reports for city zones."""

__version__ = "0.1.0"
__all__ = ["__version__"]