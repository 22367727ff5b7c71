"""hexline — rules engine for a hexagonal line-clearing puzzle."""

__version__ = "0.1.0"
