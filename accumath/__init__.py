"""Multiple precision arithmetic, double-length operations, argument reduction and multiple precision arctangent."""

__version__ = "0.1.0"