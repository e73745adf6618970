"""IPv4 subnet planning and multi-cloud cost estimation."""

__version__ = "1.0.0"
