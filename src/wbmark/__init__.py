"""wbmark: markdown with embedded components."""

__version__ = "0.3.0"
