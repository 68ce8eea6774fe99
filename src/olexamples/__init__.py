"""Build the example pages of the mapping library into a static site."""

__version__ = "0.1.0"
