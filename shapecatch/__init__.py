"""A terminal arcade game: steer a triangle to catch falling shapes."""

__version__ = "0.1.0"
__all__ = ["__version__"]