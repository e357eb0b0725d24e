"""Reference page generator for declarative configuration resources."""

__version__ = "0.1.0"
