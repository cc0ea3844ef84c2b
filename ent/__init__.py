"""Tools for package recipe trees: recipe parsing, upstream update checks and build listings."""

__version__ = "0.1.0"