"""Static HTML documentation sites for type-checked modules."""

__version__ = "0.1.0"
