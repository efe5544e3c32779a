"""pycommons: soft type conversion, dynamic reflection, validation schemas and command dispatch."""
__version__ = "0.1.0"
