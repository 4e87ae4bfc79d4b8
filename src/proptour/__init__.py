"""proptour — a guided tour of properties and methods."""

__version__ = "0.1.0"
