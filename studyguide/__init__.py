"""Study-guide notes: reference algorithms and corpus tooling."""

__version__ = "0.1.0"
