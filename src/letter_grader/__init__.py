"""Letter grading pipeline for comma-separated student score files."""

__version__ = "1.0.0"
