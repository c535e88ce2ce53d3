"""Classic dynamic programming solutions in plain Python, with a small command line front end."""

__version__ = "0.1.0"