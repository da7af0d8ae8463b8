"""tagnotes - release changelog generation from git tag history."""

__version__ = "0.1.0"
