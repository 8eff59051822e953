"""formrules - per-field validation rule composition for admin forms."""

__version__ = "0.1.0"
