"""Storage volume inventory built from the vold mount table."""

__version__ = "0.1.0"
