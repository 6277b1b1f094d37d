"""Scene-file parsing and validation for a small ray tracer, with XPM and colour-name readers."""

__version__ = "0.1.0"