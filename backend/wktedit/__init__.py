"""wktedit: WKT geometry editing backend."""

__version__ = "0.1.0"
