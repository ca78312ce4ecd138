"""overlaytool: composition-guide overlays for photographs and film frames."""

__version__ = "0.1.0"
