"""Go-Live dashboard for Rocketlane projects."""

__version__ = "0.1.0"
