"""Design Studio API: backend for the garment design mobile app."""

__version__ = "0.1.0"
