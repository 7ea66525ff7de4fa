"""Task management API with keyword classification and ML enrichment."""

__version__ = "0.1.0"
