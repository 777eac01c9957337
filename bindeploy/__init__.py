"""bindeploy: versioned binary deployment over SSH."""

__version__ = "0.1.0"
