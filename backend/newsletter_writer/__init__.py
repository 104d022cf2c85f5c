"""Newsletter campaign, issue and block management API."""

__version__ = "0.1.0"
