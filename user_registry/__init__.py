"""In-memory user registry built on the repository and application-service patterns."""

__version__ = "0.1.0"
