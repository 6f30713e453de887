"""Keep a local directory in step with a GitHub user's or organization's repositories."""

__version__ = "1.0.0"
