"""Synchronous client for the OpenAI REST API, with endpoint groups and example runs."""

__version__ = "0.1.0"
__all__ = ["session", "categories", "client", "examples"]