"""External service clients."""

from .deepl_client import DeepLClient

__all__ = ["DeepLClient"]
