from .url_builder import ConnectionUrlBuilder, canonicalize_url, compose_url

__all__ = [
    "ConnectionUrlBuilder",
    "compose_url",
    "canonicalize_url",
]
