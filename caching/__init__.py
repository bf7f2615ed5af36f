from .parse_cache import ParseCache, fingerprint

__all__ = ["ParseCache", "fingerprint"]
