"""Content fingerprinting for parse cache keys."""

import hashlib


def hash_str(content: str, truncate: int | None = None) -> str:
    """SHA-256 hex digest of a string.

    Args:
        content: Text to hash (encoded as UTF-8)
        truncate: Keep only the first N hex characters (None = full digest)

    Examples:
        >>> hash_str("hello", truncate=16)
        '2cf24dba5fb0a30e'
    """
    digest = hashlib.sha256(content.encode("utf-8")).hexdigest()
    return digest[:truncate] if truncate is not None else digest
