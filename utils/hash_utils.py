from __future__ import annotations

import base64
import hashlib

# Length of the project token embedded in generated code file names.
PROJECT_TOKEN_LENGTH = 16


def sha256_bytes(data: bytes) -> bytes:
    h = hashlib.sha256()
    h.update(data)
    return h.digest()


def sha256_string(s: str, *, encoding: str = "utf-16-le") -> bytes:
    return sha256_bytes(s.encode(encoding))


def url_safe_token(s: str, *, length: int = PROJECT_TOKEN_LENGTH) -> str:
    """Hash ``s`` into a short token that is safe in file names and URI paths.

    The digest is base64 encoded with the URL-safe alphabet (``-`` and ``_``
    in place of ``+`` and ``/``) and truncated, so no padding survives for
    lengths up to 43.

    Examples:
        >>> url_safe_token("C:/path/to/obj/")
        '21z2YGQgr-neX-Hd'
    """
    if not 0 < length <= 43:
        raise ValueError("length must be between 1 and 43")
    encoded = base64.urlsafe_b64encode(sha256_string(s)).decode("ascii")
    return encoded[:length]
