"""Separator normalization and path <-> file URI adapters.

Windows paths are recognized by shape (drive letter or UNC prefix) rather than
by the host OS, so the same input produces the same output on every platform.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath, PureWindowsPath
from urllib.parse import quote, unquote, urlsplit

_DRIVE_RE = re.compile(r"^[A-Za-z]:")
_SLASHED_DRIVE_RE = re.compile(r"^/[A-Za-z]:")
# A single letter followed by ':' is a drive, not a scheme.
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+:")


def is_windows_path(path: str) -> bool:
    return bool(_DRIVE_RE.match(path)) or path.startswith("\\\\")


def is_uri(value: str) -> bool:
    return bool(_SCHEME_RE.match(value))


def normalize_path(path: str) -> str:
    """Forward-slash form of ``path``; ``/C:/x`` becomes ``C:/x``."""
    normalized = path.replace("\\", "/")
    if _SLASHED_DRIVE_RE.match(normalized):
        normalized = normalized[1:]
    return normalized


def normalize_directory(path: str) -> str:
    """Canonical directory form: forward slashes and exactly one trailing slash.

    Examples:
        >>> normalize_directory("C:\\\\path\\\\to\\\\obj")
        'C:/path/to/obj/'
        >>> normalize_directory("/home/me/proj/obj/")
        '/home/me/proj/obj/'
    """
    normalized = normalize_path(path)
    if not normalized.endswith("/"):
        normalized += "/"
    return normalized


def to_uri(path_or_uri: str) -> str:
    """Return a URI for ``path_or_uri``.

    URIs pass through untouched. Absolute Windows and POSIX paths become
    ``file:`` URIs; relative paths raise ``ValueError``.
    """
    if is_uri(path_or_uri):
        return path_or_uri
    if is_windows_path(path_or_uri):
        posix = PureWindowsPath(path_or_uri).as_posix()
        if posix.startswith("//"):
            return "file:" + quote(posix, safe="/:")
        return "file:///" + quote(posix, safe="/:")
    path = PurePosixPath(path_or_uri)
    if not path.is_absolute():
        raise ValueError(f"relative path cannot be expressed as a file URI: {path_or_uri!r}")
    return "file://" + quote(path.as_posix(), safe="/:")


def get_absolute_or_unc_path(uri: str) -> str:
    """Decode the path of ``uri`` into a forward-slash absolute or UNC path.

    Examples:
        >>> get_absolute_or_unc_path("file:///C:/path/to/file.tazor")
        'C:/path/to/file.tazor'
        >>> get_absolute_or_unc_path("file://server/share/file.tazor")
        '//server/share/file.tazor'
    """
    parts = urlsplit(to_uri(uri))
    path = unquote(parts.path)
    if parts.scheme == "file" and parts.netloc and parts.netloc != "localhost":
        return f"//{parts.netloc}{path}"
    if _SLASHED_DRIVE_RE.match(path):
        path = path[1:]
    return path


__all__ = [
    "get_absolute_or_unc_path",
    "is_uri",
    "is_windows_path",
    "normalize_directory",
    "normalize_path",
    "to_uri",
]
