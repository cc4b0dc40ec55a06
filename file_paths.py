"""Names of the generated documents projected from a templated markup file.

Every consumer (editor side and tool side) re-derives these names on its own,
so the suffixes and the project token encoding below are a wire format:

    <source>.<token>.ide.g.cs   generated code, project scoped
    <source>.p.ide.g.cs         generated code, default project
    <source>.ide.g.cs           generated code, project key not included
    <source>__virtual.html      generated markup, never project scoped

All operations are pure string transformations. Nothing here touches the
filesystem.
"""

from __future__ import annotations

import logging
import os
import re
from urllib.parse import urlsplit, urlunsplit

from config import FeatureOptions
from config import config as global_config
from models import ProjectKey
from utils.hash_utils import PROJECT_TOKEN_LENGTH, url_safe_token
from utils.path_utils import to_uri

logger = logging.getLogger(__name__)

GENERATED_CODE_SUFFIX = ".ide.g.cs"
GENERATED_MARKUP_SUFFIX = "__virtual.html"
DEFAULT_PROJECT_TOKEN = "p"

# The token always follows the source document's own extension, and neither
# part may contain '.', '/' or '\'.
_SCOPED_CODE_RE = re.compile(
    r"^(?P<source>.*\.[^./\\]+)\.[A-Za-z0-9_-]{%d}%s$" % (PROJECT_TOKEN_LENGTH, re.escape(GENERATED_CODE_SUFFIX)),
    re.DOTALL,
)
_DEFAULT_CODE_RE = re.compile(
    r"^(?P<source>.*\.[^./\\]+)\.%s%s$" % (DEFAULT_PROJECT_TOKEN, re.escape(GENERATED_CODE_SUFFIX)),
    re.DOTALL,
)


def _strip_generated_suffix(path: str) -> str | None:
    """Return ``path`` without its generated suffix, or None if it has none."""
    if path.endswith(GENERATED_MARKUP_SUFFIX):
        return path[: -len(GENERATED_MARKUP_SUFFIX)]
    if not path.endswith(GENERATED_CODE_SUFFIX):
        return None
    for pattern in (_SCOPED_CODE_RE, _DEFAULT_CODE_RE):
        m = pattern.match(path)
        if m:
            return m.group("source")
    return path[: -len(GENERATED_CODE_SUFFIX)]


def _uri_path_endswith(uri: str, suffix: str) -> bool:
    path = urlsplit(to_uri(uri)).path
    if os.name == "nt":
        return path.lower().endswith(suffix.lower())
    return path.endswith(suffix)


class PathMapper:
    """Maps source documents to their generated documents and back.

    The "include project key" flag is read once from ``options`` and never
    changes for the lifetime of the mapper, so instances can be shared freely.
    """

    def __init__(self, options: FeatureOptions | None = None) -> None:
        options = options if options is not None else global_config
        self._include_project_key = options.include_project_key
        logger.debug("PathMapper created (include_project_key=%s)", self._include_project_key)

    @property
    def include_project_key(self) -> bool:
        return self._include_project_key

    def compute_project_token(self, project_key: ProjectKey) -> str | None:
        """Token that disambiguates ``project_key`` in generated code file names.

        Returns None when project keys are not included in file names, the
        reserved ``"p"`` for the default key, and otherwise a 16 character
        URL-safe hash of the key's directory.
        """
        if not self._include_project_key:
            return None
        if project_key.is_unknown:
            return DEFAULT_PROJECT_TOKEN
        return url_safe_token(project_key.id)

    def get_generated_code_path(self, project_key: ProjectKey, source_path: str) -> str:
        """Path of the generated code document for ``source_path`` in ``project_key``.

        Examples:
            >>> PathMapper(FeatureOptions(INCLUDE_PROJECT_KEY_IN_GENERATED_FILE_PATH=True)).get_generated_code_path(
            ...     ProjectKey(), "C:\\\\path\\\\to\\\\file.tazor"
            ... )
            'C:\\\\path\\\\to\\\\file.tazor.p.ide.g.cs'
        """
        token = self.compute_project_token(project_key)
        project_suffix = f".{token}" if token else ""
        return f"{source_path}{project_suffix}{GENERATED_CODE_SUFFIX}"

    def get_generated_markup_path(self, source_path: str) -> str:
        return f"{source_path}{GENERATED_MARKUP_SUFFIX}"

    def get_source_path(self, path: str) -> str:
        """Recover the source document path from a generated document path.

        Input without a recognized generated suffix is returned unchanged, so
        this is safe to call on any path, including source paths themselves.
        """
        source = _strip_generated_suffix(path)
        if source is None:
            logger.debug("No generated suffix on %s; treating it as a source path", path)
            return path
        return source

    def get_source_uri(self, uri: str) -> str:
        """URI of the source document for a generated document URI.

        Absolute paths are accepted and converted to ``file:`` URIs first. Only
        the path component is rewritten; scheme, authority, query and fragment
        are kept.

        Suffixes are stripped case-sensitively on every host, so a URI that
        ``is_generated_code_uri`` accepts only by ignoring case comes back unchanged.
        """
        parts = urlsplit(to_uri(uri))
        source = self.get_source_path(parts.path)
        return urlunsplit(parts._replace(path=source))

    def is_generated_code_uri(self, uri: str) -> bool:
        return _uri_path_endswith(uri, GENERATED_CODE_SUFFIX)

    def is_generated_markup_uri(self, uri: str) -> bool:
        return _uri_path_endswith(uri, GENERATED_MARKUP_SUFFIX)

    def is_generated_document_uri(self, uri: str) -> bool:
        return self.is_generated_code_uri(uri) or self.is_generated_markup_uri(uri)


__all__ = [
    "DEFAULT_PROJECT_TOKEN",
    "GENERATED_CODE_SUFFIX",
    "GENERATED_MARKUP_SUFFIX",
    "PathMapper",
]
