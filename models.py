from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.path_utils import normalize_directory, normalize_path

COMPONENT_EXTENSION = ".tazor"
LEGACY_EXTENSION = ".cshtml"
COMPONENT_IMPORT_FILE_NAME = "_Imports.tazor"


class ProjectKey(BaseModel):
    """Identity of a build configuration that can own a generated code document.

    ``ProjectKey()`` is the default key, used when the owning project is unknown.
    Any other key wraps the canonical form of the project's intermediate output
    directory.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(
        default=None,
        description="Canonical directory path (forward slashes, trailing slash), or None for the default key",
    )

    @field_validator("id")
    @classmethod
    def normalize_id(cls, v: str | None) -> str | None:
        if v is None or v == "":
            return None
        return normalize_directory(v)

    @classmethod
    def from_directory(cls, path: str) -> ProjectKey:
        return cls(id=path)

    @property
    def is_unknown(self) -> bool:
        return self.id is None

    def __str__(self) -> str:
        return self.id or "<default>"


class FileKind(str, Enum):
    """The kind of templated markup document a path names."""

    NONE = "none"
    # '.tazor' file
    COMPONENT = "component"
    # '_Imports.tazor'
    COMPONENT_IMPORT = "component_import"
    # '.cshtml' file
    LEGACY = "legacy"


def get_file_kind(path: str) -> FileKind:
    """Classify ``path`` by file name and extension (case-insensitive).

    Accepts Windows paths, POSIX paths and URIs.

    Examples:
        >>> get_file_kind("C:\\\\proj\\\\_Imports.tazor")
        <FileKind.COMPONENT_IMPORT: 'component_import'>
        >>> get_file_kind("/proj/Pages/Error.cshtml")
        <FileKind.LEGACY: 'legacy'>
    """
    name = normalize_path(path).rsplit("/", 1)[-1].lower()
    if name == COMPONENT_IMPORT_FILE_NAME.lower():
        return FileKind.COMPONENT_IMPORT
    if name.endswith(COMPONENT_EXTENSION):
        return FileKind.COMPONENT
    if name.endswith(LEGACY_EXTENSION):
        return FileKind.LEGACY
    return FileKind.NONE


def is_source_document(path: str) -> bool:
    return get_file_kind(path) is not FileKind.NONE


__all__ = [
    "COMPONENT_EXTENSION",
    "COMPONENT_IMPORT_FILE_NAME",
    "LEGACY_EXTENSION",
    "FileKind",
    "ProjectKey",
    "get_file_kind",
    "is_source_document",
]
