import pytest
from pydantic import ValidationError

from models import FileKind, ProjectKey, get_file_kind, is_source_document


def test_default_key_is_unknown() -> None:
    key = ProjectKey()
    assert key.is_unknown
    assert key.id is None
    assert ProjectKey(id="") == key


def test_key_id_is_canonical_directory() -> None:
    key = ProjectKey.from_directory(r"C:\path\to\obj")
    assert key.id == "C:/path/to/obj/"
    assert not key.is_unknown
    assert str(key) == "C:/path/to/obj/"
    assert str(ProjectKey()) == "<default>"


def test_keys_compare_by_canonical_id() -> None:
    a = ProjectKey(id=r"C:\path\to\obj")
    b = ProjectKey(id="C:/path/to/obj/")
    c = ProjectKey(id="/C:/path/to/obj")
    assert a == b == c
    assert len({a, b, c}) == 1
    assert ProjectKey(id="/home/dev/app/obj") != ProjectKey(id="/home/dev/lib/obj")


def test_key_is_immutable() -> None:
    key = ProjectKey(id="/home/dev/app/obj")
    with pytest.raises(ValidationError):
        key.id = "/elsewhere/"


def test_key_rejects_non_string_id() -> None:
    with pytest.raises(ValidationError):
        ProjectKey(id=42)


@pytest.mark.parametrize(
    "path,expected",
    [
        (r"C:\proj\Pages\Counter.tazor", FileKind.COMPONENT),
        ("/proj/Shared/NavMenu.TAZOR", FileKind.COMPONENT),
        (r"C:\proj\_Imports.tazor", FileKind.COMPONENT_IMPORT),
        ("/proj/Pages/_imports.tazor", FileKind.COMPONENT_IMPORT),
        (r"C:\proj\Pages\Error.cshtml", FileKind.LEGACY),
        ("file:///C:/proj/Pages/Index.tazor", FileKind.COMPONENT),
        ("/proj/BlazorProject.csproj", FileKind.NONE),
        (r"C:\proj\Pages\Counter.tazor.ide.g.cs", FileKind.NONE),
        (r"C:\proj\Pages\Counter.tazor__virtual.html", FileKind.NONE),
    ],
)
def test_get_file_kind(path: str, expected: FileKind) -> None:
    assert get_file_kind(path) is expected


def test_is_source_document() -> None:
    assert is_source_document("/proj/Pages/FetchData.tazor")
    assert not is_source_document("/proj/Pages/FetchData.tazor.p.ide.g.cs")
