import pytest

from filelink.errors import ValidationError
from filelink.model import BookRef, FileElement, PageRef, ResourceRef


def test_book_prefix() -> None:
    assert BookRef("example.com", "/").prefix == ""
    assert BookRef("example.com", "/manual").prefix == "/manual"


@pytest.mark.parametrize("path", ["", "manual", "/manual/"])
def test_book_path_validation(path: str) -> None:
    with pytest.raises(ValidationError):
        BookRef("example.com", path)


def test_resource_ref_directory_path() -> None:
    book = BookRef("example.com", "/manual")
    assert ResourceRef(book, "/docs/").is_directory_path
    assert not ResourceRef(book, "/docs/a.txt").is_directory_path
    assert str(ResourceRef(book, "/a.txt")) == "example.com:/manual:/a.txt"
    with pytest.raises(ValidationError):
        ResourceRef(book, "a.txt")
    with pytest.raises(ValidationError):
        PageRef(book, "index")


def test_refs_are_values() -> None:
    book = BookRef("example.com", "/manual")
    same_book = BookRef("example.com", "/manual")
    assert ResourceRef(book, "/a") == ResourceRef(same_book, "/a")
    assert len({ResourceRef(book, "/a"), ResourceRef(book, "/a")}) == 1


def test_file_element_has_body() -> None:
    ref = ResourceRef(BookRef("example.com", "/"), "/a.txt")
    assert not FileElement(resource=(None, ref)).has_body
    assert FileElement(resource=(None, ref), body="<b>x</b>").has_body
    assert str(FileElement(resource=None)) == "file(<unset>)"
    assert str(FileElement(resource=(None, ref))) == "file(example.com:/:/a.txt)"
