import pytest

from esmdial.filenames import parse_filename


def test_simple_extension():
    assert parse_filename("Skyrim.esm") == ("Skyrim", "esm")


def test_last_dot_wins():
    assert parse_filename("a.b.c") == ("a.b", "c")


def test_no_extension():
    assert parse_filename("noext") == ("noext", None)


def test_trailing_dot_gives_empty_extension():
    assert parse_filename("name.") == ("name", "")


def test_leading_dot_gives_empty_name():
    assert parse_filename(".hidden") == ("", "hidden")


def test_path_with_directory():
    assert parse_filename("data/Dawnguard.esm") == ("data/Dawnguard", "esm")


def test_none_rejected():
    with pytest.raises(TypeError):
        parse_filename(None)


@pytest.mark.parametrize("filename", ["x.esm", "a.b.c", "plain", "t."])
def test_roundtrip(filename):
    name, extension = parse_filename(filename)
    rebuilt = name if extension is None else f"{name}.{extension}"
    assert rebuilt == filename