import pytest

from jokeapi.exceptions import InvalidValueError
from jokeapi.types import Categories, Category, Flag, Flags, IDRange, JokeType, Lang


@pytest.mark.parametrize("token", [t.value for t in Lang])
def test_lang_parse_valid(token):
    assert Lang.parse(token).value == token


def test_lang_parse_invalid():
    with pytest.raises(InvalidValueError, match='invalid lang code: "invalid"'):
        Lang.parse("invalid")


def test_tokens_are_case_sensitive():
    with pytest.raises(InvalidValueError):
        Category.parse("dark")
    with pytest.raises(InvalidValueError):
        Flag.parse("NSFW")


def test_type_parse():
    assert JokeType.parse("twopart") is JokeType.TWOPART
    with pytest.raises(InvalidValueError, match='invalid type: "invalid"'):
        JokeType.parse("invalid")


@pytest.mark.parametrize("token", [t.value for t in Flag])
def test_flags_add_valid(token):
    f = Flags()
    f.add(token)
    assert f == [Flag(token)]


def test_flags_add_invalid_leaves_list_unchanged():
    f = Flags([Flag.NSFW])
    with pytest.raises(InvalidValueError, match='invalid flag: "invalid"'):
        f.add("invalid")
    assert f == [Flag.NSFW]


def test_flags_str():
    assert str(Flags([Flag.NSFW])) == "nsfw"
    assert str(Flags([Flag.NSFW, Flag.POLITICAL, Flag.EXPLICIT])) == "nsfw,political,explicit"


@pytest.mark.parametrize("token", [t.value for t in Category])
def test_categories_add_valid(token):
    c = Categories()
    c.add(token)
    assert c == [Category(token)]


def test_categories_add_invalid():
    c = Categories()
    with pytest.raises(InvalidValueError, match='invalid category: "invalid"'):
        c.add("invalid")
    assert c == []


def test_categories_str():
    assert str(Categories([Category.DARK, Category.PROGRAMMING, Category.PUN])) == "Dark,Programming,Pun"


def test_id_range_str():
    assert str(IDRange(0, 0)) == "0"
    assert str(IDRange(1, 0)) == "1"
    assert str(IDRange(2, 32)) == "2-32"
    assert str(IDRange.single(64)) == "64"


def test_id_range_parse():
    assert IDRange.parse("42") == IDRange(42)
    assert IDRange.parse("42-1024") == IDRange(42, 1024)


@pytest.mark.parametrize("raw", ["", "-1", "a", "1-2-3", "1-"])
def test_id_range_parse_invalid(raw):
    with pytest.raises(InvalidValueError):
        IDRange.parse(raw)


def test_id_range_rejects_negative():
    with pytest.raises(InvalidValueError):
        IDRange(-1)
