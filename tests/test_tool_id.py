import pytest

from rokit.alias import ToolAlias
from rokit.tool_id import ArtifactProvider, ToolId, ToolIdParseError


def new_id(author, name, provider=ArtifactProvider.GITHUB):
    return ToolId(author, name, provider)


@pytest.mark.parametrize(
    "s,author,name",
    [("a/b", "a", "b"), ("author/name", "author", "name"), ("123abc456/78de90", "123abc456", "78de90")],
)
def test_parse_valid_basic(s, author, name):
    assert ToolId.parse(s) == new_id(author, name)


@pytest.mark.parametrize("s", ["a/ b", "a/b ", "a /b"])
def test_parse_valid_extra_whitespace(s):
    parsed = ToolId.parse(s)
    assert parsed == new_id("a", "b")
    assert str(parsed) == "a/b"


def test_parse_valid_provider():
    parsed = ToolId.parse("github:a/b")
    assert parsed == new_id("a", "b", ArtifactProvider.GITHUB)
    assert parsed.provider is ArtifactProvider.GITHUB


@pytest.mark.parametrize("s", ["", "/", "a/", "/b"])
def test_parse_invalid_missing(s):
    with pytest.raises(ToolIdParseError):
        ToolId.parse(s)


def test_parse_error_kinds():
    with pytest.raises(ToolIdParseError) as err:
        ToolId.parse("")
    assert err.value.kind == "empty"
    with pytest.raises(ToolIdParseError) as err:
        ToolId.parse("ab")
    assert str(err.value) == "missing '/' separator"
    with pytest.raises(ToolIdParseError) as err:
        ToolId.parse("/b")
    assert err.value.kind == "invalid_author"
    with pytest.raises(ToolIdParseError) as err:
        ToolId.parse("a/")
    assert err.value.kind == "invalid_name"


@pytest.mark.parametrize("s", ["a/b/", "a/b/c"])
def test_parse_invalid_extra_separator(s):
    with pytest.raises(ToolIdParseError):
        ToolId.parse(s)


@pytest.mark.parametrize("s", [":a/b", "unknown:a/b", "hubgit:a/b", "bitbab:a/b"])
def test_parse_invalid_provider(s):
    with pytest.raises(ToolIdParseError) as err:
        ToolId.parse(s)
    assert err.value.kind == "invalid_provider"


def test_case_preservation():
    assert new_id("author", "name").author == "author"
    assert new_id("author", "name").name == "name"
    assert new_id("Author", "Name").author == "Author"
    assert new_id("Author", "Name").name == "Name"
    assert new_id("123abc456", "78de90").author == "123abc456"
    assert new_id("123abc456", "78de90").name == "78de90"


def test_case_sensitivity_eq():
    assert new_id("a", "b") == new_id("A", "B")
    assert new_id("author", "name") == new_id("Author", "Name")
    assert new_id("123abc456", "78de90") == new_id("123ABC456", "78DE90")


def test_case_sensitivity_ord():
    for left, right in [
        (new_id("a", "b"), new_id("A", "B")),
        (new_id("author", "name"), new_id("Author", "Name")),
        (new_id("123abc456", "78de90"), new_id("123ABC456", "78DE90")),
    ]:
        assert not left < right
        assert not right < left
        assert left <= right and left >= right


def test_case_sensitivity_hash():
    mapping = {new_id("a", "b"): 1, new_id("author", "name"): 2, new_id("123abc456", "78de90"): 3}
    assert mapping.get(new_id("A", "B")) == 1
    assert mapping.get(new_id("Author", "Name")) == 2
    assert mapping.get(new_id("123ABC456", "78DE90")) == 3


def test_ordering_by_author_then_name():
    ids = [ToolId.parse("b/a"), ToolId.parse("A/z"), ToolId.parse("a/B")]
    assert [str(i) for i in sorted(ids)] == ["a/B", "A/z", "b/a"]


def test_display_uses_original_casing():
    assert str(ToolId.parse("github:Rojo-Rbx/Rojo")) == "Rojo-Rbx/Rojo"


def test_into_alias():
    alias = ToolId.parse("rojo-rbx/Rojo").into_alias()
    assert alias == ToolAlias("rojo")
    assert alias.name == "Rojo"


def test_artifact_provider_parse():
    assert ArtifactProvider.parse("github") is ArtifactProvider.GITHUB
    assert str(ArtifactProvider.GITHUB) == "github"
    assert ArtifactProvider.GITHUB.display_name == "GitHub"
    with pytest.raises(ValueError):
        ArtifactProvider.parse("unknown")
    with pytest.raises(ValueError):
        ArtifactProvider.parse("")