"""Unit tests for sdkutils.utils.encoding module."""

import pytest

from sdkutils.utils.encoding import encode_params, encode_uri, encode_uri_component

# --- encode_uri_component ---


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("bar", "bar"),
        ("beer@", "beer%40"),
        ("a b&c=d", "a%20b%26c%3Dd"),
        ("/path?q#frag", "%2Fpath%3Fq%23frag"),
        ("-_.!~*'()", "-_.!~*'()"),
        ("100%", "100%25"),
        ("café", "caf%C3%A9"),
        ("", ""),
    ],
)
def test_encode_uri_component_escapes_reserved_characters(value, expected):
    """Everything except unreserved URI-component characters is escaped."""
    assert encode_uri_component(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (4, "4"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
    ],
)
def test_encode_uri_component_converts_non_strings(value, expected):
    """Numbers are stringified; booleans and None render as JSON literals."""
    assert encode_uri_component(value) == expected


# --- encode_params ---


def test_encode_params_url_encodes_and_joins_with_ampersands():
    """Pairs are encoded, joined with '=', and concatenated with '&'."""
    params = {"foo": "bar", "baz": "beer@"}
    assert encode_params(params) == "foo=bar&baz=beer%40"


def test_encode_params_encodes_keys_too():
    """Keys are percent-encoded like values."""
    assert encode_params({"filter[a b]": "x"}) == "filter%5Ba%20b%5D=x"


def test_encode_params_follows_mapping_order():
    """Pairs appear in the mapping's iteration order."""
    assert encode_params({"b": 1, "a": 2}) == "b=1&a=2"


def test_encode_params_empty_mapping():
    """An empty mapping yields an empty string."""
    assert encode_params({}) == ""


def test_encode_params_renders_none_and_booleans_as_literals():
    """None and booleans never leak Python reprs into the query string."""
    assert encode_params({"limit": None, "flag": True}) == "limit=null&flag=true"


def test_encode_params_does_not_mutate_input():
    """The parameter mapping is left unchanged."""
    params = {"foo": "beer@"}
    encode_params(params)
    assert params == {"foo": "beer@"}


# --- encode_uri ---


def test_encode_uri_replaces_placeholders_and_url_encodes():
    """Each placeholder key is replaced by its encoded value."""
    path = "foo/bar/%something/%here"
    vals = {"%something": "baz", "%here": "beer@"}
    assert encode_uri(path, vals) == "foo/bar/baz/beer%40"


def test_encode_uri_replaces_every_occurrence():
    """A placeholder used twice is substituted both times."""
    assert encode_uri("/$id/sub/$id", {"$id": "a/b"}) == "/a%2Fb/sub/a%2Fb"


def test_encode_uri_leaves_unknown_tokens_alone():
    """Template text not named in the substitutions is untouched."""
    assert encode_uri("/rooms/$roomId/$other", {"$roomId": "!r:x"}) == (
        "/rooms/!r%3Ax/$other"
    )


def test_encode_uri_without_substitutions_returns_template():
    """An empty substitution mapping returns the template unchanged."""
    assert encode_uri("/plain/path", {}) == "/plain/path"


def test_encode_uri_overlapping_placeholders_depend_on_order():
    """Overlapping tokens are order-sensitive, which is why callers must avoid them."""
    template = "/%here/%here2"
    shorter_first = encode_uri(template, {"%here": "a", "%here2": "b"})
    longer_first = encode_uri(template, {"%here2": "b", "%here": "a"})
    assert shorter_first == "/a/a2"
    assert longer_first == "/a/b"
