"""Tests for line decoding and string character handling."""

from picscript.text.decoder import decode_line, lookup_entity
from tests.conftest import read


def _text(source: str, **overrides) -> str:
    result = read(source, **overrides)
    assert result.ok, [r.render() for r in result.errors]
    return result.ctx.scene[0].strings[0].text


def test_decode_utf8():
    assert decode_line("café\n".encode("utf-8")) == "café\n"


def test_decode_invalid_bytes_pass_through():
    assert decode_line(b"\xe9t\xe9\n") == "été\n"


def test_lookup_entity():
    assert lookup_entity("amp") == "&"
    assert lookup_entity("eacute") == "é"
    assert lookup_entity("nosuchentity") is None


def test_named_entity_in_string():
    assert _text('text "a&amp;b";') == "a&b"


def test_numeric_entities_in_string():
    assert _text('text "&#65;&#x42;";') == "AB"


def test_unknown_entity_stays_literal():
    assert _text('text "a&bogus;b";') == "a&bogus;b"


def test_typographic_quotes_and_dash():
    assert _text("text \"``hi''\";") == "“hi”"
    assert _text('text "a--b";') == "a–b"
    assert _text("text \"it's\";") == "it’s"


def test_translation_disabled():
    assert _text("text \"``hi'' a--b\";", translate_chars=False) == "``hi'' a--b"


def test_doubled_quote_is_literal():
    assert _text('text "say ""hi""";') == 'say "hi"'


def test_escaped_quote_does_not_end_string():
    assert _text('text "a&quot;b";') == 'a"b'
