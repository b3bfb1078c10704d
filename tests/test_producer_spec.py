"""Tests for producer spec parsing."""

import pytest

from anno.errors import InvalidProducerSpec
from anno.producers.spec import parse_producer_spec


def test_producer_only():
    spec = parse_producer_spec("computable-expressions:")
    assert spec.name == "computable-expressions"
    assert spec.source == ""
    assert dict(spec.params) == {}


def test_producer_with_source():
    spec = parse_producer_spec("dwarf-line-table:/example.dwarf")
    assert spec.name == "dwarf-line-table"
    assert spec.source == "/example.dwarf"


def test_producer_with_source_and_params():
    spec = parse_producer_spec("dwarf-line-table:/example.dwarf?function=bob&inline=")
    assert spec.source == "/example.dwarf"
    assert dict(spec.params) == {"function": "bob", "inline": ""}


def test_relative_source():
    spec = parse_producer_spec("debug-lines:build/a.out")
    assert spec.source == "build/a.out"


def test_name_is_lowercased():
    assert parse_producer_spec("Lines:").name == "lines"


def test_spec_is_immutable():
    spec = parse_producer_spec("lines:?a=b")
    with pytest.raises(AttributeError):
        spec.name = "other"
    with pytest.raises(TypeError):
        spec.params["a"] = "c"


def test_str_is_original_input():
    assert str(parse_producer_spec("lines:/x?y=z")) == "lines:/x?y=z"


@pytest.mark.parametrize("value", ["foo", "", ":/path", "1abc:", "has space:x", "-x:"])
def test_invalid_specs(value):
    with pytest.raises(InvalidProducerSpec) as exc_info:
        parse_producer_spec(value)
    assert exc_info.value.spec == value
    assert isinstance(exc_info.value, ValueError)


def test_invalid_spec_message_names_input():
    with pytest.raises(InvalidProducerSpec, match="'foo'"):
        parse_producer_spec("foo")


def test_spec_is_hashable():
    spec = parse_producer_spec("lines:/src?a=b")
    assert hash(spec) == hash(parse_producer_spec("lines:/src?a=b"))
    assert len({spec, parse_producer_spec("lines:/src?a=b")}) == 1


@pytest.mark.parametrize("value", ["src:/a\tb", "src:/a\nb", "src:/a\rb", "src:/path?x=1\t"])
def test_control_characters_rejected(value):
    """urlsplit would silently drop these, changing the source path."""
    with pytest.raises(InvalidProducerSpec, match="not allowed"):
        parse_producer_spec(value)
