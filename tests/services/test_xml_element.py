import pytest

from mediacat.domain.errors import ParseError
from mediacat.services.xml.element import XmlElement, parse_xml


def test_parse_xml_root_and_children():
    el = parse_xml("<track><id>abc</id><empty/><tag>1</tag><tag>2</tag></track>")
    assert isinstance(el, XmlElement)
    assert el.tag == "track"
    assert el.has_child("id")
    assert not el.has_child("popularity")
    assert el.get_child_text("id") == "abc"
    assert el.get_child_text("empty") == ""
    assert el.get_child_text("tag") == "1"
    assert [c.text for c in el.get_children("tag")] == ["1", "2"]


def test_get_child_text_missing_child_raises_key_error():
    with pytest.raises(KeyError):
        parse_xml("<track/>").get_child_text("id")


def test_only_direct_children_match():
    el = parse_xml("<track><album><id>x</id></album></track>")
    assert not el.has_child("id")
    assert el.get_child("album").get_child_text("id") == "x"
    assert el.get_child("artist") is None


def test_attributes():
    el = parse_xml('<external-id type="isrc" id="X1"/>')
    assert el.get_attribute("type") == "isrc"
    assert el.get_attribute("missing") is None


def test_parse_xml_accepts_bytes():
    assert parse_xml(b"<a><b>t</b></a>").get_child_text("b") == "t"


@pytest.mark.parametrize("bad", ["", "<track>", "not xml at all", "<a></b>"])
def test_parse_xml_malformed_is_parse_error(bad):
    with pytest.raises(ParseError):
        parse_xml(bad)


@pytest.mark.parametrize(
    "doc",
    [
        '<!DOCTYPE lolz [<!ENTITY lol "lol"><!ENTITY lol2 "&lol;&lol;">]><track><id>&lol2;</id></track>',
        b'<!DOCTYPE track SYSTEM "track.dtd"><track/>',
    ],
)
def test_parse_xml_refuses_doctype(doc):
    with pytest.raises(ParseError):
        parse_xml(doc)
