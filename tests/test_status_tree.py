import pytest

from nc_exporter.core.errors import ParseError
from nc_exporter.lib.status_tree import parse_status_document


def test_parse_keeps_document_order_and_text():
    root = parse_status_document(b"<data><b>1</b><a> 2 </a><c><d>x</d></c></data>")
    assert root.name == "data"
    assert [child.name for child in root.children] == ["b", "a", "c"]
    assert root.children[1].text == "2"
    assert root.children[2].children[0].text == "x"


def test_whitespace_only_text_is_not_a_value():
    root = parse_status_document(b"<data>\n   <empty>   </empty>\n</data>")
    assert root.text is None
    assert root.children[0].text is None
    assert not root.children[0].is_leaf


def test_comments_and_namespaces_are_dropped():
    root = parse_status_document(
        b'<ocs xmlns:x="urn:x"><!-- comment --><x:meta><x:status>ok</x:status></x:meta></ocs>'
    )
    assert [child.name for child in root.children] == ["meta"]
    assert root.children[0].children[0].name == "status"


def test_accepts_str_input():
    root = parse_status_document("<data><v>1</v></data>")
    assert root.children[0].is_leaf


@pytest.mark.parametrize("raw", [b"", b"   ", b"<data><open></data>", b"<data>", b"not xml"])
def test_malformed_xml_raises_parse_error(raw):
    with pytest.raises(ParseError):
        parse_status_document(raw)


def test_invalid_encoding_raises_parse_error():
    with pytest.raises(ParseError):
        parse_status_document(b'<?xml version="1.0" encoding="utf-8"?><data><v>\xff\xfe</v></data>')
