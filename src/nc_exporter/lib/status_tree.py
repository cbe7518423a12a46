"""
status_tree.py
- Parses the raw XML status page into a tree of StatusNode objects.
- Keeps document order, element names and stripped text only; attributes,
  comments and processing instructions are dropped.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from lxml import etree

from nc_exporter.core.errors import ParseError


@dataclass
class StatusNode:
    name: str
    children: List["StatusNode"] = field(default_factory=list)
    text: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children and self.text is not None


def _new_parser():
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True, remove_pis=True)


def _build(element) -> StatusNode:
    text = (element.text or "").strip()
    node = StatusNode(name=etree.QName(element).localname, text=text or None)
    for child in element:
        # entities and anything else that is not an element
        if not isinstance(child.tag, str):
            continue
        node.children.append(_build(child))
    return node


def parse_status_document(raw: Union[bytes, str]) -> StatusNode:
    """
    Parse the status page body.

    Args:
        raw (bytes | str): Response body as returned by the status page client.

    Returns:
        StatusNode: The document element with its subtree.

    Raises:
        ParseError: if the body is empty or not well-formed XML.
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    if not raw.strip():
        raise ParseError("Empty status document")

    try:
        root = etree.fromstring(raw, parser=_new_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Error while parsing xml: {e}") from e

    return _build(root)
