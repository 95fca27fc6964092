"""Decoding of XML replies from the booking web service.

Replies come in two shapes. Most operations answer with a single value,
e.g. ``<string xmlns="http://slicify.com/">Ready</string>``, read in scalar
mode. ``GetActiveBookingIDs`` answers with a list, e.g.
``<ArrayOfInt><int>5</int><int>17</int></ArrayOfInt>``, read in list mode.

Scalar mode is positional: it takes the first leaf element in document
order whatever its tag is.
"""

import re
import xml.etree.ElementTree as ET
from typing import List, Optional

from .exceptions import ResponseParseException

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_document(body: str) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise ResponseParseException(f"Malformed XML reply: {e}", body) from e


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_scalar(body: str) -> str:
    """Return the text of the first leaf element of the reply."""
    root = _parse_document(body)
    for element in root.iter():
        if len(element) == 0:
            return element.text or ""
    raise ResponseParseException("Reply has no value field", body)


def parse_int_list(body: str, tag: str = "int") -> List[int]:
    """Return every ``tag`` element of the reply as an int, in document order."""
    root = _parse_document(body)
    values = []
    for element in root.iter():
        if _local_name(element.tag) != tag:
            continue
        values.append(parse_int(element.text or "", body))
    return values


def parse_int(text: str, body: Optional[str] = None) -> int:
    """Convert a field's text to an int."""
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise ResponseParseException(f"Expected an integer, got {text!r}", body)
    return int(stripped)
