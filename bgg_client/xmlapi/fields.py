"""
Defensive readers for values in BGG XML documents.

Every optional value the mappers read goes through one of these helpers. They
never raise: an absent element, an absent attribute or text that does not
parse all resolve to the caller's default.
"""

import math
import re
import xml.etree.ElementTree as ET
from datetime import date, datetime
from typing import Optional

from ..config import OVERALL_RANK_ID

_PLAY_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def find(node: Optional[ET.Element], path: str) -> Optional[ET.Element]:
    """Look up a child path, tolerating a missing starting node."""
    if node is None:
        return None
    return node.find(path)


def get_string(node: Optional[ET.Element], attribute: Optional[str] = None,
               default: Optional[str] = "") -> Optional[str]:
    """
    Read an attribute (or, without one, the element's text content).

    Args:
        node: Element to read from, may be None
        attribute: Attribute name; None reads the element text
        default: Value returned when the node or attribute is absent

    Returns:
        The raw string value or default
    """
    if node is None:
        return default
    if attribute is None:
        return "".join(node.itertext())
    return node.get(attribute, default)


def parse_int(value: Optional[str], default: int = -1) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def get_int(node: Optional[ET.Element], attribute: Optional[str] = None, default: int = -1) -> int:
    return parse_int(get_string(node, attribute, None), default)


def get_bool(node: Optional[ET.Element], attribute: Optional[str] = None, default: bool = False) -> bool:
    """Only the integer 1 is true; other integers are false, non-numeric text is default."""
    value = get_string(node, attribute, None)
    if value is None:
        return default
    try:
        return int(value.strip()) == 1
    except ValueError:
        return default


def get_decimal(node: Optional[ET.Element], attribute: Optional[str] = None,
                default: float = -1.0) -> float:
    value = get_string(node, attribute, None)
    if value is None:
        return default
    try:
        result = float(value.strip())
    except ValueError:
        return default
    if not math.isfinite(result):
        return default
    return result


def parse_play_date(value: Optional[str]) -> date:
    """Parse a strict YYYY-MM-DD date, falling back to date.min."""
    if not value or not _PLAY_DATE_RE.match(value):
        return date.min
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return date.min


def get_ranking(ranks: Optional[ET.Element]) -> int:
    """
    Extract the overall board game rank from a ``ranks`` element.

    Args:
        ranks: Element holding ``rank`` children, may be None

    Returns:
        The overall rank, or -1 when missing, "Not Ranked" or unparsable
    """
    if ranks is None:
        return -1

    # First match wins if upstream ever repeats the overall entry
    entry = next((r for r in ranks.findall("rank") if r.get("id") == OVERALL_RANK_ID), None)
    value = get_string(entry, "value", None)
    if value is None:
        return -1
    if value.strip().lower() == "not ranked":
        return -1
    return get_int(entry, "value", -1)
