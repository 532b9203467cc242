from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date

from bgg_client.xmlapi.fields import (
    find,
    get_bool,
    get_decimal,
    get_int,
    get_ranking,
    get_string,
    parse_play_date,
)


def test_missing_node_returns_default():
    assert get_string(None) == ""
    assert get_string(None, "value", "fallback") == "fallback"
    assert get_int(None, "value") == -1
    assert get_bool(None, "own", True) is True
    assert get_decimal(None, "value", 2.5) == 2.5


def test_missing_attribute_returns_default():
    node = ET.fromstring('<stats minplayers="2"/>')
    assert get_string(node, "maxplayers", "none") == "none"
    assert get_int(node, "maxplayers", 7) == 7
    assert get_bool(node, "own") is False
    assert get_decimal(node, "average", -1.0) == -1.0


def test_string_without_attribute_reads_text_content():
    node = ET.fromstring("<description>Trade <b>and</b> build</description>")
    assert get_string(node) == "Trade and build"
    assert get_string(ET.fromstring("<comment/>")) == ""


def test_int_parsing():
    node = ET.fromstring('<x a="42" b=" 7 " c="7.5" d="abc" e=""/>')
    assert get_int(node, "a") == 42
    assert get_int(node, "b") == 7
    assert get_int(node, "c") == -1
    assert get_int(node, "d", 0) == 0
    assert get_int(node, "e") == -1


def test_only_literal_one_is_true():
    node = ET.fromstring('<status own="1" want="0" wishlist="2" fortrade="yes" trade=""/>')
    assert get_bool(node, "own") is True
    assert get_bool(node, "want") is False
    assert get_bool(node, "wishlist") is False
    assert get_bool(node, "fortrade") is False
    assert get_bool(node, "trade") is False
    assert get_bool(node, "missing") is False


def test_decimal_parsing():
    node = ET.fromstring('<r a="7.05" b="N/A" c="nan" d="8"/>')
    assert get_decimal(node, "a") == 7.05
    assert get_decimal(node, "b") == -1.0
    assert get_decimal(node, "c", 0.0) == 0.0
    assert get_decimal(node, "d") == 8.0


def test_find_tolerates_missing_start():
    assert find(None, "rating/average") is None
    node = ET.fromstring('<stats><rating value="8"><average value="7"/></rating></stats>')
    assert find(node, "rating/average").get("value") == "7"
    assert find(node, "rating/ranks") is None


def _ranks(value):
    return ET.fromstring(
        f'<ranks><rank type="family" id="5497" value="12"/>'
        f'<rank type="subtype" id="1" name="boardgame" value="{value}"/></ranks>'
    )


def test_ranking_numeric():
    assert get_ranking(_ranks("37")) == 37


def test_ranking_not_ranked_any_case():
    assert get_ranking(_ranks("Not Ranked")) == -1
    assert get_ranking(_ranks("  NOT RANKED ")) == -1
    assert get_ranking(_ranks("not ranked")) == -1


def test_ranking_missing_or_unparsable():
    assert get_ranking(None) == -1
    assert get_ranking(ET.fromstring('<ranks><rank id="5497" value="12"/></ranks>')) == -1
    assert get_ranking(ET.fromstring('<ranks><rank id="1"/></ranks>')) == -1
    assert get_ranking(_ranks("first")) == -1


def test_ranking_first_overall_entry_wins():
    ranks = ET.fromstring('<ranks><rank id="1" value="5"/><rank id="1" value="9"/></ranks>')
    assert get_ranking(ranks) == 5


def test_play_date_parsing():
    assert parse_play_date("2020-02-29") == date(2020, 2, 29)
    assert parse_play_date("not-a-date") == date.min
    assert parse_play_date("2020-13-40") == date.min
    assert parse_play_date("2021-02-29") == date.min
    assert parse_play_date("2020-2-9") == date.min
    assert parse_play_date("") == date.min
    assert parse_play_date(None) == date.min
