from __future__ import annotations

import threading

import pytest

from bgg_client.xmlapi import BGGClient, DetailCache


class FakeTransport:
    """Answers fetches from a handler and records requested URLs."""

    def __init__(self, handler):
        self.handler = handler
        self.urls: list[str] = []
        self._lock = threading.Lock()

    def fetch(self, url):
        with self._lock:
            self.urls.append(url)
        result = self.handler(url)
        if isinstance(result, Exception):
            raise result
        if isinstance(result, str):
            return result.encode("utf-8")
        return result


@pytest.fixture
def make_client():
    def _make(handler, cache=None):
        transport = FakeTransport(handler)
        client = BGGClient(transport=transport, cache=cache if cache is not None else DetailCache())
        return client, transport

    return _make


THING_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
  <item type="boardgameexpansion" id="325">
    <thumbnail>https://cf.geekdo-images.com/seafarers_t.jpg</thumbnail>
    <image>https://cf.geekdo-images.com/seafarers.jpg</image>
    <name type="alternate" sortindex="1" value="Catan: Seefahrer"/>
    <name type="primary" sortindex="1" value="Catan: Seafarers"/>
    <description>Sail &amp; settle new islands.</description>
    <yearpublished value="1997"/>
    <minplayers value="3"/>
    <maxplayers value="4"/>
    <poll name="suggested_numplayers" title="User Suggested Number of Players" totalvotes="12">
      <results numplayers="3">
        <result value="Best" numvotes="5"/>
        <result value="Recommended" numvotes="2"/>
        <result value="Not Recommended" numvotes="1"/>
      </results>
      <results numplayers="4+">
        <result value="Best" numvotes="1"/>
      </results>
    </poll>
    <playingtime value="90"/>
    <link type="boardgamecategory" id="1042" value="Expansion for Base-game"/>
    <link type="boardgamemechanic" id="2072" value="Dice Rolling"/>
    <link type="boardgamemechanic" id="2002" value="Tile Placement"/>
    <link type="boardgamedesigner" id="11" value="Klaus Teuber"/>
    <link type="boardgameartist" id="12" value="Volkan Baga"/>
    <link type="boardgamepublisher" id="37" value="KOSMOS"/>
    <link type="boardgameexpansion" id="13" value="CATAN" inbound="true"/>
    <statistics page="1">
      <ratings>
        <average value="7.05"/>
        <bayesaverage value="6.9"/>
        <ranks>
          <rank type="subtype" id="1" name="boardgame" friendlyname="Board Game Rank" value="Not Ranked" bayesaverage="Not Ranked"/>
        </ranks>
      </ratings>
    </statistics>
  </item>
</items>
"""

BASE_GAME_XML = """<?xml version="1.0" encoding="utf-8"?>
<items>
  <item type="boardgame" id="13">
    <name type="primary" value="CATAN"/>
    <description>Trade, build, settle.</description>
    <yearpublished value="1995"/>
    <minplayers value="3"/>
    <maxplayers value="4"/>
    <playingtime value="120"/>
    <link type="boardgamecategory" id="1026" value="Negotiation"/>
    <link type="boardgameexpansion" id="325" value="Catan: Seafarers"/>
    <link type="boardgameexpansion" id="926" value="Catan: Cities &amp; Knights"/>
    <statistics page="1">
      <ratings>
        <average value="7.1"/>
        <bayesaverage value="6.95"/>
        <ranks>
          <rank type="subtype" id="1" name="boardgame" value="548"/>
          <rank type="family" id="5497" name="strategygames" value="701"/>
        </ranks>
      </ratings>
    </statistics>
  </item>
</items>
"""


def collection_xml(*entries):
    body = "".join(
        f"""<item objecttype="thing" objectid="{game_id}" subtype="boardgame" collid="1">
              <name sortindex="1">{name}</name>
              <status own="1" prevowned="0" fortrade="0" want="0" wanttoplay="0" wanttobuy="0"
                      wishlist="0" preordered="0" lastmodified="2020-01-01 10:00:00"/>
            </item>"""
        for game_id, name in entries
    )
    return f'<?xml version="1.0" encoding="utf-8"?><items totalitems="{len(entries)}">{body}</items>'


def comments_page_xml(game_id, start, count):
    body = "".join(
        f'<comment username="user{n}" rating="{(n % 10) + 1}" value="comment {n}"/>'
        for n in range(start, start + count)
    )
    return (
        f'<?xml version="1.0" encoding="utf-8"?><items><item type="boardgame" id="{game_id}">'
        f'<comments page="1" totalitems="150">{body}</comments></item></items>'
    )
