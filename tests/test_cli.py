from __future__ import annotations

from bgg_client.cli.main import build_parser, run

from .conftest import THING_XML


def test_game_command_prints_details(make_client, capsys):
    client, _ = make_client(lambda url: THING_XML)
    args = build_parser().parse_args(["game", "325", "--no-cache"])
    assert run(args, client) == 0
    out = capsys.readouterr().out
    assert "Catan: Seafarers (1997)" in out
    assert "Expands: CATAN" in out
    assert "4+ players" in out


def test_game_command_reports_failure(make_client, capsys):
    client, _ = make_client(lambda url: "<items/>")
    args = build_parser().parse_args(["game", "1"])
    assert run(args, client) == 1
    assert "Could not load game 1" in capsys.readouterr().out
