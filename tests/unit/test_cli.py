"""CLI tests: commands run against the in-memory API."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fakes import SESSION, FakeApi, badge_payload, user_payload
from robolt.cli import main as cli_main
from robolt.client import Robolt
from robolt.core.config import AppSettings

runner = CliRunner()

USERS = "https://users.roblox.com"
FRIENDS = "https://friends.roblox.com"
BADGES = "https://badges.roblox.com"
WEB = "https://www.roblox.com"


@pytest.fixture(autouse=True)
def _wire_clients(
    monkeypatch: pytest.MonkeyPatch, fake_api: FakeApi, settings: AppSettings
) -> None:
    monkeypatch.setattr(
        cli_main,
        "_anonymous_client",
        lambda: Robolt.anonymous(settings, transport=fake_api.transport(settings)),
    )
    monkeypatch.setattr(
        cli_main,
        "_authenticated_client",
        lambda: Robolt.authenticated(
            SESSION, settings, transport=fake_api.transport(settings, session_cookie=SESSION)
        ),
    )


def test_user_table(fake_api: FakeApi) -> None:
    fake_api.add("GET", f"{USERS}/v1/users/1", json=user_payload(1, "roblox"))

    result = runner.invoke(cli_main.app, ["user", "1"])

    assert result.exit_code == 0, result.output
    assert "@roblox" in result.stdout


def test_user_json(fake_api: FakeApi) -> None:
    fake_api.add("GET", f"{USERS}/v1/users/1", json=user_payload(1, "roblox"))

    result = runner.invoke(cli_main.app, ["user", "1", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["username"] == "roblox"


def test_user_output_file(fake_api: FakeApi, tmp_path: Path) -> None:
    fake_api.add("GET", f"{USERS}/v1/users/1", json=user_payload(1))
    target = tmp_path / "user.json"

    result = runner.invoke(cli_main.app, ["user", "1", "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert json.loads(target.read_text(encoding="utf-8"))["id"] == 1


def test_friend_count(fake_api: FakeApi) -> None:
    fake_api.add("GET", f"{FRIENDS}/v1/users/123/friends/count", json={"count": 42})

    result = runner.invoke(cli_main.app, ["friends", "123", "--count"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "42"


def test_followers_json(fake_api: FakeApi) -> None:
    fake_api.add("GET", f"{FRIENDS}/v1/users/5/followers", json={"data": [user_payload(8)]})

    result = runner.invoke(cli_main.app, ["followers", "5", "--limit", "3", "--json"])

    assert result.exit_code == 0, result.output
    assert fake_api.last.url.params["limit"] == "3"
    assert [u["id"] for u in json.loads(result.stdout)] == [8]


def test_game_badges(fake_api: FakeApi) -> None:
    fake_api.add("GET", f"{BADGES}/v1/universes/77/badges", json={"data": [badge_payload(2)]})

    result = runner.invoke(cli_main.app, ["badges", "77", "--game", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["display_name"] == "Badge 2"


def test_unknown_platform_badge_fails(fake_api: FakeApi) -> None:
    fake_api.add("GET", f"{WEB}/badges/roblox", json={"RobloxBadges": [{"Name": "Mystery"}]})

    result = runner.invoke(cli_main.app, ["roblox-badges", "1"])

    assert result.exit_code == 1
    assert "Mystery" in result.stdout


def test_http_error_exits_with_one(fake_api: FakeApi) -> None:
    result = runner.invoke(cli_main.app, ["points", "5", "77"])

    assert result.exit_code == 1
    assert "404" in result.stdout


def test_me(fake_api: FakeApi) -> None:
    fake_api.add(
        "GET", f"{USERS}/v1/users/authenticated", json={"id": 9, "name": "me", "displayName": "Me"}
    )
    fake_api.add("GET", f"{FRIENDS}/v1/my/friends/count", json={"count": 2})
    fake_api.add("GET", f"{FRIENDS}/v1/user/friend-requests/count", json={"count": 5})

    result = runner.invoke(cli_main.app, ["me", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "id": 9,
        "username": "me",
        "display_name": "Me",
        "friends": 2,
        "friend_requests": 5,
    }


def test_me_without_cookie(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        cli_main,
        "_authenticated_client",
        lambda: Robolt.authenticated(settings=AppSettings(_env_file=None)),
    )

    result = runner.invoke(cli_main.app, ["me"])

    assert result.exit_code == 1
    assert "ROBOLT_ROBLOSECURITY" in result.stdout
