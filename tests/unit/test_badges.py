"""Unit tests for the badge endpoints and the badge update builder."""

from __future__ import annotations

import json

import pytest

from fakes import FakeApi, badge_payload
from robolt.client import Robolt
from robolt.core.client import Anonymous, Authenticated
from robolt.core.domain.models import RobloxBadge
from robolt.core.errors import DecodeError, HttpError, NotFoundError, UnrecognizedBadgeError

BADGES = "https://badges.roblox.com"
WEB = "https://www.roblox.com"


class TestReadBadges:
    @pytest.mark.asyncio
    async def test_fetch_badge(self, client: Robolt[Anonymous], fake_api: FakeApi) -> None:
        fake_api.add("GET", f"{BADGES}/v1/badges/7", json=badge_payload(7))

        badge = await client.fetch_badge(7)

        assert badge.id == 7
        assert badge.display_name == "Badge 7"
        assert badge.statistics.awarded_count == 1500
        assert badge.awarding_universe is not None
        assert badge.awarding_universe.root_place_id == 7700

    @pytest.mark.asyncio
    async def test_optional_fields_may_be_absent(
        self, client: Robolt[Anonymous], fake_api: FakeApi
    ) -> None:
        payload = badge_payload(8, description=None)
        del payload["awardingUniverse"]
        fake_api.add("GET", f"{BADGES}/v1/badges/8", json=payload)

        badge = await client.fetch_badge(8)

        assert badge.description is None
        assert badge.awarding_universe is None

    @pytest.mark.asyncio
    async def test_missing_badge_is_not_found(
        self, client: Robolt[Anonymous], fake_api: FakeApi
    ) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await client.fetch_badge(404404)

        assert exc_info.value.status == 404
        assert isinstance(exc_info.value, HttpError)

    @pytest.mark.asyncio
    async def test_other_errors_are_not_rewritten(
        self, client: Robolt[Anonymous], fake_api: FakeApi
    ) -> None:
        fake_api.add("GET", f"{BADGES}/v1/badges/9", status=500, content=b"boom")

        with pytest.raises(HttpError) as exc_info:
            await client.fetch_badge(9)

        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.body == "boom"

    @pytest.mark.asyncio
    async def test_game_and_user_badges(self, client: Robolt[Anonymous], fake_api: FakeApi) -> None:
        fake_api.add(
            "GET",
            f"{BADGES}/v1/universes/77/badges",
            json={"previousPageCursor": None, "data": [badge_payload(2), badge_payload(1)]},
        )
        fake_api.add("GET", f"{BADGES}/v1/users/5/badges", json={"data": [badge_payload(3)]})

        game = await client.fetch_game_badges(77)
        assert fake_api.last.url.params["limit"] == "100"
        user = await client.fetch_user_badges(5, limit=10)
        assert fake_api.last.url.params["limit"] == "10"

        assert [b.id for b in game] == [2, 1]
        assert [b.id for b in user] == [3]

    @pytest.mark.asyncio
    async def test_awarded_dates(self, client: Robolt[Anonymous], fake_api: FakeApi) -> None:
        fake_api.add(
            "GET",
            f"{BADGES}/v1/users/5/badges/awarded-dates",
            json={"data": [{"badgeId": 2, "awardedDate": "2022-02-02T02:02:02Z"}]},
        )

        dates = await client.fetch_user_awarded_badge_dates(5, [1, 2])

        assert fake_api.last.url.params["badgeIds"] == "1,2"
        assert [d.badge_id for d in dates] == [2]
        assert dates[0].awarded_date.year == 2022


class TestRobloxBadges:
    @pytest.mark.asyncio
    async def test_maps_names(self, client: Robolt[Anonymous], fake_api: FakeApi) -> None:
        fake_api.add(
            "GET",
            f"{WEB}/badges/roblox",
            json={"RobloxBadges": [{"Name": "Veteran"}, {"Name": "Welcome To The Club"}]},
        )

        badges = await client.fetch_roblox_badges(1)

        assert fake_api.last.url.params["userId"] == "1"
        assert badges == [RobloxBadge.VETERAN, RobloxBadge.WELCOME_TO_THE_CLUB]

    @pytest.mark.asyncio
    async def test_unknown_name_is_surfaced(
        self, client: Robolt[Anonymous], fake_api: FakeApi
    ) -> None:
        fake_api.add(
            "GET",
            f"{WEB}/badges/roblox",
            json={"RobloxBadges": [{"Name": "Veteran"}, {"Name": "Time Traveler"}]},
        )

        with pytest.raises(UnrecognizedBadgeError) as exc_info:
            await client.fetch_roblox_badges(1)

        assert exc_info.value.name == "Time Traveler"
        assert isinstance(exc_info.value, DecodeError)

    @pytest.mark.asyncio
    async def test_has_roblox_badge(self, client: Robolt[Anonymous], fake_api: FakeApi) -> None:
        fake_api.add("GET", f"{WEB}/badges/roblox", json={"RobloxBadges": [{"Name": "Bloxxer"}]})

        assert await client.has_roblox_badge(1, RobloxBadge.BLOXXER)
        assert not await client.has_roblox_badge(1, RobloxBadge.ADMINISTRATOR)


class TestBadgeMutations:
    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(
        self, auth_client: Robolt[Authenticated], fake_api: FakeApi
    ) -> None:
        fake_api.add("PATCH", f"{BADGES}/v1/badges/7", content=b"")

        result = await auth_client.update_badge(7).enabled(True).update()

        assert result is None
        assert fake_api.last.method == "PATCH"
        assert json.loads(fake_api.last.content) == {"enabled": True}

    @pytest.mark.asyncio
    async def test_update_all_fields(
        self, auth_client: Robolt[Authenticated], fake_api: FakeApi
    ) -> None:
        fake_api.add("PATCH", f"{BADGES}/v1/badges/7", json={})

        await (
            auth_client.update_badge(7)
            .name("Champion")
            .description("Win ten rounds")
            .enabled(False)
            .update()
        )

        assert json.loads(fake_api.last.content) == {
            "name": "Champion",
            "description": "Win ten rounds",
            "enabled": False,
        }

    def test_builder_payload_without_fields(self, auth_client: Robolt[Authenticated]) -> None:
        payload = auth_client.update_badge(7).payload()

        assert payload.model_dump(exclude_none=True) == {}

    @pytest.mark.asyncio
    async def test_update_failure(
        self, auth_client: Robolt[Authenticated], fake_api: FakeApi
    ) -> None:
        fake_api.add("PATCH", f"{BADGES}/v1/badges/7", status=403, json={"errors": []})

        with pytest.raises(HttpError) as exc_info:
            await auth_client.update_badge(7).enabled(True).update()

        assert exc_info.value.status == 403

    @pytest.mark.asyncio
    async def test_remove_badge(self, auth_client: Robolt[Authenticated], fake_api: FakeApi) -> None:
        fake_api.add("DELETE", f"{BADGES}/v1/user/badges/7", json={})

        await auth_client.remove_badge(7)

        assert fake_api.last.method == "DELETE"
