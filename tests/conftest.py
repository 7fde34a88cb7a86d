"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bovada_props.config import Settings

ENDPOINT_GAME = "https://www.bovada.lv/services/sports/event/coupon/events/A/description/football/game?lang=en"
ENDPOINT_SPECIALS = "https://www.bovada.lv/services/sports/event/coupon/events/A/description/football/specials?lang=en"


def make_outcome(description: str, decimal: object = "1.91", handicap: str | None = None) -> dict:
    price: dict = {"id": f"p-{description}", "decimal": decimal}
    if handicap is not None:
        price["handicap"] = handicap
    return {"id": f"o-{description}", "description": description, "status": "O", "price": price}


def make_market(description: str, outcomes: list[dict]) -> dict:
    return {
        "id": f"m-{description}",
        "descriptionKey": description.lower().replace(" ", "_"),
        "description": description,
        "outcomes": outcomes,
    }


def make_event(description: str, groups: list[list[dict]]) -> dict:
    return {
        "id": f"e-{description}",
        "description": description,
        "status": "O",
        "startTime": 1612740600000,
        "displayGroups": [
            {"id": f"g{i}", "description": f"Group {i}", "markets": markets}
            for i, markets in enumerate(groups)
        ],
    }


def make_response(*events: dict) -> list[dict]:
    return [{"events": list(events)}]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        endpoints=[ENDPOINT_GAME, ENDPOINT_SPECIALS],
        output_path=str(tmp_path / "csv" / "props.csv"),
        request_timeout_seconds=5.0,
        overall_timeout_seconds=5.0,
    )


@pytest.fixture
def game_response() -> list[dict]:
    return make_response(
        make_event(
            "Kansas City Chiefs @ Tampa Bay Buccaneers",
            [
                [
                    make_market(
                        "Point Spread",
                        [
                            make_outcome("Kansas City Chiefs", "1.91", "-3.5"),
                            make_outcome("Tampa Bay Buccaneers", "1.91", "+3.5"),
                        ],
                    ),
                    make_market(
                        "Moneyline",
                        [
                            make_outcome("Kansas City Chiefs", "1.67"),
                            make_outcome("Tampa Bay Buccaneers", "2.25"),
                        ],
                    ),
                ],
                [
                    make_market("See all player props", []),
                    make_market(
                        "Total Points",
                        [
                            make_outcome("Over", "1.87", "56.5"),
                            make_outcome("Under", "1.95", "56.5"),
                        ],
                    ),
                ],
            ],
        )
    )


@pytest.fixture
def specials_response() -> list[dict]:
    return make_response(
        make_event(
            "Super Bowl Specials",
            [
                [
                    make_market(
                        "Super Bowl MVP",
                        [
                            make_outcome("Patrick Mahomes", "1.67"),
                            make_outcome("Tom Brady", "3.5"),
                            make_outcome("Travis Kelce", "15"),
                        ],
                    ),
                ],
            ],
        )
    )
