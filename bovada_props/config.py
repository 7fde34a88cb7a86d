from __future__ import annotations

import logging

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_COUPON_BASE = "https://www.bovada.lv/services/sports/event/coupon/events/A/description/football"

DEFAULT_ENDPOINTS: list[str] = [
    # Game props + lines
    f"{_COUPON_BASE}/super-bowl/kansas-city-chiefs-tampa-bay-buccaneers-202102071830?lang=en",
    # Specials
    f"{_COUPON_BASE}/super-bowl-specials?marketFilterId=rank&preMatchOnly=true&lang=en",
    # TDs and FGs
    f"{_COUPON_BASE}/super-bowl-touchdown-and-field-goal-propositions/td-fg-propositions-super-bowl-55-202102071830?lang=en",
    # Defense and special teams
    f"{_COUPON_BASE}/super-bowl-defense-and-special-team-propositions/defense-sp-team-props-super-bowl-55-202102071830?lang=en",
    # Receiving
    f"{_COUPON_BASE}/super-bowl-receiving-propositions/receiving-propositions-super-bowl-55-202102071830?lang=en",
    # Rushing
    f"{_COUPON_BASE}/super-bowl-rushing-propositions/rushing-propositions-super-bowl-55-202102071830?lang=en",
    # Quarterback
    f"{_COUPON_BASE}/super-bowl-quarterback-propositions/quarterback-props-super-bowl-55-202102071830?lang=en",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Bovada coupon endpoints (JSON array in .env)
    endpoints: list[str] = Field(default_factory=lambda: list(DEFAULT_ENDPOINTS), min_length=1)

    # Output
    output_path: str = "csv/2021-02.csv"

    # Flattening: drop markets with no outcomes (navigation placeholders)
    skip_placeholder_markets: bool = True

    # Serialization: append $$points= to each outcome cell
    include_points: bool = True

    # Timeouts (seconds)
    request_timeout_seconds: float = 30.0
    overall_timeout_seconds: float = 120.0

    # Logging
    log_level: str = "INFO"

    @field_validator("endpoints")
    @classmethod
    def _check_endpoints(cls, value: list[str]) -> list[str]:
        for endpoint in value:
            try:
                url = httpx.URL(endpoint)
            except httpx.InvalidURL as exc:
                raise ValueError(f"invalid endpoint URL: {endpoint!r}") from exc
            if url.scheme not in ("http", "https") or not url.host:
                raise ValueError(f"endpoint must be an absolute http(s) URL: {endpoint!r}")
        return value

    @field_validator("request_timeout_seconds", "overall_timeout_seconds")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeouts must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
