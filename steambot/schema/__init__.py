"""Pydantic models for configuration, platform responses and write actions."""

from steambot.schema.actions import Confirmation, MarketItem, TradeAsset, TradeOffer
from steambot.schema.config import BotConfig, HttpConfig, RateLimitConfig, expand_dotted_keys
from steambot.schema.responses import (
    LoginResponse,
    OwnedGamesResponse,
    PlayerInventoryResponse,
    PlayerSummariesResponse,
    RecentlyPlayedGamesResponse,
    UserStatsForGameResponse,
)

__all__ = [
    "BotConfig",
    "Confirmation",
    "HttpConfig",
    "LoginResponse",
    "MarketItem",
    "OwnedGamesResponse",
    "PlayerInventoryResponse",
    "PlayerSummariesResponse",
    "RateLimitConfig",
    "RecentlyPlayedGamesResponse",
    "TradeAsset",
    "TradeOffer",
    "UserStatsForGameResponse",
    "expand_dotted_keys",
]
