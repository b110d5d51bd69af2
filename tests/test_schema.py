"""Tests for schema helpers and payload models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from steambot.schema import (
    MarketItem,
    PlayerInventoryResponse,
    TradeAsset,
    TradeOffer,
    expand_dotted_keys,
)


class TestExpandDottedKeys:
    def test_flat(self):
        assert expand_dotted_keys({"rate_limit.burst": 5}) == {"rate_limit": {"burst": 5}}

    def test_nested_passthrough(self):
        data = {"rate_limit": {"burst": 5}, "http": {"timeout": 3}}
        assert expand_dotted_keys(data) == data

    def test_mixed(self):
        data = {"rate_limit.burst": 5, "rate_limit": {"requests_per_second": 2}}
        assert expand_dotted_keys(data) == {"rate_limit": {"burst": 5, "requests_per_second": 2}}

    def test_dotted_inside_nested(self):
        assert expand_dotted_keys({"a": {"b.c": 1}}) == {"a": {"b": {"c": 1}}}

    def test_conflict_with_scalar(self):
        with pytest.raises(ValueError, match="conflicts"):
            expand_dotted_keys({"rate_limit": 3, "rate_limit.burst": 5})

    @pytest.mark.parametrize(
        "data",
        [
            {"rate_limit.burst": 5, "rate_limit": {"burst": 6}},
            {"rate_limit": {"burst": 6}, "rate_limit.burst": 5},
            {"a": {"b.c": 1, "b": {"c": 2}}},
        ],
    )
    def test_same_scalar_twice_rejected(self, data):
        with pytest.raises(ValueError, match="duplicate"):
            expand_dotted_keys(data)

    def test_section_replacing_scalar_rejected(self):
        with pytest.raises(ValueError, match="conflicts"):
            expand_dotted_keys({"rate_limit.burst": 5, "rate_limit.burst.x": 1})


class TestTradeOffer:
    def test_json_tradeoffer(self):
        offer = TradeOffer(
            partner_steam_id="1",
            items_to_receive=[TradeAsset(appid=440, contextid="2", assetid="9", amount=3)],
        )
        body = json.loads(offer.to_json_tradeoffer())
        assert body["me"] == {"assets": [], "currency": [], "ready": False}
        assert body["them"]["assets"] == [
            {"appid": 440, "contextid": "2", "assetid": "9", "amount": 3}
        ]

    def test_compact_separators(self):
        assert " " not in TradeOffer(partner_steam_id="1").to_json_tradeoffer()


class TestMarketItem:
    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            MarketItem(app_id=730, context_id=2, asset_id=1, price=0)


class TestInventory:
    def test_describe_missing(self):
        inv = PlayerInventoryResponse.model_validate(
            {"assets": [{"appid": 730, "contextid": "2", "assetid": "1", "classid": "x"}]}
        )
        assert inv.describe(inv.assets[0]) is None
