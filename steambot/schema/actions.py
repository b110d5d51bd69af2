"""Payloads for write actions: trade offers, market listings, confirmations."""

from __future__ import annotations

import json
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class TradeAsset(BaseModel):
    appid: int
    contextid: str
    assetid: str
    amount: Annotated[int, Field(ge=1)] = 1


class TradeOffer(BaseModel):
    partner_steam_id: str
    items_to_send: list[TradeAsset] = []
    items_to_receive: list[TradeAsset] = []
    message: str = ""

    def to_json_tradeoffer(self) -> str:
        """Serialize the ``json_tradeoffer`` form field Steam expects."""

        def side(assets: list[TradeAsset]) -> dict:
            return {
                "assets": [a.model_dump() for a in assets],
                "currency": [],
                "ready": False,
            }

        return json.dumps(
            {
                "newversion": True,
                "version": 2,
                "me": side(self.items_to_send),
                "them": side(self.items_to_receive),
            },
            separators=(",", ":"),
        )


class MarketItem(BaseModel):
    app_id: int
    context_id: int
    asset_id: int
    price: Annotated[int, Field(gt=0)]  # in the wallet's smallest currency unit
    currency: str = ""
    quantity: Annotated[int, Field(ge=1)] = 1
    market_name: str = ""


class Confirmation(BaseModel):
    """A pending mobile confirmation, as returned by ``mobileconf/getlist``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    nonce: str
    type: int = 0
    creator_id: str = ""
    headline: str = ""
    summary: list[str] = []
