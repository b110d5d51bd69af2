"""Throttled Steam client.

Every outbound request goes through :meth:`SteamClient._request`, which takes
one permit from the shared :class:`~steambot.rate_limiter.RateLimiter` before
touching the network. Operations that need a Steam Guard code (login, mobile
confirmations) compute it at call time so it always matches the live clock.
"""

from __future__ import annotations

import time
from typing import Any

import httpx
from pydantic import ValidationError

from steambot import __version__
from steambot._log import get_logger
from steambot.guard import Clock, SteamGuard, generate_device_id
from steambot.rate_limiter import RateLimiter
from steambot.schema import (
    Confirmation,
    LoginResponse,
    MarketItem,
    OwnedGamesResponse,
    PlayerInventoryResponse,
    PlayerSummariesResponse,
    RateLimitConfig,
    RecentlyPlayedGamesResponse,
    TradeOffer,
    UserStatsForGameResponse,
)

logger = get_logger("client")

WEB_API_BASE = "https://api.steampowered.com"
COMMUNITY_BASE = "https://steamcommunity.com"
_USER_AGENT = f"steambot/{__version__}"


class SteamApiError(Exception):
    """Raised when a Steam request fails or returns an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LoginError(SteamApiError):
    """Raised when Steam rejects a login attempt."""


class TwoFactorRequired(LoginError):
    """Raised when the account needs a Steam Guard code that was not supplied or was wrong."""


class CaptchaRequired(LoginError):
    """Raised when Steam demands a captcha before accepting the login."""

    def __init__(self, captcha_gid: str) -> None:
        super().__init__(f"captcha required: {captcha_gid}")
        self.captcha_gid = captcha_gid


class TradeOfferError(SteamApiError):
    """Raised when a trade offer is not accepted by Steam."""


class MarketListingError(SteamApiError):
    """Raised when a market listing is rejected."""


class SteamClient:
    """Rate-limited client for the Steam Web API and community endpoints."""

    def __init__(
        self,
        api_key: str,
        *,
        guard: SteamGuard | None = None,
        limiter: RateLimiter | None = None,
        rate_limit: RateLimitConfig | None = None,
        session_id: str = "",
        timeout: float = 30.0,
        http: httpx.Client | None = None,
        clock: Clock = time.time,
    ) -> None:
        self.api_key = api_key
        self.guard = guard
        self.session_id = session_id
        self._clock = clock

        self._owns_limiter = limiter is None
        if limiter is None:
            rate_limit = rate_limit or RateLimitConfig()
            limiter = RateLimiter(rate_limit.requests_per_second, rate_limit.burst)
        self.limiter = limiter

        self._owns_http = http is None
        self._http = http or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": _USER_AGENT},
            follow_redirects=True,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_http:
            self._http.close()
        if self._owns_limiter:
            self.limiter.close()

    def __enter__(self) -> SteamClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self.limiter.acquire()
        logger.debug("%s %s", method, url)
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise SteamApiError(f"Failed to reach {url}: {e}") from e
        if response.status_code != httpx.codes.OK:
            raise SteamApiError(
                f"Steam returned non-OK status: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        return response

    def _post_form(self, url: str, data: dict[str, Any]) -> httpx.Response:
        return self._request("POST", url, data=data)

    @staticmethod
    def _json(response: httpx.Response, what: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise SteamApiError(f"Failed to decode {what} response: {e}") from e

    def _parse(self, response: httpx.Response, model_cls: type, what: str) -> Any:
        data = self._json(response, what)
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            raise SteamApiError(f"Unexpected {what} response: {e}") from e

    def _require_session(self) -> str:
        if not self.session_id:
            raise SteamApiError("No community session id; set STEAM_SESSION_ID or log in first")
        return self.session_id

    def _require_guard(self, secret: str) -> SteamGuard:
        """Return the guard if it carries *secret* (``shared_secret`` or ``identity_secret``)."""
        if self.guard is None or not getattr(self.guard, secret):
            raise SteamApiError(
                f"This operation needs the Steam Guard {secret.replace('_', ' ')}; "
                f"set STEAM_{secret.upper()}"
            )
        return self.guard

    # ------------------------------------------------------------------
    # Web API reads
    # ------------------------------------------------------------------

    def get_player_summaries(self, steam_id: str) -> PlayerSummariesResponse:
        response = self._request(
            "GET",
            f"{WEB_API_BASE}/ISteamUser/GetPlayerSummaries/v2/",
            params={"key": self.api_key, "steamids": steam_id},
        )
        return self._parse(response, PlayerSummariesResponse, "player summaries")

    def get_player_inventory(
        self, steam_id: str, app_id: int = 730, context_id: int = 2
    ) -> PlayerInventoryResponse:
        response = self._request(
            "GET",
            f"{COMMUNITY_BASE}/inventory/{steam_id}/{app_id}/{context_id}",
            params={"l": "english", "count": 5000},
        )
        return self._parse(response, PlayerInventoryResponse, "inventory")

    def get_user_stats_for_game(self, steam_id: str, app_id: int) -> UserStatsForGameResponse:
        response = self._request(
            "GET",
            f"{WEB_API_BASE}/ISteamUserStats/GetUserStatsForGame/v2/",
            params={"key": self.api_key, "steamid": steam_id, "appid": app_id},
        )
        return self._parse(response, UserStatsForGameResponse, "user stats")

    def get_owned_games(self, steam_id: str) -> OwnedGamesResponse:
        response = self._request(
            "GET",
            f"{WEB_API_BASE}/IPlayerService/GetOwnedGames/v1/",
            params={
                "key": self.api_key,
                "steamid": steam_id,
                "include_appinfo": "true",
                "include_played_free_games": "true",
            },
        )
        return self._parse(response, OwnedGamesResponse, "owned games")

    def get_recently_played_games(self, steam_id: str) -> RecentlyPlayedGamesResponse:
        response = self._request(
            "GET",
            f"{WEB_API_BASE}/IPlayerService/GetRecentlyPlayedGames/v1/",
            params={"key": self.api_key, "steamid": steam_id},
        )
        return self._parse(response, RecentlyPlayedGamesResponse, "recently played games")

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    def login(self, username: str, password: str) -> LoginResponse:
        """Log in, attaching a fresh Steam Guard code when secrets are configured."""
        data = {"username": username, "password": password}
        if self.guard is not None and self.guard.shared_secret:
            data["twofactorcode"] = self.guard.login_code(clock=self._clock)

        response = self._post_form(f"{COMMUNITY_BASE}/login/dologin", data)
        result = self._parse(response, LoginResponse, "login")

        if not result.success:
            if result.requires_twofactor:
                raise TwoFactorRequired("two-factor authentication required")
            if result.captcha_needed:
                raise CaptchaRequired(result.captcha_gid)
            raise LoginError(f"login failed: {result.message}")

        cookie = self._http.cookies.get("sessionid")
        if cookie:
            self.session_id = cookie
        logger.info("Logged in as %s", username)
        return result

    # ------------------------------------------------------------------
    # Friends
    # ------------------------------------------------------------------

    def _friend_action(self, action: str, steam_id: str) -> None:
        self._post_form(
            f"{COMMUNITY_BASE}/actions/{action}",
            {"sessionid": self._require_session(), "steamid": steam_id},
        )

    def add_friend(self, steam_id: str) -> None:
        self._friend_action("AddFriendAjax", steam_id)
        logger.info("Friend request sent to %s", steam_id)

    def remove_friend(self, steam_id: str) -> None:
        self._friend_action("RemoveFriendAjax", steam_id)
        logger.info("Friend removed: %s", steam_id)

    def accept_friend_request(self, steam_id: str) -> None:
        self._friend_action("AcceptFriendRequest", steam_id)
        logger.info("Accepted friend request from %s", steam_id)

    # ------------------------------------------------------------------
    # Trading and market
    # ------------------------------------------------------------------

    def send_trade_offer(self, offer: TradeOffer) -> str:
        """Send *offer* and return the new trade offer id."""
        response = self._post_form(
            f"{COMMUNITY_BASE}/tradeoffer/new/send",
            {
                "sessionid": self._require_session(),
                "partner": offer.partner_steam_id,
                "tradeoffermessage": offer.message,
                "json_tradeoffer": offer.to_json_tradeoffer(),
            },
        )
        result = self._json(response, "trade offer")
        offer_id = result.get("tradeofferid") if isinstance(result, dict) else None
        if not offer_id:
            raise TradeOfferError(f"trade offer failed: {result}")
        logger.info("Trade offer %s sent to %s", offer_id, offer.partner_steam_id)
        return str(offer_id)

    def list_market_item(self, item: MarketItem) -> dict[str, Any]:
        response = self._post_form(
            f"{COMMUNITY_BASE}/market/sellitem/",
            {
                "sessionid": self._require_session(),
                "appid": item.app_id,
                "contextid": item.context_id,
                "assetid": item.asset_id,
                "price": item.price,
                "currency": item.currency,
                "quantity": item.quantity,
                "market_name": item.market_name,
            },
        )
        result = self._json(response, "market listing")
        if not isinstance(result, dict) or result.get("success") is not True:
            raise MarketListingError(f"listing market item failed: {result}")
        logger.info("Market item %s listed at %d", item.asset_id, item.price)
        return result

    # ------------------------------------------------------------------
    # Mobile confirmations
    # ------------------------------------------------------------------

    def _confirmation_params(self, steam_id: str, tag: str) -> dict[str, Any]:
        guard = self._require_guard("identity_secret")
        now = int(self._clock())
        return {
            "p": generate_device_id(steam_id),
            "a": steam_id,
            "k": guard.confirmation_key(tag, now),
            "t": now,
            "m": "react",
            "tag": tag,
        }

    def get_confirmations(self, steam_id: str) -> list[Confirmation]:
        response = self._request(
            "GET",
            f"{COMMUNITY_BASE}/mobileconf/getlist",
            params=self._confirmation_params(steam_id, "list"),
        )
        result = self._json(response, "confirmation list")
        if not isinstance(result, dict) or not result.get("success"):
            raise SteamApiError(f"fetching confirmations failed: {result}")
        try:
            return [Confirmation.model_validate(c) for c in result.get("conf", [])]
        except ValidationError as e:
            raise SteamApiError(f"Unexpected confirmation list response: {e}") from e

    def respond_to_confirmation(
        self, steam_id: str, confirmation: Confirmation, accept: bool = True
    ) -> None:
        op = "allow" if accept else "cancel"
        params = self._confirmation_params(steam_id, op)
        params.update({"op": op, "cid": confirmation.id, "ck": confirmation.nonce})
        response = self._request("GET", f"{COMMUNITY_BASE}/mobileconf/ajaxop", params=params)
        result = self._json(response, "confirmation")
        if not isinstance(result, dict) or not result.get("success"):
            raise SteamApiError(f"confirmation {confirmation.id} {op} failed: {result}")
        logger.info("Confirmation %s: %s", confirmation.id, op)
