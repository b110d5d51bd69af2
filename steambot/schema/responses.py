"""Response shapes returned by the Steam Web API and community endpoints.

Only the fields the bot reads are modelled; anything else in the payload is
ignored. Missing lists default to empty so partial responses still validate.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# -- ISteamUser/GetPlayerSummaries ------------------------------------------


class PlayerSummary(_Lenient):
    steam_id: str = Field(alias="steamid")
    persona_name: str = Field(default="", alias="personaname")
    profile_url: str = Field(default="", alias="profileurl")
    avatar: str = ""
    avatar_medium: str = Field(default="", alias="avatarmedium")
    avatar_full: str = Field(default="", alias="avatarfull")


class _PlayerList(_Lenient):
    players: list[PlayerSummary] = []


class PlayerSummariesResponse(_Lenient):
    response: _PlayerList = _PlayerList()

    @property
    def players(self) -> list[PlayerSummary]:
        return self.response.players


# -- community inventory ----------------------------------------------------


class InventoryAsset(_Lenient):
    app_id: int = Field(alias="appid")
    context_id: str = Field(alias="contextid")
    asset_id: str = Field(alias="assetid")
    class_id: str = Field(alias="classid")
    instance_id: str = Field(default="0", alias="instanceid")
    amount: str = "1"


class InventoryDescription(_Lenient):
    app_id: int = Field(alias="appid")
    class_id: str = Field(alias="classid")
    instance_id: str = Field(default="0", alias="instanceid")
    name: str = ""
    market_hash_name: str = ""
    icon_url: str = ""


class PlayerInventoryResponse(_Lenient):
    assets: list[InventoryAsset] = []
    descriptions: list[InventoryDescription] = []

    def describe(self, asset: InventoryAsset) -> InventoryDescription | None:
        """Return the description matching *asset*'s class and instance ids."""
        for desc in self.descriptions:
            if desc.class_id == asset.class_id and desc.instance_id == asset.instance_id:
                return desc
        return None


# -- ISteamUserStats/GetUserStatsForGame ------------------------------------


class GameStat(_Lenient):
    name: str
    value: float = 0


class Achievement(_Lenient):
    name: str
    achieved: int = 0


class _PlayerStats(_Lenient):
    steam_id: str = Field(default="", alias="steamID")
    game_name: str = Field(default="", alias="gameName")
    stats: list[GameStat] = []
    achievements: list[Achievement] = []


class UserStatsForGameResponse(_Lenient):
    player_stats: _PlayerStats = Field(default_factory=_PlayerStats, alias="playerstats")


# -- IPlayerService/GetOwnedGames + GetRecentlyPlayedGames ------------------


class OwnedGame(_Lenient):
    app_id: int = Field(alias="appid")
    name: str = ""
    playtime_forever: int = 0
    img_icon_url: str = ""
    img_logo_url: str = ""


class RecentGame(OwnedGame):
    playtime_2weeks: int = 0


class _OwnedGames(_Lenient):
    game_count: int = 0
    games: list[OwnedGame] = []


class _RecentGames(_Lenient):
    total_count: int = 0
    games: list[RecentGame] = []


class OwnedGamesResponse(_Lenient):
    response: _OwnedGames = _OwnedGames()


class RecentlyPlayedGamesResponse(_Lenient):
    response: _RecentGames = _RecentGames()


# -- login/dologin ----------------------------------------------------------


class LoginResponse(_Lenient):
    success: bool = False
    requires_twofactor: bool = False
    captcha_needed: bool = False
    captcha_gid: str = ""
    message: str = ""
