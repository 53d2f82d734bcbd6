from pydantic import BaseModel
from enum import Enum
from typing import Dict, List, Optional, Union

from pairsone.models.schema_models import PlayerSchema


class VisibilityModel(str, Enum):
    public = "public"  # listed in the lobby
    private = "private"  # reachable by link only


class ClientDataModel(BaseModel):
    board_size: Union[int, str]
    players_number: Union[int, str]
    theme: str = "eighties"
    visibility: str = VisibilityModel.public.value


class JoinPlayerModel(BaseModel):
    id: str
    name: str


class LeavePlayerModel(BaseModel):
    id: str


class ReplayModel(BaseModel):
    theme: str


class JoinResultModel(BaseModel):
    joined: bool
    player: Optional[PlayerSchema] = None


class ExistsModel(BaseModel):
    exists: bool


class GameListModel(BaseModel):
    """Minimal game entry for the lobby list.

    Each player entry maps "name" to the online flag, not to the player name.
    """

    id: str
    theme: str
    size: str
    players: List[Dict[str, bool]]


class ThemeModel(BaseModel):
    name: str
    cards: int
