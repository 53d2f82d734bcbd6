from pydantic import BaseModel, Field
from typing import List


class CardSchema(BaseModel):
    value: int

    class Config:
        # flipped/paired state written by the move handlers is kept as is
        extra = "allow"


class PlayerSchema(BaseModel):
    id: str = ""
    name: str = ""
    joined: bool = False
    online: bool = False
    score: int = 0
    turns: int = 0
    inaccurate_turns: int = Field(default=0, alias="inaccurateTurns")

    class Config:
        extra = "allow"
        populate_by_name = True


class GameSchema(BaseModel):
    """Game record stored in Redis under "game:<id>"."""

    id: str = Field(min_length=1)
    cards: List[CardSchema]
    players: List[PlayerSchema]
    theme: str
    flips: int
    turn: int
    visibility: str

    class Config:
        # top-level fields written by the move handlers are kept as is
        extra = "allow"
        populate_by_name = True
