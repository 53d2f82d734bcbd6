import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from fastapi.requests import HTTPConnection

from pairsone.converter import DataConverter
from pairsone.domain.errors import GameError
from pairsone.manager import LOBBY_CHANNEL, ConnectionManager, game_channel
from pairsone.models.dc_models import (
    ClientDataModel,
    ExistsModel,
    GameListModel,
    JoinPlayerModel,
    JoinResultModel,
    LeavePlayerModel,
    ReplayModel,
    ThemeModel,
    VisibilityModel,
)
from pairsone.models.schema_models import GameSchema
from pairsone.services.game_engine import GameEngine

game_router = APIRouter()
data_converter = DataConverter()
connection_manager = ConnectionManager()


def get_game_engine(connection: HTTPConnection) -> GameEngine:
    return connection.app.state.game_engine


def get_connection_manager() -> ConnectionManager:
    return connection_manager


async def publish_game(game: GameSchema, manager: ConnectionManager):
    """Push the game to its own channel and, for public games, to the lobby."""
    await manager.broadcast(game.model_dump(mode="json", by_alias=True), game_channel(game.id))
    if game.visibility == VisibilityModel.public.value:
        summary = data_converter.convert_game_to_list_model(game)
        await manager.broadcast(summary.model_dump(), LOBBY_CHANNEL)


class GameAPI:
    @staticmethod
    @game_router.post("/games", response_model=GameSchema, status_code=status.HTTP_201_CREATED)
    async def create_game(
        client_data: ClientDataModel,
        engine: GameEngine = Depends(get_game_engine),
        manager: ConnectionManager = Depends(get_connection_manager),
    ) -> GameSchema:
        """Create a game and announce it in the lobby

        Args:
            client_data (ClientDataModel):
                    board_size: int or numeric string
                    players_number: int or numeric string
                    theme: str
                    visibility: "public" | "private"
        """
        game = await engine.create(
            client_data.board_size,
            client_data.players_number,
            client_data.theme,
            client_data.visibility,
        )
        await publish_game(game, manager)
        return game

    @staticmethod
    @game_router.get("/games/{game_id}", response_model=GameSchema)
    async def get_game(game_id: str, engine: GameEngine = Depends(get_game_engine)):
        return await engine.load(game_id)

    @staticmethod
    @game_router.get("/games/{game_id}/exists", response_model=ExistsModel)
    async def game_exists(game_id: str, engine: GameEngine = Depends(get_game_engine)):
        return ExistsModel(exists=await engine.exists(game_id))

    @staticmethod
    @game_router.get("/games/{game_id}/summary", response_model=GameListModel)
    async def get_game_summary(game_id: str, engine: GameEngine = Depends(get_game_engine)):
        game = await engine.load(game_id)
        return data_converter.convert_game_to_list_model(game)


class PlayerAPI:
    @staticmethod
    @game_router.post("/games/{game_id}/join", response_model=JoinResultModel)
    async def join_game(
        game_id: str,
        player: JoinPlayerModel,
        engine: GameEngine = Depends(get_game_engine),
        manager: ConnectionManager = Depends(get_connection_manager),
    ) -> JoinResultModel:
        """Join the player to the game, or rejoin the seat the player already holds

        A full game is not an error: the response says joined=false.
        """
        game = await engine.load(game_id)
        joined_player = await engine.join_player(game, player.id, player.name)
        if joined_player is None:
            return JoinResultModel(joined=False)

        await publish_game(game, manager)
        return JoinResultModel(joined=True, player=joined_player)

    @staticmethod
    @game_router.post("/games/{game_id}/leave", response_model=JoinResultModel)
    async def leave_game(
        game_id: str,
        player: LeavePlayerModel,
        engine: GameEngine = Depends(get_game_engine),
        manager: ConnectionManager = Depends(get_connection_manager),
    ) -> JoinResultModel:
        game = await engine.load(game_id)
        left_player = await engine.leave_player(game, player.id)
        if left_player is None:
            return JoinResultModel(joined=False)

        await publish_game(game, manager)
        return JoinResultModel(joined=left_player.joined, player=left_player)

    @staticmethod
    @game_router.post("/games/{game_id}/replay", response_model=GameSchema)
    async def replay_game(
        game_id: str,
        replay_data: ReplayModel,
        engine: GameEngine = Depends(get_game_engine),
        manager: ConnectionManager = Depends(get_connection_manager),
    ) -> GameSchema:
        game = await engine.load(game_id)
        game = await engine.replay(game, replay_data.theme)
        await publish_game(game, manager)
        return game


class ThemeAPI:
    @staticmethod
    @game_router.get("/themes", response_model=List[ThemeModel])
    async def list_themes(engine: GameEngine = Depends(get_game_engine)):
        return [
            ThemeModel(name=name, cards=engine.themes.cards_available(name))
            for name in engine.themes.names()
        ]


class StreamAPI:
    @staticmethod
    @game_router.websocket("/games/lobby/stream")
    async def stream_lobby(
        websocket: WebSocket,
        manager: ConnectionManager = Depends(get_connection_manager),
    ):
        await manager.connect(websocket, LOBBY_CHANNEL)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            manager.disconnect(websocket, LOBBY_CHANNEL)

    @staticmethod
    @game_router.websocket("/games/{game_id}/stream")
    async def stream_game(
        websocket: WebSocket,
        game_id: str,
        player_id: Optional[str] = None,
        engine: GameEngine = Depends(get_game_engine),
        manager: ConnectionManager = Depends(get_connection_manager),
    ):
        """Stream updates of one game; the player goes offline when the socket closes."""
        channel = game_channel(game_id)
        await manager.connect(websocket, channel)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            manager.disconnect(websocket, channel)
            if player_id is None:
                return
            try:
                game = await engine.load(game_id)
                if await engine.leave_player(game, player_id) is not None:
                    await publish_game(game, manager)
            except GameError as e:
                logging.error(f"Could not mark player {player_id} offline in game {game_id}: {e.message}")
