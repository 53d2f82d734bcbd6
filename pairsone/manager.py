from fastapi import WebSocket, WebSocketDisconnect
from typing import Dict, List
import logging

LOBBY_CHANNEL = "lobby"


def game_channel(game_id: str) -> str:
    return f"game:{game_id}"


class ConnectionManager:
    def __init__(self):
        self.active_connections: Dict[str, List[WebSocket]] = {}

    async def connect(self, websocket: WebSocket, channel: str):
        """Connects a websocket to a channel

        Args:
            websocket (WebSocket): Client socket
            channel (str): "lobby" or "game:<id>"
        """
        await websocket.accept()
        if channel not in self.active_connections:
            self.active_connections[channel] = []
        self.active_connections[channel].append(websocket)

    def disconnect(self, websocket: WebSocket, channel: str):
        if channel in self.active_connections and websocket in self.active_connections[channel]:
            self.active_connections[channel].remove(websocket)
            # Clean up if there are no more connections for this channel
            if not self.active_connections[channel]:
                del self.active_connections[channel]

    async def broadcast(self, message: dict, channel: str):
        """Send the message to every socket of the channel

        A socket that fails to receive it is dropped from the channel; the
        other subscribers still get the message.
        """
        logging.info(f"Broadcasting message to channel: {channel}")
        for connection in list(self.active_connections.get(channel, [])):
            try:
                await connection.send_json(message)
            except (WebSocketDisconnect, RuntimeError, OSError) as e:
                logging.warning(f"Dropping socket from channel {channel}: {e!r}")
                self.disconnect(connection, channel)
