"""
Connexions WebSocket pour l'auto-complétion en direct
"""
from fastapi import WebSocket
from typing import Any, Dict, List, Optional
import time


class ConnectionManager:
    def __init__(self):
        self.active_connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.append(websocket)

    def disconnect(self, websocket: WebSocket):
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

    async def send_personal_message(self, message: Dict[str, Any], websocket: WebSocket):
        await websocket.send_json(message)


manager = ConnectionManager()


def create_suggestion_message(seq: int, query: str, suggestions: List[str]) -> Dict[str, Any]:
    """Crée une réponse de suggestions (le client ignore les seq périmés)"""
    return {
        "type": "suggestions",
        "seq": seq,
        "query": query,
        "suggestions": suggestions,
        "timestamp": time.time()
    }


def create_error_message(error: str, seq: Optional[int] = None) -> Dict[str, Any]:
    """Crée un message d'erreur"""
    return {
        "type": "error",
        "seq": seq,
        "error": error,
        "timestamp": time.time()
    }
