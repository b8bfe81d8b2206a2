"""
Route WebSocket : suggestions recalculées à chaque frappe
"""
import json
import logging
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from cheers.brand.suggestions import SuggestionFeed
from cheers.lookup import BrandChecker

from backend.deps import get_checker
from backend.streaming import manager, create_suggestion_message, create_error_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/suggest")
async def websocket_suggest_endpoint(websocket: WebSocket, checker: BrandChecker = Depends(get_checker)):
    """
    Le client envoie {"seq": n, "q": "..."} à chaque frappe ; on répond avec
    les suggestions du même seq. Un seq plus ancien que le dernier traité est
    ignoré : la dernière frappe l'emporte toujours.
    """
    await manager.connect(websocket)

    try:
        feed = SuggestionFeed(checker.local.index)
        while True:
            raw = await websocket.receive_text()
            try:
                data = json.loads(raw)
            except ValueError:
                await manager.send_personal_message(create_error_message("JSON invalide"), websocket)
                continue

            if not isinstance(data, dict):
                await manager.send_personal_message(create_error_message("Objet JSON attendu"), websocket)
                continue

            seq, query = data.get("seq"), data.get("q", "")
            # bool est une sous-classe d'int : true/false ne sont pas des seq
            valid_seq = isinstance(seq, int) and not isinstance(seq, bool)
            if not valid_seq or not isinstance(query, str):
                await manager.send_personal_message(
                    create_error_message("Champs 'seq' (int) et 'q' (str) requis", seq if valid_seq else None),
                    websocket,
                )
                continue

            suggestions = feed.update(seq, query)
            if suggestions is None:
                logger.debug(f"seq {seq} périmé (dernier: {feed.latest_seq}), ignoré")
                continue

            await manager.send_personal_message(create_suggestion_message(seq, query, suggestions), websocket)

    except WebSocketDisconnect:
        logger.debug("client /ws/suggest déconnecté")
    finally:
        manager.disconnect(websocket)
