# backend/app.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cheers.config import settings
from backend.error_handler import register_error_handlers
from backend.routes import brands, messages
from backend import websocket_routes
from backend.streaming import manager

logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger(__name__)

app = FastAPI(title="Cheers or Tears API")

# CORS pour le front en dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(brands.router)
app.include_router(messages.router)
app.include_router(websocket_routes.router)

register_error_handlers(app)

log.info(f"🍺 Lookup de marques en mode '{settings.BRAND_LOOKUP_MODE}'")


@app.get("/health")
def health():
    return {"ok": True, "ws_clients": len(manager.active_connections)}
