"""
Gestion d'erreurs de l'API : logs enrichis + réponses JSON propres
"""
import time
import traceback
from functools import wraps
from typing import Callable
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from cheers.lookup import BrandLookupUnavailable

logger = logging.getLogger(__name__)


def enhanced_error_handler(func: Callable) -> Callable:
    """
    Journalise la durée de l'appel, et en cas d'échec le contexte de l'erreur,
    puis relance l'exception telle quelle.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
            logger.debug(f"✅ {func.__name__} réussi en {time.time() - start_time:.3f}s")
            return result

        except HTTPException:
            # erreurs "métier" déjà formatées pour le client
            raise

        except Exception as e:
            execution_time = time.time() - start_time
            error_info = {
                "function": func.__name__,
                "error_type": type(e).__name__,
                "error_message": str(e),
                "execution_time": execution_time,
                "kwargs": {k: str(v) if len(str(v)) < 100 else str(v)[:100] + "..." for k, v in kwargs.items()},
                "stack_trace": traceback.format_exc(),
            }
            logger.error(f"❌ {func.__name__} a échoué après {execution_time:.3f}s: {error_info}")
            raise

    return wrapper


async def lookup_unavailable_handler(request: Request, exc: BrandLookupUnavailable) -> JSONResponse:
    """Filet pour les routes qui appellent une stratégie sans passer par
    `BrandChecker.check` (aujourd'hui aucune : `check` retombe sur "unknown"
    et `suggest` reste local). Sert dès qu'un lookup distant sera branché.
    """
    logger.warning(f"🔌 Lookup indisponible sur {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Brand lookup unavailable", "error": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BrandLookupUnavailable, lookup_unavailable_handler)
