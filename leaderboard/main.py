"""
Application FastAPI : point d'entrée
=====================================

Rôle
----
- Instancie l'app FastAPI, configure logs, CORS et journal des requêtes,
- Enregistre la traduction erreurs métier -> statuts HTTP,
- Monte les routeurs (players + health).

Notes
-----
- ⚠️ Le middleware CORS doit être ajouté AVANT les include_router.
- L'auth Basic est posée route par route (cf. routes/players.py).
- Lancement : `python -m leaderboard` ou `uvicorn leaderboard.main:app`.
"""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from leaderboard.config.log_config import configure_logging
from leaderboard.config.settings import settings
from leaderboard.routes.error_handlers import register_error_handlers
from leaderboard.routes.health import router as health_router
from leaderboard.routes.players import router as players_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("leaderboard.requests")

# --- App FastAPI principale ---
app = FastAPI(title=settings.APP_NAME)

# ===========================
# CORS
# ===========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


# ===========================
# Journal des requêtes
# ===========================
@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.perf_counter()
    response = await call_next(request)
    dt_ms = (time.perf_counter() - t0) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, dt_ms)
    return response


register_error_handlers(app)

# ===========================
# Montage des routers
# ===========================
app.include_router(players_router)
app.include_router(health_router)


# --- Racine utile pour "ping" simple (sans /health) ---
@app.get("/")
async def root():
    """Ping basique : permet de vérifier que l'app tourne."""
    return {"ok": True, "service": "tournament-leaderboard"}


# --- Hook de démarrage ---
@app.on_event("startup")
async def list_routes():
    """Au démarrage: affiche le backend de stockage et liste les routes (diagnostic)."""
    logger.info("== Store backend == %s", settings.STORE_BACKEND)
    for r in app.routes:
        methods = getattr(r, "methods", None)
        if methods:
            logger.info("route %s %s", r.path, sorted(methods))
