"""
Configuration du service (Settings)
===================================

Rôle
----
- Centraliser les paramètres du service (nom, host/port, identifiants API,
  backend de stockage, logs, CORS).
- Les valeurs par défaut conviennent pour un environnement de dev local.
- Les variables peuvent être surchargées via un fichier `.env` ou l'environnement.

Intégrations
------------
- `pydantic-settings` charge automatiquement les variables d'env et `.env`.
- Les modules importent `from leaderboard.config.settings import settings`.

Bonnes pratiques
----------------
- *Ne commitez pas* de vrais `API_LOGIN` / `API_PASSWORD`. Utilisez `.env`.
- `STORE_BACKEND="memory"` perd tout au redémarrage ; `"json"` persiste
  dans `DATA_DIR/PLAYERS_FILENAME`.

Exemple de `.env`
-----------------
APP_NAME="Tournament Leaderboard (Staging)"
PORT=8095
API_LOGIN="admin"
API_PASSWORD="mettre-une-valeur-secrète-en-prod"
STORE_BACKEND="json"
DATA_DIR="/var/opt/leaderboard/data"
LOG_LEVEL="DEBUG"
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
import os


class Settings(BaseSettings):
    # Nom du service (apparaît dans /health)
    APP_NAME: str = "Tournament Leaderboard"
    # Bind réseau (Uvicorn)
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Identifiants Basic auth exigés sur toutes les routes /players
    # ⚠️ Remplacez en production via .env
    API_LOGIN: str = "pktouradminlogin"
    API_PASSWORD: str = "pktouradminpwd"

    # Stockage des joueurs : "memory" ou "json"
    STORE_BACKEND: str = "memory"
    # Répertoire du backend json. Par défaut: <repo>/leaderboard/data
    DATA_DIR: str = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
    PLAYERS_FILENAME: str = "players.json"

    LOG_LEVEL: str = "INFO"

    # En dev on autorise tout, en prod pense à restreindre.
    CORS_ORIGINS: List[str] = ["*"]

    # - lit le fichier .env (UTF-8) si présent
    # - ignore les clés supplémentaires pour éviter les erreurs
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Instance unique importable partout : `settings`
settings = Settings()
