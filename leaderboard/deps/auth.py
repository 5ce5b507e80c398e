"""
Dépendance d'authentification API
=================================

Objectif
--------
Fournir une *dependency* FastAPI `api_auth_required` qui exige un header
`Authorization: Basic <login:password>` sur toutes les routes `/players`.

Intégrations
------------
- `settings.API_LOGIN` / `settings.API_PASSWORD` : identifiants attendus.

Pourquoi ne pas protéger le router entier dans main.py ?
--------------------------------------------------------
Le navigateur envoie une requête **OPTIONS** (préflight CORS) sans header
`Authorization`. Le middleware CORS y répond avant toute route ; on ne
protège donc que les méthodes réelles.

Comportement & codes retour
---------------------------
- 401 + `WWW-Authenticate: Basic` si identifiants absents ou invalides.
- Le login est retourné sinon.

Notes
-----
- `HTTPBasic(auto_error=False)` pour rendre notre propre 401 au format
  `{"message": ...}`.
- Comparaison en temps constant (`secrets.compare_digest`).
- Ordre de résolution FastAPI : un corps JSON indécodable est rejeté (400)
  avant l'exécution des dépendances, donc avant ce contrôle. Un JSON valide
  aux champs invalides passe d'abord par l'auth (401 sans identifiants).
"""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from leaderboard.config.settings import settings

basic = HTTPBasic(auto_error=False, realm="Access to the '/' path")


def _matches(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def api_auth_required(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic),
) -> str:
    """Dépendance d'accès API (Basic auth)."""
    if credentials is not None:
        login_ok = _matches(credentials.username, settings.API_LOGIN)
        password_ok = _matches(credentials.password, settings.API_PASSWORD)
        if login_ok and password_ok:
            return credentials.username

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required",
        headers={"WWW-Authenticate": 'Basic realm="Access to the \'/\' path"'},
    )
