"""
Service: errors.py
Rôle:
- Taxonomie des erreurs métier du tournoi, indépendante du transport.

Notes:
- `kind` (ErrorKind) est la seule information que la frontière HTTP utilise
  pour choisir un statut (cf. routes/error_handlers.py).
- `message` est sûr à exposer au client ; `context` (id, nom...) sert aux logs.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STORE = "store"


class TournamentError(Exception):
    """Erreur métier de base."""

    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
        return f"{self.message} ({details})"


class ValidationError(TournamentError):
    """Entrée mal formée (nom vide, score négatif, id invalide)."""
    kind = ErrorKind.VALIDATION


class ConflictError(TournamentError):
    """Un joueur porte déjà ce nom."""
    kind = ErrorKind.CONFLICT


class NotFoundError(TournamentError):
    """Aucun joueur pour cet id."""
    kind = ErrorKind.NOT_FOUND


class StoreError(TournamentError):
    """Échec du stockage (I/O, sérialisation). Jamais réessayé par le service."""
    kind = ErrorKind.STORE

    def __init__(self, message: str = "Database error", *, cause: Optional[BaseException] = None, **context: Any) -> None:
        super().__init__(message, **context)
        self.cause = cause


class DuplicateNameError(StoreError):
    """Levée par un store qui garantit l'unicité du nom à l'insertion."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player '{name}' already exists.", name=name)
