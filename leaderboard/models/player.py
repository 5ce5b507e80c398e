"""
Models / player.py
Rôle:
- Définir les structures joueur échangées entre le service et l'API (Pydantic).

Champs:
- Player: joueur persisté (id attribué par le store, name unique, score >= 0).
- RankedPlayer: joueur + rang calculé (jamais stocké).
- PlayerCreateRequest / PlayerUpdateRequest: corps des requêtes entrantes.
- PlayerCreateResponse / ErrorResponse: réponses sortantes.

Notes:
- Un id valide = 32 caractères hexadécimaux minuscules (`uuid4().hex`).
- Les validateurs rejettent nom vide, score négatif, non entier ou trop
  grand (> MAX_SCORE) et id mal formé ;
  la frontière HTTP les convertit en 400.
"""
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

PLAYER_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")
# Score maximal : entier signé 32 bits.
MAX_SCORE = 2**31 - 1


def is_valid_player_id(value: str) -> bool:
    return bool(PLAYER_ID_PATTERN.match(value or ""))


class Player(BaseModel):
    """Joueur tel que stocké."""
    model_config = ConfigDict(frozen=True)

    id: str  # identifiant opaque attribué par le store
    name: str  # nom unique, immuable
    score: int = Field(default=0, ge=0, le=MAX_SCORE)  # mutable uniquement via update_score


class RankedPlayer(BaseModel):
    """Joueur enrichi de son rang (dérivé, non persisté)."""
    id: str
    name: str
    score: int
    rank: int = Field(..., ge=1)


class PlayerCreateRequest(BaseModel):
    name: str = Field(..., description="Nom du joueur (unique)")

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Player name must not be empty.")
        return value


class PlayerCreateResponse(BaseModel):
    id: str


class PlayerUpdateRequest(BaseModel):
    id: str = Field(..., description="player_id retourné à la création")
    # strict : refuse true/"3"/3.0 ; le : refuse les scores hors bornes
    score: int = Field(..., strict=True, le=MAX_SCORE, description="Nouveau score (0..MAX_SCORE)")

    @field_validator("id")
    @classmethod
    def _id_format(cls, value: str) -> str:
        if not is_valid_player_id(value):
            raise ValueError(f"Invalid format for 'id': {value!r}")
        return value

    @field_validator("score")
    @classmethod
    def _score_positive(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Player score must be a positive integer")
        return value


class ErrorResponse(BaseModel):
    """Corps d'erreur renvoyé au client (message lisible, sans détail interne)."""
    message: str
