"""
Player store registry
=====================

Passerelle vers le stockage des joueurs. Le service tournoi ne connaît que le
protocole `PlayerStore` (async) ; deux implémentations sont fournies :

- `MemoryPlayerStore` : dict en mémoire (dev, tests).
- `JsonPlayerStore`   : même logique, persistée dans `DATA_DIR/players.json`
  via orjson. Les I/O tournent dans un thread (`asyncio.to_thread`) pour ne
  pas bloquer la boucle d'événements.

Les deux garantissent l'unicité du nom à l'insertion (sous verrou) et lèvent
`DuplicateNameError` ; le service la convertit en `ConflictError`.
Toute autre panne de stockage est remontée en `StoreError`.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from threading import RLock
from typing import Dict, List, Optional, Protocol
from uuid import uuid4

import orjson
import pydantic

from leaderboard.config.settings import Settings
from leaderboard.models.player import Player
from .errors import DuplicateNameError, StoreError
from .io_utils import read_json, write_json

logger = logging.getLogger(__name__)


class PlayerStore(Protocol):
    backend: str

    async def insert(self, name: str) -> str: ...

    async def exists_by_name(self, name: str) -> bool: ...

    async def find_by_id(self, player_id: str) -> Optional[Player]: ...

    async def update_score(self, player_id: str, score: int) -> bool: ...

    async def count_with_score_greater_than(self, score: int) -> int: ...

    async def find_all(self) -> List[Player]: ...

    async def delete_all(self) -> int: ...


class _PlayerTable:
    """Table id -> Player protégée par un RLock (opérations synchrones)."""

    def __init__(self) -> None:
        self.lock = RLock()
        self.players: Dict[str, Player] = {}

    def insert(self, name: str) -> str:
        with self.lock:
            if any(p.name == name for p in self.players.values()):
                raise DuplicateNameError(name)
            player_id = uuid4().hex
            self.players[player_id] = Player(id=player_id, name=name, score=0)
            return player_id

    def exists_by_name(self, name: str) -> bool:
        with self.lock:
            return any(p.name == name for p in self.players.values())

    def find_by_id(self, player_id: str) -> Optional[Player]:
        with self.lock:
            return self.players.get(player_id)

    def update_score(self, player_id: str, score: int) -> bool:
        with self.lock:
            current = self.players.get(player_id)
            if current is None:
                return False
            self.players[player_id] = current.model_copy(update={"score": score})
            return True

    def count_with_score_greater_than(self, score: int) -> int:
        with self.lock:
            return sum(1 for p in self.players.values() if p.score > score)

    def find_all(self) -> List[Player]:
        with self.lock:
            return list(self.players.values())

    def delete_all(self) -> int:
        with self.lock:
            deleted = len(self.players)
            self.players.clear()
            return deleted


class MemoryPlayerStore:
    """Store volatile : tout est perdu au redémarrage du process."""

    backend = "memory"

    def __init__(self) -> None:
        self._table = _PlayerTable()

    async def insert(self, name: str) -> str:
        return self._table.insert(name)

    async def exists_by_name(self, name: str) -> bool:
        return self._table.exists_by_name(name)

    async def find_by_id(self, player_id: str) -> Optional[Player]:
        return self._table.find_by_id(player_id)

    async def update_score(self, player_id: str, score: int) -> bool:
        return self._table.update_score(player_id, score)

    async def count_with_score_greater_than(self, score: int) -> int:
        return self._table.count_with_score_greater_than(score)

    async def find_all(self) -> List[Player]:
        return self._table.find_all()

    async def delete_all(self) -> int:
        return self._table.delete_all()


class JsonPlayerStore:
    """
    Store fichier. Format persisté :
    {
      "<player_id>": {"id": "<player_id>", "name": "...", "score": 0},
      ...
    }
    Chargé paresseusement au premier accès ; chaque mutation réécrit le fichier.
    """

    backend = "json"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._table = _PlayerTable()
        self._loaded = False

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _load(self) -> None:
        if self._loaded:
            return
        try:
            raw = read_json(self.path) or {}
            players = {pid: Player.model_validate(doc) for pid, doc in raw.items()}
        except (OSError, orjson.JSONDecodeError, pydantic.ValidationError, AttributeError) as exc:
            raise StoreError(cause=exc, path=str(self.path)) from exc
        self._table.players = players
        self._loaded = True
        logger.debug("Loaded %d players from %s", len(players), self.path)

    def _save(self) -> None:
        data = {pid: p.model_dump() for pid, p in self._table.players.items()}
        try:
            write_json(self.path, data)
        except (OSError, TypeError) as exc:
            raise StoreError(cause=exc, path=str(self.path)) from exc

    def _read(self, op, *args):
        with self._table.lock:
            self._load()
            return op(*args)

    def _write(self, op, *args):
        with self._table.lock:
            self._load()
            snapshot = dict(self._table.players)
            result = op(*args)
            try:
                self._save()
            except StoreError:
                # Rien n'est committé si l'écriture échoue.
                self._table.players = snapshot
                raise
            return result

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def insert(self, name: str) -> str:
        return await asyncio.to_thread(self._write, self._table.insert, name)

    async def exists_by_name(self, name: str) -> bool:
        return await asyncio.to_thread(self._read, self._table.exists_by_name, name)

    async def find_by_id(self, player_id: str) -> Optional[Player]:
        return await asyncio.to_thread(self._read, self._table.find_by_id, player_id)

    async def update_score(self, player_id: str, score: int) -> bool:
        return await asyncio.to_thread(self._write, self._table.update_score, player_id, score)

    async def count_with_score_greater_than(self, score: int) -> int:
        return await asyncio.to_thread(self._read, self._table.count_with_score_greater_than, score)

    async def find_all(self) -> List[Player]:
        return await asyncio.to_thread(self._read, self._table.find_all)

    async def delete_all(self) -> int:
        return await asyncio.to_thread(self._write, self._table.delete_all)


def build_store(config: Settings) -> PlayerStore:
    """Instancie le store choisi par `STORE_BACKEND`."""
    backend = (config.STORE_BACKEND or "").strip().lower()
    if backend == "memory":
        return MemoryPlayerStore()
    if backend == "json":
        return JsonPlayerStore(Path(config.DATA_DIR) / config.PLAYERS_FILENAME)
    raise ValueError(f"Unknown STORE_BACKEND: {config.STORE_BACKEND!r}")
