"""
Utilitaires IO JSON (rapides) basés sur orjson, pour le store fichier.
- read_json(Path)  → Any | None (None si fichier manquant ou vide)
- write_json(Path, data) → écriture atomique (fichier temporaire + replace)

Attention:
- orjson renvoie/attend des bytes; on lit/écrit en mode binaire.
- Les erreurs (OSError, orjson.JSONDecodeError) remontent telles quelles ;
  c'est l'appelant qui les traduit en StoreError.
"""
import os
from pathlib import Path
from typing import Any

import orjson as json


def read_json(path: Path) -> Any:
    """Lit un fichier JSON (ou None s'il n'existe pas / est vide)."""
    if not path.exists():
        return None
    with path.open("rb") as f:
        raw = f.read()
    if not raw.strip():
        return None
    return json.loads(raw)


def write_json(path: Path, data: Any) -> None:
    """Écrit le JSON dans un fichier voisin puis le substitue à la cible."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    with tmp.open("wb") as f:
        f.write(json.dumps(data, option=json.OPT_INDENT_2))
    os.replace(tmp, path)
