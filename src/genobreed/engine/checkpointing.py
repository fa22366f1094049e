"""Population checkpoints using SQLite + compressed blob."""
from __future__ import annotations
import sqlite3
import zlib
import json
from pathlib import Path
from typing import Any, Dict

from genobreed.population import Population


def save_checkpoint(path: Path, state: Dict[str, Any]):
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    try:
        conn.execute("CREATE TABLE IF NOT EXISTS checkpoints(id INTEGER PRIMARY KEY, payload BLOB)")
        payload = zlib.compress(json.dumps(state).encode("utf-8"))
        conn.execute("INSERT INTO checkpoints(payload) VALUES (?)", (payload,))
        conn.commit()
    finally:
        conn.close()


def load_checkpoint(path: Path) -> Dict[str, Any]:
    if not Path(path).exists():
        raise FileNotFoundError(f"No checkpoint at {path}")
    conn = sqlite3.connect(path)
    try:
        cur = conn.execute("SELECT payload FROM checkpoints ORDER BY id DESC LIMIT 1")
        row = cur.fetchone()
    finally:
        conn.close()
    if not row:
        raise FileNotFoundError("No checkpoint entries")
    return json.loads(zlib.decompress(row[0]).decode("utf-8"))


def save_population(path: Path, population: Population, *, generation: int, seed: int):
    save_checkpoint(path, {"generation": generation, "seed": seed, "population": population.to_dict()})


def load_population(path: Path) -> tuple[Population, int, int]:
    """Return ``(population, generation, seed)`` from the latest checkpoint."""
    state = load_checkpoint(path)
    return Population.from_dict(state["population"]), int(state["generation"]), int(state["seed"])
