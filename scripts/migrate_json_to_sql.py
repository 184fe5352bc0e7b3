"""One-off migration script: arquivo JSON -> banco SQL (TIMETRACKER_DATABASE_URL)."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

# Garantir que o pacote timetracker seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timetracker.core.config import get_settings  # noqa: E402
from timetracker.repositories.json_storage import COLLECTION_KEYS, db_defaults, load  # noqa: E402
from timetracker.repositories.sql_repository import SQLStorage  # noqa: E402


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise SystemExit(f"Arquivo nao encontrado: {path}")
    data = load(path)
    if not isinstance(data, dict):
        raise SystemExit(f"Formato invalido em {path}")
    return db_defaults(data)


def migrate(data_file: Path, storage: SQLStorage | None = None) -> dict[str, int]:
    """Copy every collection key; returns the number of records per key."""
    storage = storage or SQLStorage()
    db = _load_json(data_file)
    counts: dict[str, int] = {}
    for key in COLLECTION_KEYS:
        raw = str(db.get(key) or "[]")
        counts[key] = len(json.loads(raw))
        storage.set_item(key, raw)
    return counts


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Migrar arquivo JSON para o banco SQL")
    ap.add_argument("--data-file", default=str(settings.data_file), help="Arquivo JSON de origem")
    args = ap.parse_args()
    if not settings.database_url:
        raise SystemExit("TIMETRACKER_DATABASE_URL nao configurada")
    counts = migrate(Path(args.data_file))
    for key, count in counts.items():
        print(f"  {key}: {count}")
    print("JSON data migrated to SQL successfully.")


if __name__ == "__main__":
    main()
