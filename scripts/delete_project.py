#!/usr/bin/env python3
"""
Remover um projeto e suas atividades.

Uso:
  python scripts/delete_project.py --id <projeto> [--cascade-entries] [--prune-orphans]

Sem --cascade-entries os lancamentos das atividades removidas continuam no
armazenamento (comportamento historico). --prune-orphans apaga em seguida
todos os lancamentos cuja atividade nao existe mais.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timetracker.repositories.storage import KeyValueStore  # noqa: E402
from timetracker.services.time_tracking_service import create_service  # noqa: E402


def main(argv: list[str] | None = None, storage: KeyValueStore | None = None) -> None:
    ap = argparse.ArgumentParser(description="Remover projeto")
    ap.add_argument("--id", required=True, help="ID do projeto a remover")
    ap.add_argument("--cascade-entries", action="store_true", help="Remove tambem os lancamentos das atividades")
    ap.add_argument("--prune-orphans", action="store_true", help="Apaga lancamentos sem atividade ao final")
    args = ap.parse_args(argv)

    # sem a flag vale TIMETRACKER_CASCADE_PROJECT_ENTRIES
    service = create_service(storage, cascade_project_time_entries=True if args.cascade_entries else None)
    project_id = (args.id or "").strip()
    project = service.get_project_by_id(project_id)
    if not project:
        raise SystemExit(f"Projeto '{project_id}' nao encontrado")

    activities = service.get_activities_by_project_id(project_id)
    service.delete_project(project_id)
    pruned = service.delete_orphaned_time_entries() if args.prune_orphans else 0

    print("OK: projeto removido")
    print(f"  Projeto: {project.name} ({project.id})")
    print(f"  Atividades removidas: {len(activities)}")
    if args.prune_orphans:
        print(f"  Lancamentos orfaos removidos: {pruned}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
