#!/usr/bin/env python3
"""
Lancamento rapido de horas em uma atividade.

Uso:
  python scripts/add_entry.py --activity <id> --hours 1.5 --date 2025-05-03 [--project <id>] [--description "..."]
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

# Garante que o pacote timetracker seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timetracker.domain.entities import TimeEntry, new_id  # noqa: E402
from timetracker.services.time_tracking_service import TimeTrackingService, create_service  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Lancar horas em uma atividade")
    ap.add_argument("--activity", required=True, help="ID da atividade")
    ap.add_argument("--hours", required=True, type=float, help="Horas trabalhadas (ex.: 1.5)")
    ap.add_argument("--date", required=True, help="Data no formato YYYY-MM-DD")
    ap.add_argument("--project", help="ID do projeto; confere se a atividade pertence a ele")
    ap.add_argument("--description", help="Descricao opcional")
    return ap.parse_args(argv)


def add_entry(service: TimeTrackingService, args: argparse.Namespace) -> TimeEntry:
    activity_id = (args.activity or "").strip()
    if not activity_id:
        raise SystemExit("Atividade obrigatoria")
    activity = service.get_activity_by_id(activity_id)
    if not activity:
        raise SystemExit(f"Atividade '{activity_id}' nao encontrada")
    project_id = (args.project or "").strip()
    if project_id and activity.project_id != project_id:
        raise SystemExit(f"Atividade '{activity_id}' nao pertence ao projeto '{project_id}'")

    try:
        day = date.fromisoformat((args.date or "").strip())
    except ValueError:
        raise SystemExit("Data invalida (use YYYY-MM-DD)")

    try:
        entry = TimeEntry(
            id=new_id(),
            hours=args.hours,
            date=day,
            activity_id=activity.id,
            description=(args.description or "").strip() or None,
        )
    except ValueError as exc:
        raise SystemExit(str(exc))

    service.save_time_entry(entry)
    return entry


def main(argv: list[str] | None = None, service: TimeTrackingService | None = None) -> None:
    args = parse_args(argv)
    entry = add_entry(service or create_service(), args)
    print("OK: horas lancadas")
    print(f"  ID: {entry.id}")
    print(f"  Atividade: {entry.activity_id}")
    print(f"  Horas: {entry.hours:g}")
    print(f"  Data: {entry.date.date().isoformat()}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
