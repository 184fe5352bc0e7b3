#!/usr/bin/env python3
"""
Resumo das horas lancadas, por dia e por atividade.

Uso:
  python scripts/overview.py [--this-week] [--ascending] [--descriptions] [--no-daily] [--no-activity]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timetracker.services.overview_service import Overview, build_overview  # noqa: E402
from timetracker.services.time_tracking_service import create_service  # noqa: E402


def render(overview: Overview, *, daily: bool = True, by_activity: bool = True, descriptions: bool = False) -> list[str]:
    labels = {summary.activity_id: summary.label for summary in overview.activities}
    lines = [f"Total: {overview.total_hours:g}h em {len(overview.entries)} lancamento(s)"]
    if daily:
        lines.append("")
        lines.append("Por dia:")
        for day in overview.days:
            lines.append(f"  {day.day.isoformat()}  {day.hours:g}h")
            for activity_id, hours in day.by_activity.items():
                lines.append(f"    - {labels.get(activity_id, activity_id)}: {hours:g}h")
    if by_activity:
        lines.append("")
        lines.append("Por atividade:")
        for summary in overview.activities:
            lines.append(f"  {summary.label}  {summary.hours:g}h")
            if descriptions:
                for entry in summary.entries:
                    if entry.description:
                        lines.append(f"    {entry.date.date().isoformat()}: {entry.description}")
    return lines


def main() -> None:
    ap = argparse.ArgumentParser(description="Resumo de horas")
    ap.add_argument("--this-week", action="store_true", help="Somente a semana atual")
    ap.add_argument("--ascending", action="store_true", help="Atividades com menos horas primeiro")
    ap.add_argument("--descriptions", action="store_true", help="Mostra as descricoes dos lancamentos")
    ap.add_argument("--no-daily", action="store_true", help="Oculta o resumo diario")
    ap.add_argument("--no-activity", action="store_true", help="Oculta o resumo por atividade")
    args = ap.parse_args()

    overview = build_overview(
        create_service(),
        this_week_only=args.this_week,
        sort_by_hours_descending=not args.ascending,
    )
    for line in render(
        overview,
        daily=not args.no_daily,
        by_activity=not args.no_activity,
        descriptions=args.descriptions,
    ):
        print(line)


if __name__ == "__main__":
    main()
