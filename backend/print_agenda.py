"""Print the agenda for one period to stdout.

Usage:
    python -m backend.print_agenda --granularity month --date 2026-01-07
"""
import argparse
import asyncio
import sys
from datetime import date

from backend.agenda.periods import Granularity
from backend.agenda.view_controller import AgendaViewController, LoadState
from backend.database import SessionLocal
from backend.repositories.clinic_repository import make_appointment_fetcher


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the clinic agenda for one period.")
    parser.add_argument(
        "--granularity",
        choices=[granularity.value for granularity in Granularity],
        default=Granularity.WEEK.value,
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Reference date (YYYY-MM-DD). Defaults to today.",
    )
    return parser.parse_args(argv)


def render_agenda(controller: AgendaViewController) -> str:
    lines = [controller.period_label, ""]
    for column in controller.columns:
        lines.append(f"{column.label} ({column.count})")
        for appointment in column.appointments:
            lines.append(
                f"  {appointment.scheduled_at:%Y-%m-%d %H:%M}  {appointment.patient_name}"
                f"  {appointment.consultation_type}  [{appointment.status}]"
            )
    lines.append("")
    lines.append(
        "  ".join(f"{status}: {count}" for status, count in controller.status_counts.items())
    )
    return "\n".join(lines)


async def load_agenda(granularity: Granularity, reference: date | None) -> AgendaViewController:
    db = SessionLocal()
    try:
        controller = AgendaViewController(
            make_appointment_fetcher(db),
            granularity=granularity,
            reference=reference,
        )
        await controller.refresh()
        return controller
    finally:
        db.close()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    controller = asyncio.run(load_agenda(Granularity(args.granularity), args.date))
    if controller.load_state is LoadState.ERROR:
        print("Could not load appointments:", controller.last_error, file=sys.stderr)
        sys.exit(1)
    print(render_agenda(controller))


if __name__ == "__main__":
    main()
