"""Rich renderables for registry data. Every list carries a 1-based ``#`` column
matching the numbers users type to pick an entry."""

from collections.abc import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from clinic.domain.models import Appointment, Person, Slot, VisitCard


def _table(title: str | None = None) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", no_wrap=True, justify="right")
    return table


def people_table(title: str, people: Sequence[Person]) -> Table:
    table = _table(title)
    table.add_column("Name", style="white")
    table.add_column("Date of birth", style="dim")
    for index, person in enumerate(people, start=1):
        table.add_row(str(index), person.name, person.date_of_birth or "")
    return table


def appointments_table(title: str, appointments: Sequence[Appointment]) -> Table:
    table = _table(title)
    table.add_column("Date & Time", no_wrap=True)
    table.add_column("Doctor")
    table.add_column("Patient")
    for index, appointment in enumerate(appointments, start=1):
        table.add_row(
            str(index), appointment.date_time, appointment.doctor_name, appointment.patient_name
        )
    return table


def slots_table(slots: Sequence[Slot]) -> Table:
    table = _table()
    table.add_column("Time", no_wrap=True)
    for index, slot in enumerate(slots, start=1):
        table.add_row(str(index), slot.time)
    return table


def doctor_schedule_table(doctor_name: str, appointments: Sequence[Appointment]) -> Table:
    table = Table(
        title=f"Schedule for Dr. {doctor_name}", show_header=True, header_style="bold magenta"
    )
    table.add_column("Date & Time", no_wrap=True)
    table.add_column("Patient")
    for appointment in appointments:
        table.add_row(appointment.date_time, appointment.patient_name)
    return table


def visit_card_panel(card: VisitCard) -> Panel:
    body = (
        f"[bold]Patient Name:[/bold] {escape(card.patient_name)}\n"
        f"[bold]Doctor Name:[/bold] {escape(card.doctor_name)}\n"
        f"[bold]Date & Time:[/bold] {escape(card.date_time)}\n"
        f"[bold]Diagnosis:[/bold] {escape(card.diagnosis)}"
    )
    return Panel(body, title="Hospital Visit Card", expand=False)


def options_table(title: str, options: Sequence[str]) -> Table:
    table = _table(title)
    table.add_column("Option")
    for index, option in enumerate(options, start=1):
        table.add_row(str(index), option)
    return table
