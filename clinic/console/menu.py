import datetime as dt
from collections.abc import Callable, Sequence
from typing import TextIO, TypeVar

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from clinic.console.validation import parse_choice, parse_date
from clinic.console.views import (
    appointments_table,
    doctor_schedule_table,
    options_table,
    people_table,
    slots_table,
    visit_card_panel,
)
from clinic.domain.exceptions import (
    DoctorUnavailableError,
    InvalidDateError,
    RegistryError,
    SelectionOutOfRangeError,
)
from clinic.domain.models import Doctor, Patient
from clinic.registry.ports import AbstractRegistry
from clinic.registry.slots import current_date

T = TypeVar("T")

MAIN_OPTIONS = ("Role: Patient", "Role: Registrator", "Exit")
PATIENT_OPTIONS = (
    "Schedule appointment",
    "Cancel appointment",
    "Check existing appointments",
    "Exit",
)
REGISTRATOR_OPTIONS = (
    "Schedule appointment",
    "Cancel appointment",
    "Add visit card for appointment",
    "Get visit cards for a patient",
    "Check doctor's schedule",
    "Exit",
)

INVALID_CHOICE = "Invalid choice. Please try again."


class Menu:
    """Text menus that drive the registry for patients and registrators.

    Input is read line by line from ``stream`` (stdin when ``None``); an
    exhausted stream raises ``EOFError`` so scripted sessions terminate.
    """

    def __init__(
        self,
        registry: AbstractRegistry,
        console: Console | None = None,
        stream: TextIO | None = None,
        clock: Callable[[], dt.date] = current_date,
    ) -> None:
        self._registry = registry
        self._console = console or Console()
        self._stream = stream
        self._clock = clock

    def start(self) -> None:
        while True:
            self._header("Appointment Scheduling System")
            choice = self._ask_option("Please, select your role", MAIN_OPTIONS)
            if choice == 1:
                self.patient_route()
            elif choice == 2:
                self.registrator_route()
            elif choice == 3:
                return
            else:
                self._say(INVALID_CHOICE)

    def patient_route(self) -> None:
        patient = self.register_patient()
        while True:
            choice = self._ask_option("Patient menu", PATIENT_OPTIONS)
            if choice == 1:
                self.schedule_appointment_menu(patient)
            elif choice == 2:
                self.cancel_appointment_menu(patient)
            elif choice == 3:
                self.show_patient_appointments(patient)
            elif choice == 4:
                self._say("Returning to main menu...")
                return
            else:
                self._say(INVALID_CHOICE)

    def registrator_route(self) -> None:
        while True:
            choice = self._ask_option("Registrator menu", REGISTRATOR_OPTIONS)
            if choice == 1:
                patient = self.choose_patient()
                if patient is not None:
                    self.schedule_appointment_menu(patient)
            elif choice == 2:
                self.cancel_appointment_menu()
            elif choice == 3:
                self.add_visit_card_menu()
            elif choice == 4:
                self.visit_cards_menu()
            elif choice == 5:
                self.doctor_schedule_menu()
            elif choice == 6:
                self._say("Returning to main menu...")
                return
            else:
                self._say(INVALID_CHOICE)

    def register_patient(self) -> Patient:
        self._header("Registration form")
        name = self._ask("Enter your name:")
        surname = self._ask("Enter your surname:")
        date_of_birth = self._ask("Enter your date of birth (DD.MM.YYYY):")

        full_name = f"{name} {surname}"
        if self._registry.patient_exists(full_name):
            self._say(f"Patient {full_name} already exists.")
        else:
            self._say(f"Patient {full_name} added to the registry.")
        return self._registry.add_patient(full_name, date_of_birth)

    def schedule_appointment_menu(self, patient: Patient) -> None:
        doctor = self.select_doctor()
        date = self.ask_date()

        slots = self._registry.available_times_for_doctor(date, doctor.name)
        if not slots:
            self._say(f"Dr. {doctor.name} has no free time on {date}.")
            return

        self._header(f"Available Times for Dr. {doctor.name} on {date}")
        self._console.print(slots_table(slots))
        slot = self._pick(slots)
        if slot is None:
            return

        try:
            appointment = self._registry.schedule_appointment(slot.date_time, doctor, patient)
        except DoctorUnavailableError as exc:
            self._say(str(exc))
            return

        self._say(
            f"Appointment scheduled for {appointment.date_time} with Dr. "
            f"{appointment.doctor_name} for patient {appointment.patient_name}"
        )

    def cancel_appointment_menu(self, patient: Patient | None = None) -> None:
        if patient is None:
            appointments = self._registry.list_appointments()
        else:
            appointments = self._registry.appointments_for_patient(patient.name)

        if not appointments:
            self._say("No appointments to show.")
            return

        self._console.print(appointments_table("Appointments", appointments))
        appointment = self._pick(appointments)
        if appointment is None:
            return

        self._registry.cancel_appointment(
            appointment.date_time, appointment.patient_name, appointment.doctor_name
        )
        self._say(
            f"Appointment on {appointment.date_time} canceled for patient "
            f"{appointment.patient_name}"
        )

    def show_patient_appointments(self, patient: Patient) -> None:
        appointments = self._registry.appointments_for_patient(patient.name)
        if not appointments:
            self._say("No appointments to show.")
            return
        self._console.print(appointments_table("Appointments", appointments))

    def add_visit_card_menu(self) -> None:
        appointments = self._registry.list_appointments()
        if not appointments:
            self._say("No appointments to show.")
            return

        self._console.print(appointments_table("Appointments", appointments))
        appointment = self._pick(appointments)
        if appointment is None:
            return

        diagnosis = self._ask("Enter diagnosis:")
        try:
            doctor = self._registry.find_doctor_by_name(appointment.doctor_name)
            patient = self._registry.find_patient_by_name(appointment.patient_name)
        except RegistryError as exc:
            logger.error("Appointment refers to an unknown person: {}", exc)
            self._say(str(exc))
            return

        self._registry.add_visit_card(doctor, patient, appointment.date_time, diagnosis)
        self._say(f"Hospital visit card is added for patient {patient.name}")

    def visit_cards_menu(self) -> None:
        patient = self.choose_patient()
        if patient is None:
            return

        cards = self._registry.visit_cards_for_patient(patient)
        self._header(f"Hospital Visit Cards for {patient.name}:")
        if not cards:
            self._say("No visit cards found for this patient.")
            return
        for card in cards:
            self._console.print(visit_card_panel(card))

    def doctor_schedule_menu(self) -> None:
        doctor = self.select_doctor()
        self._console.print(
            doctor_schedule_table(doctor.name, self._registry.appointments_for_doctor(doctor.name))
        )

    def choose_patient(self) -> Patient | None:
        patients = self._registry.list_patients()
        self._console.print(people_table("List of registered patients", patients))
        return self._pick(patients)

    def select_doctor(self) -> Doctor:
        """Keep asking until a listed doctor is picked."""
        doctors = self._registry.list_doctors()
        while True:
            self._console.print(people_table("List of Doctors", doctors))
            doctor = self._pick(doctors)
            if doctor is not None:
                return doctor

    def ask_date(self) -> str:
        """Keep asking until the date is well-formed and not in the past."""
        while True:
            text = self._ask("Enter date (YYYY-MM-DD):")
            try:
                return parse_date(text, self._clock())
            except InvalidDateError as exc:
                self._say(str(exc))

    def _pick(self, items: Sequence[T]) -> T | None:
        choice = parse_choice(self._ask("Enter your choice:"))
        if choice is None:
            self._say(INVALID_CHOICE)
            return None
        try:
            return self._registry.get_by_index(choice - 1, items)
        except SelectionOutOfRangeError:
            self._say(INVALID_CHOICE)
            return None

    def _ask_option(self, title: str, options: Sequence[str]) -> int | None:
        self._console.print(options_table(title, options))
        return parse_choice(self._ask("Enter your choice:"))

    def _ask(self, prompt: str) -> str:
        raw = self._console.input(f"[bold yellow]{prompt}[/bold yellow] ", stream=self._stream)
        if self._stream is not None and raw == "":
            raise EOFError("input stream exhausted")
        return raw.strip()

    def _header(self, title: str) -> None:
        self._console.print(Rule(escape(title)))

    def _say(self, message: str) -> None:
        self._console.print(escape(message))
