import datetime as dt
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

from clinic.domain.exceptions import SelectionOutOfRangeError
from clinic.domain.models import Appointment, Doctor, Patient, Slot, VisitCard

T = TypeVar("T")


class AbstractRegistry(ABC):
    """Abstract base class for the clinic's appointment registry."""

    @abstractmethod
    def list_doctors(self) -> list[Doctor]:
        """Return the doctor roster in registry order."""

    @abstractmethod
    def list_patients(self) -> list[Patient]:
        """Return registered patients in registration order."""

    @abstractmethod
    def list_appointments(self) -> list[Appointment]:
        """Return all booked appointments in booking order."""

    @abstractmethod
    def list_visit_cards(self) -> list[VisitCard]:
        """Return all visit cards in insertion order."""

    @abstractmethod
    def find_doctor_by_name(self, name: str) -> Doctor:
        """Look up a doctor by exact name.

        Raises:
            DoctorNotFoundError: If no doctor has that name.
        """

    @abstractmethod
    def find_patient_by_name(self, name: str) -> Patient:
        """Look up a patient by exact name.

        Raises:
            PatientNotFoundError: If no patient has that name.
        """

    @abstractmethod
    def patient_exists(self, name: str) -> bool:
        """Check whether a patient with this exact name is registered."""

    @abstractmethod
    def add_patient(self, name: str, date_of_birth: str) -> Patient:
        """Register a patient, idempotent on name.

        Args:
            name: The patient's full name, used as the lookup key.
            date_of_birth: Date of birth as entered (``DD.MM.YYYY``).

        Returns:
            The new patient, or a copy of the already registered one if the
            name is taken. An existing patient's date of birth is never
            overwritten.
        """

    @abstractmethod
    def available_times(self, date: str) -> list[Slot]:
        """List free slots for every doctor on ``date`` (``YYYY-MM-DD``).

        Returns:
            Slots ordered doctor-major (roster order), then by time ascending.
        """

    @abstractmethod
    def available_times_for_doctor(self, date: str, doctor_name: str) -> list[Slot]:
        """List free slots for one doctor on ``date``, time ascending."""

    @abstractmethod
    def available_doctors(self, date: str) -> list[str]:
        """Names of doctors with at least one free slot on ``date``, in roster order."""

    @abstractmethod
    def schedule_appointment(self, date_time: str, doctor: Doctor, patient: Patient) -> Appointment:
        """Book ``doctor`` for ``patient`` at ``date_time`` (``YYYY-MM-DD HH:MM``).

        Both people are re-resolved by name against the registry's own
        records before anything is stored.

        Returns:
            The booked appointment.

        Raises:
            DoctorUnavailableError: If the doctor already has an appointment at ``date_time``.
            DoctorNotFoundError: If the doctor is not on the roster.
            PatientNotFoundError: If the patient is not registered.
        """

    @abstractmethod
    def cancel_appointment(self, date_time: str, patient_name: str, doctor_name: str) -> int:
        """Remove every appointment matching the exact triple.

        Returns:
            How many appointments were removed from the global list. Zero when
            nothing matched; a miss is not an error.
        """

    @abstractmethod
    def add_visit_card(
        self, doctor: Doctor, patient: Patient, date_time: str, diagnosis: str
    ) -> VisitCard:
        """Record a diagnosis for a visit. The appointment is not checked for existence."""

    @abstractmethod
    def visit_cards_for_patient(self, patient: Patient) -> list[VisitCard]:
        """Return the visit cards whose patient name equals ``patient.name``, in insertion order."""

    @abstractmethod
    def appointments_for_doctor(self, doctor_name: str) -> list[Appointment]:
        """Return the doctor's own appointment list (their schedule)."""

    @abstractmethod
    def appointments_for_patient(self, patient_name: str) -> list[Appointment]:
        """Return the patient's own appointment list."""

    @abstractmethod
    def seed_default_appointments(self, today: dt.date | None = None) -> list[Appointment]:
        """Fill today and tomorrow with the deterministic demo schedule.

        Bypasses the availability check. Meant to run once, before any user
        interaction.

        Args:
            today: The date treated as "today"; defaults to the clinic's current date.

        Returns:
            The appointments that were added.
        """

    @staticmethod
    def get_by_index(index: int, items: Sequence[T]) -> T:
        """Zero-based accessor for pick-by-number flows.

        Raises:
            SelectionOutOfRangeError: If ``index`` is outside ``items``.
        """
        if 0 <= index < len(items):
            return items[index]
        raise SelectionOutOfRangeError(index, len(items))
