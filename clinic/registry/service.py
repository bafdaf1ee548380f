import datetime as dt
import threading

from loguru import logger

from clinic.domain.exceptions import (
    DoctorNotFoundError,
    DoctorUnavailableError,
    PatientNotFoundError,
)
from clinic.domain.models import Appointment, Doctor, Patient, Slot, VisitCard
from clinic.registry.ports import AbstractRegistry
from clinic.registry.seed import default_doctors, default_patients, plan_default_appointments
from clinic.registry.slots import current_date, day_times, join_date_time, resolve_timezone

WORK_START_HOUR = 8
WORK_END_HOUR = 18
SLOT_MINUTES = 30


class Registry(AbstractRegistry):
    """In-memory registry owning doctors, patients, appointments and visit cards.

    Every booked appointment lives in three places: the global list, the
    doctor's list and the patient's list. Mutations keep the three in step
    under a single lock.
    """

    def __init__(
        self,
        doctors: list[Doctor] | None = None,
        patients: list[Patient] | None = None,
        *,
        work_start_hour: int = WORK_START_HOUR,
        work_end_hour: int = WORK_END_HOUR,
        slot_minutes: int = SLOT_MINUTES,
        clinic_timezone: str | None = None,
    ) -> None:
        self._doctors = default_doctors() if doctors is None else list(doctors)
        self._patients = default_patients() if patients is None else list(patients)
        _check_unique_names("doctor", self._doctors)
        _check_unique_names("patient", self._patients)
        self._appointments: list[Appointment] = []
        self._visit_cards: list[VisitCard] = []
        self._day_times = day_times(work_start_hour, work_end_hour, slot_minutes)
        self._tz = resolve_timezone(clinic_timezone) if clinic_timezone else None
        self._lock = threading.RLock()
        self._seeded = False

    def list_doctors(self) -> list[Doctor]:
        return list(self._doctors)

    def list_patients(self) -> list[Patient]:
        return list(self._patients)

    def list_appointments(self) -> list[Appointment]:
        return list(self._appointments)

    def list_visit_cards(self) -> list[VisitCard]:
        return list(self._visit_cards)

    def find_doctor_by_name(self, name: str) -> Doctor:
        for doctor in self._doctors:
            if doctor.name == name:
                return doctor
        raise DoctorNotFoundError(name)

    def find_patient_by_name(self, name: str) -> Patient:
        for patient in self._patients:
            if patient.name == name:
                return patient
        raise PatientNotFoundError(name)

    def patient_exists(self, name: str) -> bool:
        return any(patient.name == name for patient in self._patients)

    def add_patient(self, name: str, date_of_birth: str) -> Patient:
        with self._lock:
            if self.patient_exists(name):
                logger.info("Patient {} already exists", name)
                return self.find_patient_by_name(name).model_copy(deep=True)

            patient = Patient(name=name, date_of_birth=date_of_birth)
            self._patients.append(patient)

        logger.info("Patient {} added to the registry", name)
        return patient

    def available_times(self, date: str) -> list[Slot]:
        """Walk doctors in roster order and each working-day slot in time order."""
        slots: list[Slot] = []
        for doctor in self._doctors:
            for time in self._day_times:
                date_time = join_date_time(date, time)
                if doctor.is_available(date_time):
                    slots.append(Slot(date_time=date_time, doctor_name=doctor.name))
        return slots

    def available_times_for_doctor(self, date: str, doctor_name: str) -> list[Slot]:
        return [slot for slot in self.available_times(date) if slot.doctor_name == doctor_name]

    def available_doctors(self, date: str) -> list[str]:
        with_free_slots = {slot.doctor_name for slot in self.available_times(date)}
        return [doctor.name for doctor in self._doctors if doctor.name in with_free_slots]

    def schedule_appointment(self, date_time: str, doctor: Doctor, patient: Patient) -> Appointment:
        with self._lock:
            registered_doctor = self.find_doctor_by_name(doctor.name)
            registered_patient = self.find_patient_by_name(patient.name)

            if not registered_doctor.is_available(date_time):
                logger.warning(
                    "Dr. {} is not available at {}", registered_doctor.name, date_time
                )
                raise DoctorUnavailableError(registered_doctor.name, date_time)

            appointment = Appointment(
                date_time=date_time,
                doctor_name=registered_doctor.name,
                patient_name=registered_patient.name,
            )
            self._store(appointment, registered_doctor, registered_patient)

        logger.info(
            "Appointment scheduled for {} with Dr. {} for patient {}",
            date_time,
            appointment.doctor_name,
            appointment.patient_name,
        )
        return appointment

    def cancel_appointment(self, date_time: str, patient_name: str, doctor_name: str) -> int:
        with self._lock:
            kept = [
                a
                for a in self._appointments
                if not a.matches(date_time, patient_name, doctor_name)
            ]
            removed = len(self._appointments) - len(kept)
            self._appointments = kept

            for person in (self._doctor_or_none(doctor_name), self._patient_or_none(patient_name)):
                if person is not None:
                    person.remove_appointment(date_time, patient_name, doctor_name)

        if removed:
            logger.info("Appointment on {} cancelled for patient {}", date_time, patient_name)
        else:
            logger.info(
                "No appointment on {} for patient {} with Dr. {}; nothing cancelled",
                date_time,
                patient_name,
                doctor_name,
            )
        return removed

    def add_visit_card(
        self, doctor: Doctor, patient: Patient, date_time: str, diagnosis: str
    ) -> VisitCard:
        card = VisitCard(
            doctor_name=doctor.name,
            patient_name=patient.name,
            date_time=date_time,
            diagnosis=diagnosis,
        )
        with self._lock:
            self._visit_cards.append(card)

        logger.info("Visit card added for patient {} ({})", patient.name, date_time)
        return card

    def visit_cards_for_patient(self, patient: Patient) -> list[VisitCard]:
        return [card for card in self._visit_cards if card.patient_name == patient.name]

    def appointments_for_doctor(self, doctor_name: str) -> list[Appointment]:
        return list(self.find_doctor_by_name(doctor_name).appointments)

    def appointments_for_patient(self, patient_name: str) -> list[Appointment]:
        return list(self.find_patient_by_name(patient_name).appointments)

    def seed_default_appointments(self, today: dt.date | None = None) -> list[Appointment]:
        with self._lock:
            if self._seeded:
                logger.warning("Default appointments already generated; skipping")
                return []

            planned = plan_default_appointments(
                today or self.today(), self._doctors, self._patients
            )
            for appointment in planned:
                self._store(
                    appointment,
                    self.find_doctor_by_name(appointment.doctor_name),
                    self.find_patient_by_name(appointment.patient_name),
                )
            self._seeded = True

        logger.info("Generated {} default appointment(s)", len(planned))
        return planned

    def today(self) -> dt.date:
        """The current date in the clinic's timezone, or the host's local date."""
        return current_date(self._tz)

    def _store(self, appointment: Appointment, doctor: Doctor, patient: Patient) -> None:
        doctor.add_appointment(appointment)
        patient.add_appointment(appointment)
        self._appointments.append(appointment)

    def _doctor_or_none(self, name: str) -> Doctor | None:
        try:
            return self.find_doctor_by_name(name)
        except DoctorNotFoundError:
            return None

    def _patient_or_none(self, name: str) -> Patient | None:
        try:
            return self.find_patient_by_name(name)
        except PatientNotFoundError:
            return None


def _check_unique_names(kind: str, people: list[Doctor] | list[Patient]) -> None:
    seen: set[str] = set()
    for person in people:
        if person.name in seen:
            raise ValueError(f"Duplicate {kind} name: {person.name}")
        seen.add(person.name)
