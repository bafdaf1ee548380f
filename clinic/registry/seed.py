"""Demo roster and the deterministic default schedule built on top of it."""

import datetime as dt

from clinic.domain.models import Appointment, Doctor, Patient
from clinic.registry.slots import format_date, join_date_time, next_day

DEFAULT_DOCTOR_NAMES: tuple[str, ...] = (
    "John Smith",
    "Emily Johnson",
    "David Brown",
    "Sarah Lee",
    "Michael Wilson",
    "Alexandra Garcia",
    "Matthew Taylor",
    "Olivia Martinez",
)

DEFAULT_PATIENTS: tuple[tuple[str, str], ...] = (
    ("Alice Smith", "23.08.1997"),
    ("Bob Johnson", "22.06.2000"),
    ("Charlie Brown", "12.01.1998"),
    ("Diana Davis", "03.03.2003"),
    ("Eva Martinez", "02.08.2008"),
    ("Frank Lopez", "14.02.2012"),
    ("Grace Lee", "14.08.2012"),
    ("Henry Jackson", "22.08.2006"),
)

# Walked backwards (wrapping) as bookings are made.
DEFAULT_TIMES: tuple[str, ...] = (
    "17:00",
    "12:30",
    "08:30",
    "14:00",
    "13:30",
    "09:00",
    "15:00",
    "10:00",
)

TOMORROW_START_TIME_INDEX = 7


def default_doctors() -> list[Doctor]:
    return [Doctor(name=name) for name in DEFAULT_DOCTOR_NAMES]


def default_patients() -> list[Patient]:
    return [Patient(name=name, date_of_birth=dob) for name, dob in DEFAULT_PATIENTS]


def plan_day(
    date: str,
    doctors: list[Doctor],
    patients: list[Patient],
    time_index: int,
) -> list[Appointment]:
    """Pair every doctor with every patient on ``date``, one fixed time each.

    Doctors form the outer loop and patients the inner one.  The time index
    steps back by one after each pairing.
    """
    planned: list[Appointment] = []
    for doctor in doctors:
        for patient in patients:
            planned.append(
                Appointment(
                    date_time=join_date_time(date, DEFAULT_TIMES[time_index]),
                    doctor_name=doctor.name,
                    patient_name=patient.name,
                )
            )
            time_index = (time_index - 1) % len(DEFAULT_TIMES)
    return planned


def plan_default_appointments(
    today: dt.date,
    doctors: list[Doctor],
    patients: list[Patient],
) -> list[Appointment]:
    """Today: first half of doctors × first half of patients, starting at time 0.
    Tomorrow: the remaining halves, starting at time 7.
    """
    half_doctors = len(doctors) // 2
    half_patients = len(patients) // 2
    return plan_day(
        format_date(today), doctors[:half_doctors], patients[:half_patients], 0
    ) + plan_day(
        format_date(next_day(today)),
        doctors[half_doctors:],
        patients[half_patients:],
        TOMORROW_START_TIME_INDEX,
    )
