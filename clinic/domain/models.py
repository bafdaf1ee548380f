from pydantic import BaseModel, ConfigDict, Field


class Appointment(BaseModel):
    """A booked slot, identified by its ``(date_time, doctor, patient)`` triple.

    The same model is stored in the registry's global list and mirrored into
    the doctor's and the patient's own appointment lists.  Doctor and patient
    are referenced by name and resolved through the registry when displayed.
    """

    model_config = ConfigDict(frozen=True)

    date_time: str
    doctor_name: str
    patient_name: str

    @property
    def date(self) -> str:
        return self.date_time.partition(" ")[0]

    @property
    def time(self) -> str:
        return self.date_time.partition(" ")[2]

    def matches(self, date_time: str, patient_name: str, doctor_name: str) -> bool:
        return (
            self.date_time == date_time
            and self.patient_name == patient_name
            and self.doctor_name == doctor_name
        )


class Person(BaseModel):
    """Common shape of doctors and patients: a name plus their appointments."""

    name: str
    date_of_birth: str | None = None
    appointments: list[Appointment] = Field(default_factory=list)

    def add_appointment(self, appointment: Appointment) -> None:
        self.appointments.append(appointment)

    def remove_appointment(self, date_time: str, patient_name: str, doctor_name: str) -> int:
        """Drop every entry matching the triple exactly. Returns how many were dropped."""
        kept = [a for a in self.appointments if not a.matches(date_time, patient_name, doctor_name)]
        removed = len(self.appointments) - len(kept)
        self.appointments = kept
        return removed

    def has_appointment_at(self, date_time: str) -> bool:
        return any(a.date_time == date_time for a in self.appointments)


class Doctor(Person):
    """A doctor from the clinic roster."""

    def is_available(self, date_time: str) -> bool:
        return not self.has_appointment_at(date_time)


class Patient(Person):
    """A registered patient. ``date_of_birth`` is kept as entered (``DD.MM.YYYY``)."""

    date_of_birth: str


class Slot(BaseModel):
    """A free time slot for one doctor."""

    model_config = ConfigDict(frozen=True)

    date_time: str
    doctor_name: str

    @property
    def time(self) -> str:
        return self.date_time.partition(" ")[2]


class VisitCard(BaseModel):
    """A diagnosis recorded against a visit."""

    model_config = ConfigDict(frozen=True)

    doctor_name: str
    patient_name: str
    date_time: str
    diagnosis: str
