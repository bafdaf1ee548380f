class RegistryError(Exception):
    """Base exception for all appointment registry errors."""


class NotFoundError(RegistryError, LookupError):
    """Raised when a doctor or patient lookup by name finds nothing."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} not found: {name}")


class DoctorNotFoundError(NotFoundError):
    def __init__(self, name: str) -> None:
        super().__init__("Doctor", name)


class PatientNotFoundError(NotFoundError):
    def __init__(self, name: str) -> None:
        super().__init__("Patient", name)


class DoctorUnavailableError(RegistryError):
    """Raised when the doctor already has an appointment in the requested slot."""

    def __init__(self, doctor_name: str, date_time: str) -> None:
        self.doctor_name = doctor_name
        self.date_time = date_time
        super().__init__(
            f"Dr. {doctor_name} is not available at {date_time}. Please choose another time."
        )


class SelectionOutOfRangeError(RegistryError, IndexError):
    """Raised when a pick-by-number index falls outside the listed items."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Invalid index {index} for {size} item(s)")


class InvalidDateError(RegistryError, ValueError):
    """Raised when a user-entered date is malformed or in the past."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date '{value}': {reason}")
