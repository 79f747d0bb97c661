class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRangeError(ValidationError):
    """Raised when a period ends before it starts."""


class PeriodNotFoundError(DomainError):
    """Raised when a group has no period with the requested number."""

    def __init__(self, group_id: str, period_number: int):
        super().__init__(f"No existe el período {period_number} para la colonia {group_id}")
        self.group_id = group_id
        self.period_number = period_number
