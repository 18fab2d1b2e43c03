"""Email address value object, the business key of a user."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from roster.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """A syntactically valid address, trimmed and lower-cased.

    Syntax follows ``email_validator`` (the same checks the API schemas run);
    the domain is never resolved.
    """

    value: str

    def __post_init__(self) -> None:
        candidate = (self.value or "").strip().lower()
        if not candidate:
            raise InvalidEmailError("Email cannot be empty")

        try:
            validate_email(candidate, check_deliverability=False)
        except EmailNotValidError as exc:
            raise InvalidEmailError(f"Invalid email format: {self.value}") from exc

        object.__setattr__(self, "value", candidate)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value!r})"
