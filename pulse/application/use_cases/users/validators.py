"""Common validation helpers for user use cases."""

from email_validator import EmailNotValidError, validate_email


def normalize_email(email: str) -> str:
    """Return a lower-cased address or raise ``ValueError`` when malformed."""

    try:
        validated = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError("Email address is not valid") from exc
    return validated.normalized.lower()
