"""Username validation."""

from .errors import UsernameMissing
from .result import Err, Ok, Result


def validate_username(raw_username: str | None) -> Result[str, UsernameMissing]:
    """
    Check the request-supplied username.

    Surrounding whitespace is stripped. Absent, empty and blank values
    fail with UsernameMissing; any other string is accepted.

    Length and content are not checked here. The stripped value is what
    the store sees: names over 50 characters (VARCHAR(50)) or containing
    NUL are rejected by PostgreSQL and surface as fatal errors.
    """
    if raw_username is None:
        return Err(UsernameMissing())

    username = raw_username.strip()
    if not username:
        return Err(UsernameMissing())
    return Ok(username)
