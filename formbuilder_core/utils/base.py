import datetime
import enum
from typing import List, Literal, Optional, Union

ErrorMsg = Union[
    Literal["Form title is required"],
    Literal["Form not found"],
    Literal["Response not found"],
    Literal["Failed to fetch forms"],
    Literal["Failed to fetch form"],
    Literal["Failed to create form"],
    Literal["Failed to update form"],
    Literal["Failed to delete form"],
    Literal["Failed to submit response"],
    Literal["Failed to fetch responses"],
    Literal["Failed to fetch response"],
    Literal["Route not found"],
    Literal["Invalid request"],
    Literal["Internal server error"],
]


class FormServiceError(Exception):
    """
    Failure raised by the form service.

    `error` is the short summary returned to API callers, `message` the
    underlying cause (if any) attached for diagnostics.
    """

    status_code = 500

    def __init__(self, error: ErrorMsg, message: Optional[str] = None) -> None:
        super().__init__(error if message is None else f"{error}: {message}")
        self.error = error
        self.message = message


class ValidationError(FormServiceError):
    status_code = 400


class NotFound(FormServiceError):
    status_code = 404


class FieldType(str, enum.Enum):
    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"


ANONYMOUS_RESPONDENT = "Anonymous"

OPTIONS_SEPARATOR = ","


def get_utc_now() -> datetime.datetime:
    return datetime.datetime.now(tz=datetime.timezone.utc)


def join_options(options: Union[List[str], str, None]) -> str:
    """
    Encode field options for storage: lists are comma-joined, pre-joined
    strings are kept as they are.
    """
    if isinstance(options, list):
        return OPTIONS_SEPARATOR.join(options)
    return options or ""


def split_options(options: Optional[str]) -> List[str]:
    # NOTE: an option containing the separator comes back as two options
    if not options:
        return []
    return options.split(OPTIONS_SEPARATOR)


def ensure_utc(value: datetime.datetime) -> datetime.datetime:
    # SQLite drops tzinfo; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)
