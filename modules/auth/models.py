"""
Authentication module data models.

Signup and login input arrives from untrusted clients; these models are
the only place it gets validated.
"""

from typing import Annotated, Any, Mapping, TypeVar
from pydantic import BaseModel, EmailStr, Field, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ValidationError

NAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6

FormT = TypeVar("FormT", bound=BaseModel)


class SignupForm(BaseModel):
    """Fields posted to /signupSubmit."""

    name: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH),
    ]
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, repr=False)

    model_config = {"extra": "ignore"}

    @property
    def normalized_email(self) -> str:
        return str(self.email).lower()


class LoginForm(BaseModel):
    """Fields posted to /loginSubmit."""

    email: EmailStr
    password: str = Field(..., min_length=1, repr=False)

    model_config = {"extra": "ignore"}

    @property
    def normalized_email(self) -> str:
        return str(self.email).lower()


def parse_form(model: type[FormT], data: Mapping[str, Any]) -> FormT:
    """
    Validate raw form data into a form model.

    Raises:
        ValidationError: With the first problem as a readable message,
            e.g. "password: String should have at least 6 characters"
    """
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"]) or "input"
        raise ValidationError(
            f"{field}: {first['msg']}",
            code="INVALID_FORM",
            details={"fields": [".".join(map(str, err["loc"])) for err in errors]},
        ) from e
