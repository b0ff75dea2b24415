from pydantic import ValidationError
import pytest

from app.core import messages
from app.schemas.user import LoginUserRequest, RegisterUserRequest


def _messages(exc_info: pytest.ExceptionInfo[ValidationError]) -> dict[str, str]:
    return {str(e["loc"][0]): e["msg"] for e in exc_info.value.errors()}


######################### ТЕСТЫ RegisterUserRequest ########################


def test_register_request_valid() -> None:
    user = RegisterUserRequest(name="Taro", email="taro@example.com", password="abcd1234")

    assert user.email == "taro@example.com"
    assert user.password == "abcd1234"


def test_register_request_empty_name() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterUserRequest(name="", email="taro@example.com", password="abcd1234")

    assert _messages(exc_info) == {"name": messages.NAME_REQUIRED}


def test_register_request_invalid_email() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterUserRequest(name="Taro", email="not-an-email", password="abcd1234")

    assert _messages(exc_info) == {"email": messages.INVALID_EMAIL}


@pytest.mark.parametrize(
    ("password", "message"),
    [
        ("abc123", messages.PASSWORD_MIN_LENGTH),
        ("abcd 1234", messages.PASSWORD_ALPHANUMERIC),
        ("abcd-1234!", messages.PASSWORD_ALPHANUMERIC),
        ("пароль12345", messages.PASSWORD_ALPHANUMERIC),
        ("a" * 73, messages.PASSWORD_MAX_LENGTH),
    ],
)
def test_register_request_bad_password(password: str, message: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterUserRequest(name="Taro", email="taro@example.com", password=password)

    assert _messages(exc_info) == {"password": message}


def test_register_request_reports_all_fields() -> None:
    """Ошибки по всем полям возвращаются разом."""
    with pytest.raises(ValidationError) as exc_info:
        RegisterUserRequest(name="", email="bad", password="short")

    assert set(_messages(exc_info)) == {"name", "email", "password"}


######################### ТЕСТЫ LoginUserRequest ########################


def test_login_request_empty_password() -> None:
    with pytest.raises(ValidationError) as exc_info:
        LoginUserRequest(email="taro@example.com", password="")

    assert _messages(exc_info) == {"password": messages.PASSWORD_REQUIRED}


def test_login_request_accepts_any_non_empty_password() -> None:
    """При входе правила сложности пароля не проверяются."""
    login = LoginUserRequest(email="taro@example.com", password="x")

    assert login.password == "x"
