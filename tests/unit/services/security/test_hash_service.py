from app.services.security.hash import get_password_hash, verify_password

######################### ТЕСТЫ verify_password ########################


def test_verify_password_correct() -> None:
    """Успешная верификация пароля."""
    hashed_password = get_password_hash("password123")

    assert verify_password("password123", hashed_password) is True


def test_verify_password_incorrect() -> None:
    """Верификация неверного пароля."""
    hashed_password = get_password_hash("password123")

    assert verify_password("wrongpassword", hashed_password) is False


def test_verify_password_too_long() -> None:
    """Пароль длиннее 72 байт не совпадает, а не роняет проверку."""
    hashed_password = get_password_hash("password123")

    assert verify_password("a" * 100, hashed_password) is False


######################### ТЕСТЫ get_password_hash ########################


def test_get_password_hash() -> None:
    """Проверка успешного хеширования пароля."""
    password = "password123"
    hashed = get_password_hash(password)

    assert isinstance(hashed, str)
    assert hashed != password
    # bcrypt с cost factor 10
    assert hashed.startswith("$2b$10$")
    assert verify_password(password, hashed) is True


def test_get_password_hash_salted() -> None:
    """Одинаковые пароли дают разные хеши."""
    assert get_password_hash("password123") != get_password_hash("password123")
