from pwdlib import PasswordHash
from pwdlib.hashers.bcrypt import BcryptHasher

BCRYPT_ROUNDS = 10
# bcrypt учитывает только первые 72 байта пароля
MAX_PASSWORD_BYTES = 72

password_hash = PasswordHash((BcryptHasher(rounds=BCRYPT_ROUNDS),))


def get_password_hash(password: str) -> str:
    """
    Хеширование пароля с использованием bcrypt.

    :param password: Пароль для хеширования.
    :return: Захешированный пароль (с солью).
    :rtype: Str
    """
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Проверяет, соответствует ли пришедший пароль хешу из БД.

    Пароли длиннее 72 байт никогда не могли быть захешированы, поэтому не совпадают.

    :param plain_password: Пароль, введенный пользователем.
    :param hashed_password: Захешированный пароль из базы данных.
    :return: Соответствует ли пароль хешу.
    :rtype: Bool
    """
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return password_hash.verify(plain_password, hashed_password)
