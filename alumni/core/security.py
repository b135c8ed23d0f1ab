import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from alumni.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS, TOKEN_AUDIENCE

logger = logging.getLogger(__name__)


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """
    Выпускает токен с указанным subject.
    В проде токены выдаёт Keycloak, функция нужна для тестов и локальной отладки.
    """
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    to_encode = {"sub": subject, "exp": expire}
    if TOKEN_AUDIENCE:
        to_encode["aud"] = TOKEN_AUDIENCE

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Расшифровываем JWT-токен"""
    options = {"verify_aud": TOKEN_AUDIENCE is not None}
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], audience=TOKEN_AUDIENCE, options=options)
    except JWTError as exc:
        logger.info(f"Токен отклонён: {exc}")
        return None
