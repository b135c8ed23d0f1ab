import logging
from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from alumni.core.db import get_db
from alumni.core.security import decode_access_token
from alumni.models.user import User
from alumni.services.users import find_user_by_keycloak_id

logger = logging.getLogger(__name__)

# Токен выдаёт Keycloak, tokenUrl указан только для OpenAPI
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    payload = decode_access_token(token)
    if payload is None:
        raise HTTPException(status_code=401, detail="Некорректный токен")

    keycloak_id = payload.get("sub")
    if keycloak_id is None:
        raise HTTPException(status_code=401, detail="Ошибка проверки токена (нет subject)")

    user = find_user_by_keycloak_id(db, keycloak_id)
    if user is None:
        logger.info(f"Пользователь с subject {keycloak_id} не найден")
        raise HTTPException(status_code=401, detail="Пользователь не найден")

    return user
