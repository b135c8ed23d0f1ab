from sqlalchemy.orm import Session
from alumni.models.user import User


def find_user_by_keycloak_id(db: Session, keycloak_id: str) -> User | None:
    """Ищет пользователя по subject из токена."""
    return db.query(User).filter(User.keycloak_id == keycloak_id).first()


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)
