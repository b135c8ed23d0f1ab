from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from alumni.core.config import DATABASE_URL

# Единые имена ограничений, чтобы autogenerate в Alembic давал стабильные миграции
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def make_engine(url: str, **kwargs) -> Engine:
    """Создаёт engine; для SQLite разрешаем доступ из потоков FastAPI."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))

# Сессия на один запрос (используется в Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
