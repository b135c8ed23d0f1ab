import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from alumni.core.config import CORS_ORIGINS, LOG_LEVEL
from alumni.api.users import router as users_router
from alumni.api.groups import router as groups_router
from alumni.api.topics import router as topics_router
from alumni.api.posts import router as posts_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Alumni Network API")

# Добавляем CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем API-маршруты
app.include_router(users_router, prefix="/user", tags=["Пользователи"])
app.include_router(groups_router, prefix="/group", tags=["Группы"])
app.include_router(topics_router, prefix="/topic", tags=["Темы"])
app.include_router(posts_router, prefix="/post", tags=["Посты"])


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # Внутренние ошибки БД наружу не отдаём
    logger.exception(f"Ошибка БД при обработке {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Внутренняя ошибка сервера"})


@app.get("/")
def root():
    return {"message": "Добро пожаловать в Alumni Network!"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8855, reload=True)
