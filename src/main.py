from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
from .api.auth.router import router as auth_router
from .api.transactions.router import router as transactions_router
from .api.gpts.router import router as gpts_router
from .config.settings import settings
from .database.db import init_db
from .utils.errors import http_exception_handler, validation_exception_handler
import logging

@asynccontextmanager
async def lifespan(app: FastAPI):
    # local/dev databases; deployed ones are managed by alembic
    if settings.DATABASE_URL.startswith("sqlite"):
        init_db()
    yield

def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title="Finance GPT API",
        description="Personal finance ledger and GPT configurations",
        version="0.1.0",
        lifespan=lifespan
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(auth_router)
    app.include_router(transactions_router)
    app.include_router(gpts_router)

    return app

app = create_app()
