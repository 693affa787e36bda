import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router
from config.logging_setup import setup_logging
from core.errors import ErrorCalendario
from data.db import engine
from data.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="QA Disponibilidad", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ErrorCalendario)
async def error_calendario_handler(request: Request, exc: ErrorCalendario) -> JSONResponse:
    logger.warning("%s en %s: %s", exc.codigo, request.url.path, exc.mensaje)
    return JSONResponse(status_code=400, content={"detail": exc.mensaje, "codigo": exc.codigo})


@app.get("/")
def healthcheck():
    return {"status": "ok"}


app.include_router(router)
