import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from house_hunter.core.config import settings, require_jwt_secret
from house_hunter.core.database import dispose_engine, init_db, ping_database
from house_hunter.routes.auth import router as auth_router
from house_hunter.routes.houses import router as houses_router
from house_hunter.routes.users import router as users_router

logger = logging.getLogger(__name__)

require_jwt_secret()


@asynccontextmanager
async def lifespan(app: FastAPI):
    ping_database()
    logger.info("Pinged the database; connection is healthy")
    if settings.DB_AUTO_CREATE_TABLES:
        init_db()
    try:
        yield
    finally:
        dispose_engine()


app = FastAPI(title="House Hunter", lifespan=lifespan)
logger.info(
    "Startup config: ENV=%s cookie=%s token_issuer_enabled=%s",
    settings.ENV,
    settings.SESSION_COOKIE_NAME,
    bool(settings.TOKEN_ISSUER_SECRET),
)

_ERROR_CODE_BY_STATUS: dict[int, str] = {
    400: "VALIDATION_ERROR",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_ERROR",
}


def _error_code(status_code: int) -> str:
    return _ERROR_CODE_BY_STATUS.get(int(status_code), "HTTP_ERROR")


@app.exception_handler(HTTPException)
def http_exception_handler(request: Request, exc: HTTPException):  # noqa: ARG001
    message = str(exc.detail) if exc.detail is not None else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": _error_code(exc.status_code), "message": message},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):  # noqa: ARG001
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid request payload",
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
    )


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "INTERNAL_ERROR", "message": "Internal Server Error"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(houses_router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "server is running"


@app.get("/health")
def health_check():
    return {"status": "ok"}
