# house_hunter/core/config.py
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv


def str_to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def merge_unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in items:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


class Settings:
    def __init__(self) -> None:
        # Only load .env for local/dev. In prod, env vars come from the service config.
        self.ENV = os.getenv("ENV", "dev").strip().lower()  # dev | prod
        if self.ENV != "prod":
            load_dotenv()

        # ----------------------------
        # Server
        # ----------------------------
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "5000"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "info").strip().lower()

        # ----------------------------
        # Database
        # ----------------------------
        self.DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
        self.DB_USER = os.getenv("DB_USER", "")
        self.DB_PASS = os.getenv("DB_PASS", "")
        self.DB_HOST = os.getenv("DB_HOST", "")
        self.DB_PORT = os.getenv("DB_PORT", "5432")
        self.DB_NAME = os.getenv("DB_NAME", "house_hunter")
        self.DB_SSLMODE = os.getenv("DB_SSLMODE", "prefer").strip().lower()
        self.DB_AUTO_CREATE_TABLES = str_to_bool(
            os.getenv("DB_AUTO_CREATE_TABLES"),
            default=self.ENV != "prod",
        )

        # ----------------------------
        # CORS
        # ----------------------------
        dev_defaults = [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]

        cors_from_env = parse_csv(os.getenv("CORS_ORIGINS"))
        if self.ENV == "prod":
            self.CORS_ORIGINS = merge_unique(cors_from_env)
        else:
            self.CORS_ORIGINS = merge_unique(cors_from_env + dev_defaults)

        # ----------------------------
        # Auth / JWT
        # ----------------------------
        # ACCESS_TOKEN_SECRET is the name older deployments use.
        self.JWT_SECRET = os.getenv("JWT_SECRET") or os.getenv("ACCESS_TOKEN_SECRET", "")
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

        self.SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "token")

        # Empty => POST /jwt is disabled.
        self.TOKEN_ISSUER_SECRET = os.getenv("TOKEN_ISSUER_SECRET", "")

        self._validate_prod()

    def _validate_prod(self) -> None:
        if self.ENV != "prod":
            return

        missing: list[str] = []

        if not self.JWT_SECRET:
            missing.append("JWT_SECRET")
        if not self.DATABASE_URL:
            if not self.DB_HOST:
                missing.append("DB_HOST")
            if not self.DB_USER:
                missing.append("DB_USER")
            if not self.DB_PASS:
                missing.append("DB_PASS")

        if not self.CORS_ORIGINS:
            missing.append("CORS_ORIGINS")

        cors_joined = ",".join(self.CORS_ORIGINS)
        if "localhost" in cors_joined or "127.0.0.1" in cors_joined:
            raise RuntimeError("CORS_ORIGINS contains localhost/dev origins in prod")

        if missing:
            raise RuntimeError(f"Missing required prod env vars: {', '.join(missing)}")

    @property
    def is_prod(self) -> bool:
        return self.ENV == "prod"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not self.DB_HOST:
            # Local dev without a database server.
            return "sqlite:///./house_hunter.db"
        encoded_password = quote_plus(self.DB_PASS)
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{encoded_password}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            f"?sslmode={self.DB_SSLMODE}"
        )


settings = Settings()


def require_jwt_secret() -> None:
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set")
