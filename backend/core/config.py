import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./clinic.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

CORS_ALLOWED_ORIGINS = _get_list(
    os.getenv("CORS_ALLOWED_ORIGINS"),
    default=["http://localhost:8080", "http://localhost:5173"],
)

DEFAULT_AGENDA_GRANULARITY = os.getenv("DEFAULT_AGENDA_GRANULARITY", "week").strip().lower()
AGENDA_GRANULARITIES = {"day", "week", "month", "year"}

def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and DATABASE_URL.startswith("sqlite"):
        raise RuntimeError("DATABASE_URL must point to a server database in production.")
    if DEFAULT_AGENDA_GRANULARITY not in AGENDA_GRANULARITIES:
        raise RuntimeError(
            f"DEFAULT_AGENDA_GRANULARITY must be one of {sorted(AGENDA_GRANULARITIES)}."
        )
