"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

WIRE_FORMATS = ("text", "json")


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    api_host: str = "localhost"
    api_port: int = 8080
    wire_format: str = "text"
    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)
    # Base URL the demo client talks to
    api_url: str = "http://localhost:8080"


def resolve_wire_format(value: str | None = None) -> str:
    """Normalize a wire format name, defaulting to text."""
    if not value:
        return "text"

    normalized = value.strip().lower()
    if normalized not in WIRE_FORMATS:
        raise ValueError(
            f"Unknown wire format {value!r}, expected one of {', '.join(WIRE_FORMATS)}"
        )
    return normalized


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    port = os.getenv("API_PORT", "8080")
    try:
        api_port = int(port)
    except ValueError as e:
        raise ValueError(f"API_PORT must be an integer, got {port!r}") from e

    api_host = os.getenv("API_HOST", "localhost")

    return Settings(
        api_host=api_host,
        api_port=api_port,
        wire_format=resolve_wire_format(os.getenv("WIRE_FORMAT")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or str(DEFAULT_LOG_PATH),
        api_url=os.getenv("API_URL") or f"http://{api_host}:{api_port}",
    )
