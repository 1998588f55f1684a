"""Application configuration via environment variables."""

import os
import sys
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "chess-sensei"
DATABASE_FILENAME = "chess_sensei.db"


def _default_data_dir() -> Path:
    if os.name == "nt" and "APPDATA" in os.environ:
        return Path(os.environ["APPDATA"]) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME


def _default_database_url() -> str:
    path = _default_data_dir() / DATABASE_FILENAME
    return f"sqlite:///{path.as_posix()}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SENSEI_")

    api_prefix: str = "/api"
    project_name: str = "Chess Sensei API"
    allow_origins: list[str] = ["http://localhost:1420", "tauri://localhost"]
    database_url: str = _default_database_url()
    default_puzzle_limit: int = 10
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "qwen2.5:14b"
    ollama_timeout: float = 120.0


settings = Settings()
