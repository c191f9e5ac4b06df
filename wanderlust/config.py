import os
from dataclasses import dataclass
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: override SECRET_KEY in production!
DEV_SECRET_KEY = "django-insecure-wanderlust-dev-only-change-me"


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide settings resolved once at start-up."""

    store_uri: str
    session_secret: str
    port: int
    debug: bool = False
    allowed_hosts: tuple = ("127.0.0.1", "localhost")


def load_config(env=None, env_file=None) -> ServerConfig:
    """
    Build ServerConfig from the environment (and the .env file if present).
    - DATABASE_URL: store URI, SQLite file in the project root by default
    - SECRET_KEY: session/signing secret
    - PORT: port used by `manage.py serve`
    """
    if env is None:
        env = environ.Env(
            DEBUG=(bool, False),
            PORT=(int, 8080),
        )
        env_file = env_file or os.path.join(BASE_DIR, ".env")
        if os.path.exists(env_file):
            environ.Env.read_env(env_file)

    hosts = env("ALLOWED_HOSTS", default="127.0.0.1,localhost")
    return ServerConfig(
        store_uri=env("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
        session_secret=env("SECRET_KEY", default=DEV_SECRET_KEY),
        port=env.int("PORT", default=8080),
        debug=env.bool("DEBUG", default=False),
        allowed_hosts=tuple(h.strip() for h in hosts.split(",") if h.strip()),
    )
