import os
import secrets
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _env_list(name: str, default: str) -> tuple:
    raw = os.environ.get(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


class AppConfig:
    """
    Configuration centralisée du site.
    Chaque valeur peut être surchargée par variable d'environnement.
    """

    # ============================================================
    # INFOS APP
    # ============================================================

    VERSION = "1.0.0"
    NAME = os.environ.get("APP_NAME", "AQJ")

    # ============================================================
    # SERVEUR
    # ============================================================

    PORT = int(os.environ.get("PORT", 3000))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    # derrière un reverse proxy (Render, nginx...)
    PROXY_FIX = os.environ.get("PROXY_FIX", "true").lower() == "true"

    # ============================================================
    # CONTENU
    # ============================================================

    CONTENT_DIR = Path(os.environ.get("CONTENT_DIR", BASE_DIR / "data"))
    ASSETS_DIR = Path(os.environ.get("ASSETS_DIR", BASE_DIR / "assets"))

    # documents exposés sur /api/<resource>
    API_RESOURCES = _env_list("API_RESOURCES", "projects,services")

    # ============================================================
    # CONTACT
    # ============================================================

    CONTACT_LOG_FILE = Path(
        os.environ.get("CONTACT_LOG_FILE", BASE_DIR / "uploads" / "messages.json")
    )

    # ============================================================
    # CORS / I18N
    # ============================================================

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    BABEL_DEFAULT_LOCALE = os.environ.get("BABEL_DEFAULT_LOCALE", "en")

    WTF_CSRF_ENABLED = True


class TestingConfig(AppConfig):
    TESTING = True
    WTF_CSRF_ENABLED = False
    PROXY_FIX = False
    SECRET_KEY = "test-secret"
