from flask import Blueprint
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent.parent  # remonte jusqu'au dossier racine du projet

site_bp = Blueprint(
    'site',
    __name__,
    template_folder=str(BASE_DIR / 'templates'),
)

from . import routes  # noqa: E402,F401
