"""
Blueprint API JSON : contenu, contact, santé
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

# Importer les routes APRÈS avoir créé le blueprint
# pour éviter les imports circulaires
from . import routes  # noqa: E402,F401
