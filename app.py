#!/usr/bin/env python3
"""
AQJ - Site vitrine
Contenu JSON + API contact (Gunicorn ready)
"""

from flask import Flask, jsonify, render_template, request
from flask_babel import Babel
from flask_cors import CORS
from jinja2 import TemplateNotFound
from werkzeug.middleware.proxy_fix import ProxyFix
import logging
import os

from config import AppConfig

from blueprints.api import api_bp
from blueprints.site import site_bp
from managers.contact_manager import contact_manager
from managers.content_manager import content_manager
from utils.middleware import setup_middleware

# ============================================================
# LOGGING PRODUCTION
# ============================================================

logging.basicConfig(
    level=AppConfig.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================
# FACTORY
# ============================================================

def create_app(config_class=AppConfig, overrides=None):

    logger.info("🚀 Initialisation Flask...")

    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    # les documents sont renvoyés tels quels, ordre des clés compris
    app.json.sort_keys = False

    if app.config.get("PROXY_FIX"):
        app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_for=1,
            x_proto=1,
            x_host=1,
            x_port=1
        )

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    Babel(app)
    setup_middleware(app)

    # ========================================================
    # Managers
    # ========================================================

    content_manager.init_app(app)
    contact_manager.init_app(app)

    # ========================================================
    # BLUEPRINTS
    # ========================================================

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(site_bp)

    # ========================================================
    # ERREURS (JSON pour /api, HTML sinon)
    # ========================================================

    def _error(code, message):
        if request.path.startswith("/api/"):
            return jsonify({"error": message}), code
        try:
            return render_template(f"errors/{code}.html", title=message), code
        except TemplateNotFound:
            return f"<h1>{code} - {message}</h1><p><a href='/'>Home</a></p>", code

    @app.errorhandler(404)
    def not_found(e):
        return _error(404, "Not found")

    @app.errorhandler(405)
    def method_not_allowed(e):
        return _error(405, "Method not allowed")

    @app.errorhandler(500)
    def server_error(e):
        logger.exception("🔥 ERREUR 500")
        return _error(500, "Internal server error")

    logger.info(f"✅ {app.config['NAME']} v{app.config['VERSION']} démarré")
    logger.info(f"   - Contenu: {app.config['CONTENT_DIR']}")
    logger.info(f"   - Journal contact: {app.config['CONTACT_LOG_FILE']}")
    logger.info(f"   - API: {', '.join('/api/' + r for r in app.config['API_RESOURCES'])}")

    return app


# ============================================================
# ENTRYPOINT
# ============================================================

app = create_app()

if __name__ == "__main__":

    port = int(os.environ.get("PORT", AppConfig.PORT))
    logger.info(f"Backend running on port {port}")

    app.run(
        host="0.0.0.0",
        port=port,
        debug=False
    )
