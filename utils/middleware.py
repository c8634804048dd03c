"""
Middleware pour l'application Flask
"""

import time
from flask import g, request


def setup_middleware(app):
    """Configure le middleware de l'application"""

    @app.before_request
    def before_request():
        """Exécuté avant chaque requête"""
        g._started_at = time.perf_counter()

    @app.after_request
    def add_security_headers(response):
        """Ajoute les en-têtes de sécurité HTTP"""
        # Sécurité
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # Le thème suit la préférence système annoncée par le navigateur
        response.headers["Accept-CH"] = "Sec-CH-Prefers-Color-Scheme"
        response.vary.add("Sec-CH-Prefers-Color-Scheme")

        # Cache
        if request.path.startswith("/assets"):
            response.headers["Cache-Control"] = "public, max-age=31536000"
        elif request.path.startswith("/api"):
            response.headers["Cache-Control"] = "no-store"
        else:
            response.headers["Cache-Control"] = "no-cache"

        started = getattr(g, "_started_at", None)
        if started is not None:
            elapsed = (time.perf_counter() - started) * 1000
            app.logger.debug(f"{request.method} {request.path} -> {response.status_code} ({elapsed:.1f} ms)")

        return response
