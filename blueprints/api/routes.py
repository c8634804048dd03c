"""
Routes API : documents de contenu, messages de contact, santé
"""

from flask import current_app, jsonify, request

from . import api_bp
from managers.contact_manager import contact_manager, utc_timestamp
from managers.content_manager import content_manager
from utils.errors import ContactValidationError, ContentUnavailable

CONTACT_OK_MESSAGE = "Message received (demo)"


# ============================
# SANTE
# ============================
@api_bp.route("/health", methods=["GET"])
def api_health():
    return jsonify({"status": "ok", "time": utc_timestamp()})


# ============================
# CONTACT
# ============================
@api_bp.route("/contact", methods=["POST"])
def api_contact():
    """
    Enregistre un message de contact.
    JSON attendu: { "name": "...", "email": "...", "message": "..." }
    """
    data = request.get_json(silent=True) or {}

    try:
        contact_manager.append(data)
    except ContactValidationError as e:
        current_app.logger.info(f"Contact refusé, champs manquants: {', '.join(e.missing)}")
        return jsonify({"message": "Missing fields"}), 400

    return jsonify({"ok": True, "message": CONTACT_OK_MESSAGE})


# ============================
# CONTENU
# ============================
@api_bp.route("/<resource>", methods=["GET"])
def api_content(resource):
    """Renvoie le document JSON tel quel (projects, services, ...)"""
    if resource not in current_app.config["API_RESOURCES"]:
        return jsonify({"error": "Not found"}), 404

    try:
        data = content_manager.load(resource)
    except ContentUnavailable as e:
        current_app.logger.warning(f"⚠️ {e} ({e.reason})")
        return jsonify({"error": str(e)}), 500

    return jsonify(data)
