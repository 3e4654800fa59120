import logging
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from config import Settings, load_settings
from relay import AccessRequest, KeyRequest, RelayError, forward_access_request
from validators import validate_key_format, validate_secret

logger = logging.getLogger("gatekeeper-relay")


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the relay app around injected settings."""
    if settings is None:
        settings = load_settings()

    # ----------------------
    # App Setup
    # ----------------------
    app = Flask(__name__)
    app.config["RELAY_SETTINGS"] = settings
    CORS(app, origins=list(settings.frontend_origins))

    # ----------------------
    # Endpoints
    # ----------------------
    @app.route("/", methods=["GET"])
    def health_check():
        return jsonify({"status": "relay-running"}), 200

    @app.route("/api/toyProductionKey", methods=["POST"])
    def toy_production_key():
        try:
            key_request = KeyRequest.from_json(request.get_json(silent=True))
        except ValueError as e:
            logger.warning("Rejected toy production key request: %s", e)
            return jsonify({"error": "Invalid request body"}), 400

        if not validate_key_format(key_request.key, settings.toy_names):
            logger.warning("Invalid toy production key format")
            return jsonify({"error": "Invalid toy production key format"}), 400

        logger.info("Toy production key received")
        return jsonify({
            "status": "success",
            "message": "Toy production key received successfully",
            "toyProductionKey": key_request.key,
        }), 200

    @app.route("/api/gatekeeper/access", methods=["POST"])
    def gatekeeper_access():
        try:
            access_request = AccessRequest.from_json(request.get_json(silent=True))
        except ValueError as e:
            logger.warning("Rejected gatekeeper access request: %s", e)
            return jsonify({"error": "Invalid request body"}), 400

        if not validate_secret(access_request.secret, settings.secret):
            logger.warning("Invalid secret input for %s", access_request.host_or_address)
            return jsonify({"error": "Invalid secret input format"}), 400

        # Forward to the Gatekeeper Service
        try:
            upstream = forward_access_request(
                access_request, settings.gatekeeper_url, settings.relay_timeout
            )
        except RelayError as e:
            logger.exception("Gatekeeper relay failed: %s", e)
            return jsonify({"error": "Failed to access Gatekeeper Service", "detail": str(e)}), 500

        logger.info("Relayed access request for %s", access_request.host_or_address)
        return jsonify(upstream), 200

    return app


settings = load_settings()
logging.basicConfig(level=settings.log_level)
app = create_app(settings)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.port)
