from flask import Flask, request, jsonify, Response
import uuid
import logging
from typing import Optional
from dotenv import load_dotenv

from whisperer import config
from whisperer.errors import ValidationError, ServiceUnavailableError
from whisperer.fallback import FALLBACK_NOTICE
from whisperer.generator import generate_argument
from whisperer.models import GenerationRequest

load_dotenv()

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 5 * 1024 * 1024

# ============================================================================
# CORS Configuration (Manual Implementation)
# ============================================================================

def is_origin_allowed(origin: Optional[str]) -> bool:
    """Check if origin is in the ALLOWED_ORIGINS list."""
    if not origin:
        return False
    return origin in config.get_allowed_origins()


def _apply_cors_headers(response: Response, origin: str) -> Response:
    response.headers["Access-Control-Allow-Origin"] = origin
    response.headers["Vary"] = "Origin"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.before_request
def handle_preflight():
    """Handle OPTIONS preflight requests for CORS."""
    if request.method == "OPTIONS" and request.path.startswith("/api/"):
        origin = request.headers.get("Origin")
        response = Response('', status=200)
        if is_origin_allowed(origin):
            _apply_cors_headers(response, origin)
            response.headers["Access-Control-Max-Age"] = "86400"
        # Disallowed origins get a bare 200 without Allow-Origin
        return response


@app.after_request
def add_cors_headers(response):
    """Add CORS headers to all /api/* responses, errors included."""
    if request.path.startswith("/api/") and request.method != "OPTIONS":
        origin = request.headers.get("Origin")
        if is_origin_allowed(origin):
            _apply_cors_headers(response, origin)
    return response

# Configure logging
logging.basicConfig(level=config.get_log_level())
logger = logging.getLogger(__name__)


@app.route('/api/generate', methods=['POST'])
def generate():
    """
    Generate one PM-facing argument for a sales feature request.

    Request JSON:
    {
        "feature": string (required, 3+ chars),
        "problem": string,
        "persona": persona/archetype id or free text,
        "personaNote": string,
        "outcome": outcome id or free text,
        "evidence": string (optional),
        "length": "ultra" | "standard",
        "imageDataUrl": "data:image/...;base64,..." (optional)
    }

    Returns: 200 JSON { variants: [string] }. If the model call fails the
    local fallback copy is returned instead, with fallback=true and a notice.
    Or 400 { error } for a missing feature, 500 { error } when the service
    is not configured.
    """
    request_id = str(uuid.uuid4())
    try:
        payload = request.get_json(silent=True) or {}
        gen_request = GenerationRequest.from_payload(payload)
        result = generate_argument(gen_request, request_id=request_id)
        body = {"variants": [result.text]}
        if result.fallback_used:
            body["fallback"] = True
            body["notice"] = FALLBACK_NOTICE
        return jsonify(body), 200
    except ValidationError as e:
        logger.info(f"[{request_id}] Generate rejected (400): {e.message}")
        return jsonify({'error': e.message}), 400
    except ServiceUnavailableError as e:
        logger.error(f"[{request_id}] Generate unavailable: {e.message}")
        return jsonify({'error': e.message}), 500
    except Exception as e:
        logger.error(f"[{request_id}] Generate failed: {e}", exc_info=True)
        return jsonify({'error': 'Failed to generate argument.'}), 500


@app.route('/api/health', methods=['GET'])
def health():
    """Health check endpoint; does not touch OpenAI."""
    return jsonify({'status': 'ok'}), 200


if __name__ == '__main__':
    port = config.get_port()
    logger.info(f"API listening on http://localhost:{port}")
    app.run(host='0.0.0.0', port=port, debug=False)
