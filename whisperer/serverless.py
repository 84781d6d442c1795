"""
Serverless deployment of POST /api/generate.

Strict contract: generation failures are reported as 500 and the web
client substitutes its own fallback copy.
"""

import logging
import uuid

from flask import Flask, jsonify, request

from . import config
from .errors import GenerationFailure, ServiceUnavailableError, ValidationError
from .generator import generate_argument, get_client
from .models import GenerationRequest

logging.basicConfig(level=config.get_log_level())
logger = logging.getLogger(__name__)

app = Flask(__name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@app.route("/api/generate", methods=ALL_METHODS)
def handler():
    if request.method != "POST":
        response = jsonify({"error": "Method not allowed."})
        response.headers["Allow"] = "POST"
        return response, 405

    request_id = str(uuid.uuid4())
    try:
        client = get_client()
    except ServiceUnavailableError as e:
        return jsonify({"error": e.message}), 500

    try:
        gen_request = GenerationRequest.from_payload(request.get_json(silent=True))
    except ValidationError as e:
        return jsonify({"error": e.message}), 400

    try:
        result = generate_argument(gen_request, client=client, fallback=False, request_id=request_id)
        return jsonify({"variants": [result.text]}), 200
    except GenerationFailure as e:
        return jsonify({"error": e.public_message}), 500
    except Exception as e:
        logger.error(f"[{request_id}] OpenAI error: {e}", exc_info=True)
        return jsonify({"error": "Failed to generate argument."}), 500
