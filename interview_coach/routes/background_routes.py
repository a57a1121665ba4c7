"""Interview backdrop image route."""
import logging
from flask import Blueprint, request, jsonify

from interview_coach.routes import current_ai
from interview_coach.services.ai_service import GenerationError
from interview_coach.services.background_service import BackgroundService

logger = logging.getLogger(__name__)

background_bp = Blueprint('background', __name__)


@background_bp.route('/generate-background', methods=['POST'])
def generate_background():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    job_title = data.get("jobTitle")
    try:
        image_url = BackgroundService(current_ai()).generate_background(job_title)
    except (GenerationError, RuntimeError):
        logger.exception("[BACKGROUND] Gemini image API error")
        return jsonify({"error": "Failed to generate background"}), 500
    return jsonify({"imageUrl": image_url}), 200
