"""Main interview API routes."""
import logging
from flask import Blueprint, request, jsonify

from interview_coach.models.conversation import ConversationHistory
from interview_coach.models.interview_state import InterviewContext, ValidationError
from interview_coach.routes import current_ai
from interview_coach.services.ai_service import GenerationError
from interview_coach.services.interview_service import InterviewService

logger = logging.getLogger(__name__)

interview_bp = Blueprint('interview', __name__)

MISSING_FIELDS_ERROR = "please input job title or user response."
GENERATION_ERROR = "Failed to generate text"


@interview_bp.route('/interview', methods=['POST'])
def interview():
    """Take the candidate's answer and return Tina's next line."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    job_title = data.get("jobTitle") or ""
    name = data.get("name") or ""
    user_response = data.get("userResponse") or ""

    context = InterviewContext(job_title=job_title, candidate_name=str(name))
    try:
        context.validate()
        if not isinstance(user_response, str) or not user_response:
            raise ValidationError("user response is required")
    except ValidationError as e:
        logger.info("[INTERVIEW] rejected request: %s", e)
        return jsonify({"error": MISSING_FIELDS_ERROR}), 400

    try:
        history = ConversationHistory.from_list(data.get("history"))
        result = InterviewService(current_ai()).run_turn(context, history, user_response)
    except (GenerationError, RuntimeError, TypeError, AttributeError):
        logger.exception("[INTERVIEW] error generating text")
        return jsonify({"error": GENERATION_ERROR}), 400

    return jsonify({"response": result.reply, "history": result.history.to_list()}), 200
