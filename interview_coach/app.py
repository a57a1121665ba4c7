import logging
from flask import Flask
from flask_cors import CORS

from interview_coach.config import settings
from interview_coach.routes import AI_EXTENSION
from interview_coach.routes.background_routes import background_bp
from interview_coach.routes.interview_routes import interview_bp
from interview_coach.services.ai_service import AIService

logger = logging.getLogger(__name__)


def create_app(ai_service=None) -> Flask:
    """Build the Flask app. Pass ``ai_service`` to substitute the Gemini client."""
    app = Flask(__name__)
    CORS(app, origins=[settings.ALLOWED_ORIGIN])
    app.extensions[AI_EXTENSION] = ai_service

    # Register blueprints
    app.register_blueprint(interview_bp)
    app.register_blueprint(background_bp)
    return app


def main():
    logging.basicConfig(level=logging.INFO)
    app = create_app(ai_service=AIService.from_settings())
    logger.info("Server listening on http://localhost:%d", settings.PORT)
    app.run(host="0.0.0.0", port=settings.PORT, debug=False, threaded=True)


if __name__ == "__main__":
    main()
