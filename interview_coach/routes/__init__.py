import threading

from flask import current_app

from interview_coach.services.ai_service import AIService

AI_EXTENSION = "interview_coach.ai"

_build_lock = threading.Lock()


def current_ai():
    """AI service for the running app, built from settings on first use."""
    ai = current_app.extensions.get(AI_EXTENSION)
    if ai is None:
        with _build_lock:
            ai = current_app.extensions.get(AI_EXTENSION)
            if ai is None:
                ai = AIService.from_settings()
                current_app.extensions[AI_EXTENSION] = ai
    return ai
