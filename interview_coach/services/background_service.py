"""Background image generation service."""
from interview_coach.prompts.system_prompts import build_background_prompt


class BackgroundService:
    """Handles interview backdrop generation."""

    def __init__(self, ai):
        self.ai = ai

    def generate_background(self, job_title: str) -> str:
        """Return the generated backdrop as a PNG data URI."""
        image_b64 = self.ai.generate_image(build_background_prompt(job_title))
        return f"data:image/png;base64,{image_b64}"
