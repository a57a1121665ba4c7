from dataclasses import dataclass
from enum import Enum

from interview_coach.models.conversation import ConversationHistory, count_interviewer_turns

# Questions Tina asks before switching to closing feedback
MAX_QUESTIONS = 6


class ValidationError(ValueError):
    """Raised when request input is missing a required field."""


class Phase(Enum):
    ONGOING = "ongoing"
    FINAL = "final"


@dataclass(frozen=True)
class InterviewContext:
    """Per-request interview parameters."""
    job_title: str
    candidate_name: str = ""

    def validate(self):
        if not isinstance(self.job_title, str):
            raise ValidationError("job title must be a string")
        if not self.job_title:
            raise ValidationError("job title is required")


def decide_phase(history: ConversationHistory) -> Phase:
    """Pick the conversation phase from the post-append history.

    Only an exact count of ``MAX_QUESTIONS`` interviewer turns selects the
    feedback phase; a longer history falls back to questioning.
    """
    if count_interviewer_turns(history) == MAX_QUESTIONS:
        return Phase.FINAL
    return Phase.ONGOING
