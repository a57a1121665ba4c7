"""Turn orchestration for the interview conversation."""
import logging
from dataclasses import dataclass

from interview_coach.models.conversation import (
    CANDIDATE,
    INTERVIEWER,
    ConversationHistory,
    Turn,
    count_interviewer_turns,
    render_transcript,
)
from interview_coach.models.interview_state import InterviewContext, decide_phase
from interview_coach.prompts.system_prompts import build_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    reply: str
    history: ConversationHistory


class InterviewService:
    """Runs one request's worth of the interview.

    Holds no conversation state; the caller sends the full history each time
    and gets back that history extended by the candidate's utterance and
    Tina's reply.
    """

    def __init__(self, ai):
        self.ai = ai

    def run_turn(self, context: InterviewContext, history: ConversationHistory,
                 candidate_utterance: str) -> TurnResult:
        interview_history = history.append(Turn(CANDIDATE, candidate_utterance))
        transcript = render_transcript(interview_history)
        phase = decide_phase(interview_history)
        logger.info("[INTERVIEW] phase=%s interviewer_turns=%d",
                    phase.value, count_interviewer_turns(interview_history))

        prompt = build_prompt(phase, context, transcript)
        # GenerationError propagates; nothing has been shared yet
        reply = self.ai.generate_text(prompt)

        return TurnResult(reply=reply, history=interview_history.append(Turn(INTERVIEWER, reply)))
