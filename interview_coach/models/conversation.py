"""Conversation turns, the immutable history, and transcript rendering."""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

# Wire values used by the frontend for the two speakers
CANDIDATE = "user"
INTERVIEWER = "interviewer"

CANDIDATE_LABEL = "Candidate"
INTERVIEWER_LABEL = "Interviewer"


@dataclass(frozen=True)
class Turn:
    """One utterance, tagged with its speaker role."""
    role: str
    content: str

    @classmethod
    def from_dict(cls, data: dict) -> "Turn":
        # Roles are not validated; unknown ones render as the interviewer.
        # Values are kept as sent so the echoed history matches the caller's.
        role = data.get("role")
        content = data.get("content")
        return cls(role="" if role is None else role, content="" if content is None else content)

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


class ConversationHistory:
    """Ordered, append-only sequence of turns.

    Never mutated in place: ``append`` returns a new history with one more
    turn and leaves the receiver untouched.
    """

    __slots__ = ("_turns",)

    def __init__(self, turns: Iterable[Turn] = ()):
        self._turns = tuple(turns)

    @classmethod
    def from_list(cls, items: Optional[List[dict]]) -> "ConversationHistory":
        return cls(Turn.from_dict(item) for item in (items or []))

    def to_list(self) -> List[dict]:
        return [turn.to_dict() for turn in self._turns]

    def append(self, turn: Turn) -> "ConversationHistory":
        return ConversationHistory(self._turns + (turn,))

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self._turns)

    def __getitem__(self, index):
        return self._turns[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConversationHistory):
            return NotImplemented
        return self._turns == other._turns

    def __repr__(self) -> str:
        return f"ConversationHistory({list(self._turns)!r})"


def label_for(role: str) -> str:
    return CANDIDATE_LABEL if role == CANDIDATE else INTERVIEWER_LABEL


def render_transcript(history: ConversationHistory) -> str:
    """Flatten a history into ``Label: content`` lines, oldest first."""
    return "\n".join(f"{label_for(turn.role)}: {turn.content}" for turn in history)


def count_interviewer_turns(history: ConversationHistory) -> int:
    return sum(1 for turn in history if turn.role == INTERVIEWER)
