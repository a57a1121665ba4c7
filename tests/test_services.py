import base64
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
from google.genai.errors import ClientError, ServerError

from interview_coach.models.conversation import CANDIDATE, INTERVIEWER, ConversationHistory, Turn
from interview_coach.models.interview_state import InterviewContext
from interview_coach.services.ai_service import AIService, GenerationError
from interview_coach.services.background_service import BackgroundService
from interview_coach.services.interview_service import InterviewService

from tests.fakes import FakeAI, alternating_history


def _image_response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def _inline(data):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="image/png"), text=None)


class TestInterviewService(unittest.TestCase):

    def setUp(self):
        self.ctx = InterviewContext(job_title="Mechanic", candidate_name="Sam")

    def test_run_turn_appends_candidate_then_interviewer(self):
        ai = FakeAI(reply="Welcome Sam I am Tina from Turners Cars. Tell us about yourself")
        history = ConversationHistory.from_list(alternating_history(2))

        result = InterviewService(ai).run_turn(self.ctx, history, "I fix engines")

        self.assertEqual(len(result.history), len(history) + 2)
        self.assertEqual(list(result.history)[:len(history)], list(history))
        self.assertEqual(result.history[-2], Turn(CANDIDATE, "I fix engines"))
        self.assertEqual(result.history[-1], Turn(INTERVIEWER, ai.reply))
        self.assertEqual(result.reply, ai.reply)
        self.assertEqual(len(history), 4)

    def test_prompt_includes_latest_utterance(self):
        ai = FakeAI()
        InterviewService(ai).run_turn(self.ctx, ConversationHistory(), "Hi")
        self.assertEqual(len(ai.text_prompts), 1)
        self.assertIn("Conversation so far:\n\nCandidate: Hi\n\nContinue as Tina.", ai.text_prompts[0])

    def test_sixth_interviewer_turn_switches_to_feedback(self):
        ai = FakeAI(reply="Great job overall.")
        history = ConversationHistory.from_list(alternating_history(6))

        InterviewService(ai).run_turn(self.ctx, history, "That's all from me")

        prompt = ai.text_prompts[0]
        self.assertNotIn("Continue as Tina.", prompt)
        self.assertNotIn("Welcome Sam I am Tina", prompt)
        self.assertTrue(prompt.endswith("Candidate: That's all from me"))

    def test_generation_failure_propagates(self):
        history = ConversationHistory()
        with self.assertRaises(GenerationError):
            InterviewService(FakeAI(fail=True)).run_turn(self.ctx, history, "Hi")
        self.assertEqual(len(history), 0)


class TestBackgroundService(unittest.TestCase):

    def test_returns_png_data_uri(self):
        ai = FakeAI(image="QUJD")
        url = BackgroundService(ai).generate_background("Mechanic")
        self.assertEqual(url, "data:image/png;base64,QUJD")
        self.assertIn("Mechanic", ai.image_prompts[0])


class TestAIService(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.generate = self.client.models.generate_content
        self.ai = AIService(self.client, text_model="text-model", image_model="image-model",
                            timeout_sec=12, max_retries=1, backoff_sec=0)

    def test_generate_text_strips_reply_and_sets_timeout(self):
        self.generate.return_value = SimpleNamespace(text="  Hello Sam  ")

        self.assertEqual(self.ai.generate_text("prompt"), "Hello Sam")

        kwargs = self.generate.call_args.kwargs
        self.assertEqual(kwargs["model"], "text-model")
        self.assertEqual(kwargs["contents"], "prompt")
        self.assertEqual(kwargs["config"].http_options.timeout, 12000)

    def test_empty_text_is_generation_error(self):
        self.generate.return_value = SimpleNamespace(text="")
        with self.assertRaises(GenerationError):
            self.ai.generate_text("prompt")

    def test_transient_server_error_retried_once(self):
        error = ServerError(503, {"error": {"code": 503, "message": "unavailable", "status": "UNAVAILABLE"}})
        self.generate.side_effect = [error, SimpleNamespace(text="ok")]

        self.assertEqual(self.ai.generate_text("prompt"), "ok")
        self.assertEqual(self.generate.call_count, 2)

    def test_timeout_retried_then_gives_up(self):
        self.generate.side_effect = httpx.ReadTimeout("slow")

        with self.assertRaises(GenerationError):
            self.ai.generate_text("prompt")
        self.assertEqual(self.generate.call_count, 2)

    def test_quota_error_is_transient(self):
        error = ClientError(429, {"error": {"code": 429, "message": "quota", "status": "RESOURCE_EXHAUSTED"}})
        self.generate.side_effect = [error, SimpleNamespace(text="ok")]
        self.assertEqual(self.ai.generate_text("prompt"), "ok")

    def test_non_transient_error_not_retried(self):
        error = ClientError(400, {"error": {"code": 400, "message": "bad", "status": "INVALID_ARGUMENT"}})
        self.generate.side_effect = error

        with self.assertRaises(GenerationError):
            self.ai.generate_text("prompt")
        self.assertEqual(self.generate.call_count, 1)

    def test_generate_image_returns_first_inline_payload(self):
        text_part = SimpleNamespace(inline_data=None, text="here you go")
        self.generate.return_value = _image_response(text_part, _inline(b"PNG1"), _inline(b"PNG2"))

        self.assertEqual(self.ai.generate_image("prompt"), base64.b64encode(b"PNG1").decode("ascii"))

        kwargs = self.generate.call_args.kwargs
        self.assertEqual(kwargs["model"], "image-model")
        self.assertIn("IMAGE", kwargs["config"].response_modalities)

    def test_generate_image_without_inline_data_fails(self):
        self.generate.return_value = _image_response(SimpleNamespace(inline_data=None, text="sorry"))
        with self.assertRaises(GenerationError):
            self.ai.generate_image("prompt")

    def test_generate_image_without_candidates_fails(self):
        self.generate.return_value = SimpleNamespace(candidates=None)
        with self.assertRaises(GenerationError):
            self.ai.generate_image("prompt")

    @patch('interview_coach.services.ai_service.settings')
    def test_from_settings_requires_api_key(self, mock_settings):
        mock_settings.validate_config.side_effect = RuntimeError("no key")
        with self.assertRaises(RuntimeError):
            AIService.from_settings()


if __name__ == '__main__':
    unittest.main()
