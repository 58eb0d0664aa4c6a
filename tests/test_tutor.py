"""Tests for the tutor conversation, client wrapper and worker."""

import logging
from unittest.mock import MagicMock

import pytest

from hololearn import config
from hololearn.controller import tutor
from hololearn.controller.tutor import (
    GREETING, SYSTEM_PROMPT, TUTOR_ERROR_MESSAGE,
    ChatMessage, TutorClient, TutorConversation, TutorError,
)
from hololearn.controller.workers import TutorWorker


@pytest.fixture
def fake_genai():
    """Stand-in for genai.Client whose chat answers with a fixed text."""
    client = MagicMock()
    client.chats.create.return_value.send_message.return_value.text = "Fringes are interference."
    return client


@pytest.fixture
def no_api_key(monkeypatch):
    for name in config.API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConversation:

    def test_starts_with_greeting(self):
        conversation = TutorConversation()
        assert conversation.messages == [ChatMessage("model", GREETING)]

    def test_history_excludes_new_question(self):
        conversation = TutorConversation()
        history = conversation.begin_turn("  What is a fringe?  ")

        assert history == [{"role": "model", "content": GREETING}]
        assert conversation.messages[-1] == ChatMessage("user", "What is a fringe?")

    def test_history_window_capped(self):
        conversation = TutorConversation()
        for i in range(8):
            conversation.begin_turn(f"question {i}")
            conversation.add_reply(f"answer {i}")

        history = conversation.begin_turn("one more")
        assert len(history) == 10
        assert history[-1] == {"role": "model", "content": "answer 7"}
        assert history[0] == {"role": "user", "content": "question 3"}

    def test_blank_question_rejected(self):
        with pytest.raises(ValueError):
            TutorConversation().begin_turn("   ")

    def test_failure_message_flagged(self):
        conversation = TutorConversation()
        message = conversation.add_failure()
        assert message.is_error
        assert message.content == TUTOR_ERROR_MESSAGE
        assert conversation.messages[-1] is message


class TestTutorClient:

    def test_ask_sends_history_and_prompt(self, fake_genai):
        client = TutorClient(client=fake_genai)
        answer = client.ask("Why off-axis?", [{"role": "model", "content": GREETING}])

        assert answer == "Fringes are interference."
        kwargs = fake_genai.chats.create.call_args.kwargs
        assert kwargs["model"] == config.TUTOR_MODEL
        assert kwargs["config"].system_instruction == SYSTEM_PROMPT
        assert kwargs["config"].temperature == pytest.approx(0.7)
        assert [c.role for c in kwargs["history"]] == ["model"]
        assert kwargs["history"][0].parts[0].text == GREETING
        fake_genai.chats.create.return_value.send_message.assert_called_once_with("Why off-axis?")

    def test_client_failure_wrapped(self, fake_genai, caplog):
        fake_genai.chats.create.side_effect = ConnectionError("network down")
        client = TutorClient(client=fake_genai)

        with caplog.at_level(logging.ERROR, logger="hololearn"):
            with pytest.raises(TutorError, match="network down"):
                client.ask("hello", [])
        assert "Tutor request failed" in caplog.text

    def test_empty_answer_is_an_error(self, fake_genai):
        fake_genai.chats.create.return_value.send_message.return_value.text = ""
        with pytest.raises(TutorError):
            TutorClient(client=fake_genai).ask("hello", [])

    def test_missing_api_key(self, no_api_key):
        with pytest.raises(TutorError, match="API key"):
            TutorClient().ask("hello", [])

    def test_module_level_ask_uses_shared_client(self, monkeypatch, fake_genai):
        monkeypatch.setattr(tutor, "_default_client", TutorClient(client=fake_genai))
        assert tutor.ask("hi", []) == "Fringes are interference."


class TestTutorWorker:

    def test_answer_emitted(self, qt_app, fake_genai):
        worker = TutorWorker(TutorClient(client=fake_genai), "hi", [])
        answers, failures = [], []
        worker.answered.connect(lambda text: answers.append(text))
        worker.failed.connect(lambda text: failures.append(text))

        worker.run()
        assert answers == ["Fringes are interference."]
        assert failures == []

    def test_failure_emitted(self, qt_app, fake_genai):
        fake_genai.chats.create.side_effect = RuntimeError("boom")
        worker = TutorWorker(TutorClient(client=fake_genai), "hi", [])
        failures = []
        worker.failed.connect(lambda text: failures.append(text))

        worker.run()
        assert failures == ["boom"]


class TestConfig:

    def test_api_key_lookup_order(self, no_api_key, monkeypatch):
        assert config.get_api_key() is None
        monkeypatch.setenv("API_KEY", "c")
        monkeypatch.setenv("GOOGLE_API_KEY", "b")
        assert config.get_api_key() == "b"
        monkeypatch.setenv("GEMINI_API_KEY", "a")
        assert config.get_api_key() == "a"

    @pytest.mark.parametrize("raw, expected", [
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("15", 15),
        ("nonsense", logging.INFO),
    ])
    def test_log_level(self, monkeypatch, raw, expected):
        monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, raw)
        assert config.get_log_level() == expected
