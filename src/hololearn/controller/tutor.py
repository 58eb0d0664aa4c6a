"""
AI Optics Tutor
===============
Conversation state and the generative-model client behind the tutor tab.

Classes:
    ChatMessage: One message in the conversation.
    TutorConversation: Message list plus the history window sent with a question.
    TutorClient: Sends one question (with history) to the model.
    TutorError: Raised for any failure while talking to the model.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from hololearn.config import TUTOR_HISTORY_WINDOW, TUTOR_MODEL, TUTOR_TEMPERATURE, get_api_key

logger = logging.getLogger(__name__)

USER_ROLE = "user"
MODEL_ROLE = "model"

SYSTEM_PROMPT = (
    "You are Professor Hologram, a world-class expert in optics, wave physics, and holography.\n"
    "Your goal is to explain concepts like interference, diffraction, wavefronts, the Gabor limit, "
    "and off-axis separation to students.\n"
    "Keep explanations clear, concise, and engaging. Use analogies.\n"
    "If the user asks about \"Inline\" or \"Gabor\" holography, mention the twin-image problem.\n"
    "If they ask about \"Off-axis\" or \"Leith-Upatnieks\", explain how the carrier frequency "
    "separates the orders.\n"
    "Do not use LaTeX formatting heavily, use plain text or simple unicode characters for math "
    "where possible."
)

GREETING = (
    "Hello! I'm Professor Hologram. Ask me anything about how holograms work, the physics of "
    "light, or the difference between Gabor and Leith-Upatnieks setups!"
)

TUTOR_ERROR_MESSAGE = "I encountered an error connecting to my optical neural network."


class TutorError(RuntimeError):
    """The tutor could not produce an answer."""


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str
    is_error: bool = False

    def as_history(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class TutorConversation:
    """
    Ordered chat transcript, starting with the tutor's greeting.

    `begin_turn` snapshots the history window *before* appending the new
    question, so the question itself is sent separately from its context.
    """
    messages: list[ChatMessage] = field(
        default_factory=lambda: [ChatMessage(MODEL_ROLE, GREETING)]
    )
    window: int = TUTOR_HISTORY_WINDOW

    def history_window(self) -> list[dict[str, str]]:
        """The last `window` messages as {role, content} dicts."""
        recent = self.messages[-self.window:] if self.window > 0 else []
        return [message.as_history() for message in recent]

    def begin_turn(self, question: str) -> list[dict[str, str]]:
        question = question.strip()
        if not question:
            raise ValueError("Question must not be empty.")
        history = self.history_window()
        self.messages.append(ChatMessage(USER_ROLE, question))
        return history

    def add_reply(self, text: str) -> ChatMessage:
        message = ChatMessage(MODEL_ROLE, text)
        self.messages.append(message)
        return message

    def add_failure(self) -> ChatMessage:
        message = ChatMessage(MODEL_ROLE, TUTOR_ERROR_MESSAGE, is_error=True)
        self.messages.append(message)
        return message


class TutorClient:
    """
    Thin wrapper around a google-genai chat session.

    The underlying `genai.Client` is created on first use so the app starts
    without an API key; asking without one raises TutorError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = TUTOR_MODEL,
        temperature: float = TUTOR_TEMPERATURE,
        client: Any = None
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = self.api_key or get_api_key()
            if not api_key:
                raise TutorError("No API key configured for the tutor.")
            self._client = genai.Client(api_key=api_key)
        return self._client

    def ask(self, question: str, history: list[dict[str, str]]) -> str:
        """
        Ask one question with prior conversation context.

        Args:
            question: The user's question.
            history: Up to TUTOR_HISTORY_WINDOW prior {role, content} messages.

        Returns:
            The model's answer text.

        Raises:
            TutorError: On any client, network or empty-response failure.
        """
        try:
            chat = self._get_client().chats.create(
                model=self.model,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    temperature=self.temperature,
                ),
                history=[
                    types.Content(role=item["role"], parts=[types.Part(text=item["content"])])
                    for item in history
                ],
            )
            response = chat.send_message(question)
        except TutorError:
            raise
        except Exception as e:
            logger.exception(f"Tutor request failed: {e}")
            raise TutorError(str(e)) from e

        text = getattr(response, "text", None)
        if not text:
            logger.error("Tutor returned an empty response.")
            raise TutorError("Empty response from the model.")
        return text


_default_client: Optional[TutorClient] = None


def ask(question: str, history: list[dict[str, str]]) -> str:
    """Ask using a shared, lazily created TutorClient."""
    global _default_client
    if _default_client is None:
        _default_client = TutorClient()
    return _default_client.ask(question, history)
