"""
AI Tutor Tab
============
Chat with "Professor Hologram". Each question runs in a TutorWorker so the
animation keeps running while the model answers.
"""
from __future__ import annotations

import html
import logging
from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QTextBrowser, QLineEdit, QPushButton, QLabel

from hololearn.controller.tutor import ChatMessage, TutorClient, TutorConversation, USER_ROLE
from hololearn.controller.workers import TutorWorker

logger = logging.getLogger(__name__)

FOOTER = "Powered by Gemini 2.5 Flash. AI can make mistakes."
PLACEHOLDER = "Ask about coherence, interference, or setup details..."

BUBBLE_STYLES = {
    "user": "background:#1e3a5f; color:#dbeafe;",
    "model": "background:#374151; color:#e5e7eb;",
    "error": "background:#450a0a; color:#fecaca;",
}


def message_html(message: ChatMessage) -> str:
    if message.is_error:
        style = BUBBLE_STYLES["error"]
    else:
        style = BUBBLE_STYLES.get(message.role, BUBBLE_STYLES["model"])
    align = "right" if message.role == USER_ROLE else "left"
    who = "You" if message.role == USER_ROLE else "Professor Hologram"
    text = html.escape(message.content).replace("\n", "<br>")
    return (
        f'<table width="100%"><tr><td align="{align}">'
        f'<div style="{style} padding:8px;"><b>{who}</b><br>{text}</div>'
        f'</td></tr></table>'
    )


class TutorView(QWidget):
    def __init__(
        self,
        client: Optional[TutorClient] = None,
        conversation: Optional[TutorConversation] = None,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.client = client or TutorClient()
        self.conversation = conversation or TutorConversation()
        self._worker: Optional[TutorWorker] = None

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("<h2>AI Optics Tutor</h2>", self))

        self.transcript = QTextBrowser(self)
        self.transcript.setOpenExternalLinks(False)
        layout.addWidget(self.transcript, 1)

        row = QHBoxLayout()
        self.input = QLineEdit(self)
        self.input.setPlaceholderText(PLACEHOLDER)
        self.input.textChanged.connect(self._update_send_enabled)
        self.input.returnPressed.connect(self.send)
        row.addWidget(self.input, 1)

        self.send_button = QPushButton("Send", self)
        self.send_button.clicked.connect(self.send)
        row.addWidget(self.send_button)
        layout.addLayout(row)

        self.status = QLabel(FOOTER, self)
        layout.addWidget(self.status)

        self._render_transcript()
        self._update_send_enabled()

    @property
    def is_busy(self) -> bool:
        return self._worker is not None

    def _render_transcript(self) -> None:
        self.transcript.setHtml("".join(message_html(m) for m in self.conversation.messages))
        bar = self.transcript.verticalScrollBar()
        bar.setValue(bar.maximum())

    def _update_send_enabled(self) -> None:
        self.send_button.setEnabled(not self.is_busy and bool(self.input.text().strip()))

    @Slot()
    def send(self) -> None:
        question = self.input.text().strip()
        if self.is_busy or not question:
            return

        history = self.conversation.begin_turn(question)
        self.input.clear()
        self._render_transcript()

        self._worker = TutorWorker(self.client, question, history)
        self._worker.answered.connect(self._on_answered)
        self._worker.failed.connect(self._on_failed)
        self._worker.finished.connect(self._on_worker_finished)
        self._update_send_enabled()
        self.status.setText("Professor Hologram is thinking...")
        self._worker.start()

    @Slot(str)
    def _on_answered(self, text: str) -> None:
        self.conversation.add_reply(text)
        self._render_transcript()

    @Slot(str)
    def _on_failed(self, reason: str) -> None:
        logger.warning(f"Tutor request failed: {reason}")
        self.conversation.add_failure()
        self._render_transcript()

    @Slot()
    def _on_worker_finished(self) -> None:
        if self._worker is not None:
            self._worker.deleteLater()
        self._worker = None
        self.status.setText(FOOTER)
        self._update_send_enabled()

    def shutdown(self) -> None:
        """Wait for an in-flight request so the thread is not destroyed while running."""
        if self._worker is not None:
            self._worker.wait()
