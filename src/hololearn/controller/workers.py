"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling blocking tasks.

Why is this file needed?
------------------------
1. Responsiveness: A tutor request waits on the network. Run on the main
   thread it would freeze the animation, so it runs here instead.
2. Signals: Results travel back to the GUI thread through Qt Signals.

Classes:
    TutorWorker: Sends one question to the tutor.
"""
import logging

from PySide6.QtCore import QThread, Signal

from hololearn.controller.tutor import TutorClient, TutorError

logger = logging.getLogger(__name__)


class TutorWorker(QThread):
    answered = Signal(str)
    failed = Signal(str)

    def __init__(self, client: TutorClient, question: str, history: list[dict[str, str]]):
        super().__init__()
        self.client = client
        self.question = question
        self.history = history

    def run(self) -> None:
        try:
            logger.info(f"Asking tutor ({len(self.history)} messages of context)...")
            answer = self.client.ask(self.question, self.history)
        except TutorError as e:
            logger.error(f"Error in TutorWorker: {e}")
            self.failed.emit(str(e))
            return
        self.answered.emit(answer)
