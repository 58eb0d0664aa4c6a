"""Tests for the static text the views display."""

import numpy as np
import pytest

from hololearn.controller.tutor import ChatMessage, TUTOR_ERROR_MESSAGE
from hololearn.model.parameters import HolographyMode
from hololearn.view.tabs.tab_reconstruction import explanation_html
from hololearn.view.tabs.tab_theory import theory_html, TITLES
from hololearn.view.tabs.tab_tutor import message_html, BUBBLE_STYLES
from hololearn.view.widgets.field_canvas import to_qimage


class TestTheoryText:

    @pytest.mark.parametrize("mode", list(HolographyMode))
    def test_title_and_fact_present(self, mode):
        text = theory_html(mode)
        assert TITLES[mode] in text
        assert "Did you know?" in text

    def test_inline_mentions_twin_images(self):
        assert "Twin Images" in theory_html(HolographyMode.CO_LINEAR)
        assert "carrier frequency" in theory_html(HolographyMode.ANGULAR_OFFSET)


class TestReconstructionText:

    def test_mode_specific_paragraph(self):
        assert "overlap" in explanation_html(HolographyMode.CO_LINEAR)
        assert "Leith &amp; Upatnieks" in explanation_html(HolographyMode.ANGULAR_OFFSET)


class TestChatBubbles:

    def test_user_text_escaped_and_right_aligned(self):
        rendered = message_html(ChatMessage("user", "<b>hi</b>"))
        assert "&lt;b&gt;hi&lt;/b&gt;" in rendered
        assert 'align="right"' in rendered

    def test_error_bubble_style(self):
        rendered = message_html(ChatMessage("model", TUTOR_ERROR_MESSAGE, is_error=True))
        assert BUBBLE_STYLES["error"] in rendered


class TestImageConversion:

    def test_rgba_array_becomes_qimage(self):
        rgba = np.zeros((4, 6, 4), dtype=np.uint8)
        rgba[..., 1] = 200
        rgba[..., 3] = 255
        image = to_qimage(rgba)
        assert (image.width(), image.height()) == (6, 4)
        assert image.pixelColor(2, 1).green() == 200

    def test_rejects_rgb(self):
        with pytest.raises(ValueError):
            to_qimage(np.zeros((4, 6, 3), dtype=np.uint8))
