"""
Theory Tab
==========
Static, mode-dependent background on inline and off-axis holography.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QScrollArea

from hololearn.model.parameters import ExperimentParameters, HolographyMode

TITLES: dict[HolographyMode, str] = {
    HolographyMode.CO_LINEAR: "Inline (Gabor) Holography",
    HolographyMode.ANGULAR_OFFSET: "Off-axis (Leith-Upatnieks) Holography",
}

BODIES: dict[HolographyMode, str] = {
    HolographyMode.CO_LINEAR: """
<p>Proposed by Dennis Gabor in 1948, <b>Inline Holography</b> was the first type of holography
invented. It is often referred to as "Gabor Holography".</p>
<h3>The Setup</h3>
<p>A single laser beam serves as both the reference and the illumination for the object. The
object (usually semi-transparent) is placed in the path of the beam. The scattered light (Object
Wave <b>O</b>) interferes with the unscattered background light (Reference Wave <b>R</b>) directly
on the photographic plate.</p>
<pre>I = |R + O|² = |R|² + |O|² + R*O + RO*</pre>
<h3>The Problem: Twin Images</h3>
<p>Because the reference and object waves travel along the same axis, the reconstruction produces
two overlapping images: the <b>Virtual Image</b> (the one you want to see) and the <b>Real
Image</b> (which appears inverted). Looking at the hologram is like looking through a distorted
window because the "twin" image overlaps directly with the true image.</p>
""",
    HolographyMode.ANGULAR_OFFSET: """
<p>In the early 1960s, Emmett Leith and Juris Upatnieks applied communication theory to holography
and invented <b>Off-axis Holography</b>, solving Gabor's twin-image problem.</p>
<h3>The Setup</h3>
<p>The laser beam is split into two separate paths:</p>
<ul>
<li><b>Object Beam:</b> Illuminates the object.</li>
<li><b>Reference Beam:</b> Bypasses the object and hits the plate at an angle <b>θ</b>.</li>
</ul>
<p>This angle creates a "carrier frequency" in the interference pattern.</p>
<pre>Ref Wave: R = A·exp(i·k·y·sin(θ))</pre>
<h3>The Solution</h3>
<p>During reconstruction, the diffraction grating formed by the interference pattern steers the
different terms in different directions. The <b>Real Image</b>, <b>Virtual Image</b>, and the
<b>Zero Order</b> (direct beam) are spatially separated. You can view the clear, 3D virtual image
without obstruction.</p>
""",
}

FACTS: dict[HolographyMode, str] = {
    HolographyMode.CO_LINEAR: (
        "Gabor originally invented holography to improve the resolution of electron microscopes, "
        "not for 3D visual art!"
    ),
    HolographyMode.ANGULAR_OFFSET: (
        "Leith and Upatnieks used the newly invented laser (1960) for their experiments. Gabor had "
        "to use a mercury arc lamp with a pinhole, which had very poor coherence."
    ),
}


def theory_html(mode: HolographyMode) -> str:
    mode = HolographyMode(mode)
    return (
        f"<h2>{TITLES[mode]}</h2>"
        f"{BODIES[mode]}"
        f"<h4>Did you know?</h4><p><i>{FACTS[mode]}</i></p>"
    )


class TheoryView(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._mode: HolographyMode | None = None

        layout = QVBoxLayout(self)
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        self.text = QLabel(scroll)
        self.text.setWordWrap(True)
        self.text.setTextFormat(Qt.TextFormat.RichText)
        self.text.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.text.setMargin(12)
        scroll.setWidget(self.text)
        layout.addWidget(scroll)

    @Slot(object)
    def on_parameters_changed(self, params: ExperimentParameters) -> None:
        if params.mode != self._mode:
            self._mode = params.mode
            self.text.setText(theory_html(params.mode))
