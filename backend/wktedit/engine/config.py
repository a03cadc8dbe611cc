"""Editor configuration: interaction tolerances and view limits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EditorConfig:
    """Tuning knobs for hit-testing and the viewport."""

    # Hit-test radius in model units
    hit_tolerance: float = 3.0

    # Zoom factor limits and the factor change per unit of zoom input
    zoom_min: float = 0.1
    zoom_max: float = 5.0
    zoom_step: float = 0.2
