import base64
from typing import List, Optional, Sequence

import cv2
import numpy as np

from app.main.sequence_solver.config import HIT_GROUP
from app.main.sequence_solver.models import SolverResult


# Badge categories and their colors (hex, used by the template legend)
BADGE_COLORS = {
    'hit': '#e11d48',  # Rose
    'positive': '#059669',  # Emerald
    'negative': '#475569',  # Slate
}


def format_value(value: int) -> str:
    """Signed label: +7, -3, 0."""
    return f"+{value}" if value > 0 else str(value)


def badge_category(value: int, is_hit: Optional[bool] = None,
                   hit_group: Sequence[int] = HIT_GROUP) -> str:
    """Badge color category of a value. An explicit is_hit overrides the membership check."""
    show_as_hit = is_hit if is_hit is not None else value in hit_group
    if show_as_hit:
        return 'hit'
    if value > 0:
        return 'positive'
    return 'negative'


def badges(values: Sequence[int], is_hit: Optional[bool] = None) -> List[dict]:
    """Badge descriptors for a row of values."""
    return [{'value': v, 'label': format_value(v), 'category': badge_category(v, is_hit)}
            for v in values]


class SequenceVisualizer:
    """Renders the cumulative-sum progression of a solution as a line chart."""

    # BGR colors
    BACKGROUND = (255, 255, 255)
    GRID = (240, 232, 226)
    AXIS = (139, 116, 100)
    LINE = (229, 70, 79)
    TARGET = (68, 68, 239)
    LABEL = (139, 116, 100)

    def __init__(self, width: int = 800, height: int = 360, margin: int = 50):
        self.width = width
        self.height = height
        self.margin = margin

    def render_chart(self, result: SolverResult, target: int) -> np.ndarray:
        """
        Draw the chart.

        Args:
            result: Solver result (found or not)
            target: Target sum, drawn as dashed reference line

        Returns:
            BGR image of shape (height, width, 3), dtype uint8
        """
        img = np.full((self.height, self.width, 3), self.BACKGROUND, dtype=np.uint8)

        if not result.found or not result.cumulative_steps:
            cv2.putText(img, 'No solution', (self.width // 2 - 80, self.height // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, self.AXIS, 2, cv2.LINE_AA)
            return img

        steps = np.array([s.step for s in result.cumulative_steps], dtype=float)
        sums = np.array([s.sum for s in result.cumulative_steps], dtype=float)

        y_min = min(sums.min(), 0.0, float(target))
        y_max = max(sums.max(), 0.0, float(target))
        if y_max == y_min:
            y_max += 1.0
        pad = 0.1 * (y_max - y_min)
        y_min -= pad
        y_max += pad
        x_max = max(steps.max(), 1.0)

        def to_px(x: float, y: float) -> tuple:
            left, right = self.margin, self.width - self.margin
            top, bottom = self.margin, self.height - self.margin
            px = left + (x / x_max) * (right - left)
            py = bottom - (y - y_min) / (y_max - y_min) * (bottom - top)
            return int(round(px)), int(round(py))

        # Horizontal grid
        for y in np.linspace(y_min, y_max, 5):
            p1, p2 = to_px(0, y), to_px(x_max, y)
            self._draw_dashed_line(img, p1, p2, self.GRID, 1)
            cv2.putText(img, f"{y:.0f}", (5, p1[1] + 4),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, self.LABEL, 1, cv2.LINE_AA)

        # Zero and target reference lines
        cv2.line(img, to_px(0, 0), to_px(x_max, 0), self.AXIS, 1)
        t1, t2 = to_px(0, target), to_px(x_max, target)
        self._draw_dashed_line(img, t1, t2, self.TARGET, 1)
        cv2.putText(img, 'Target', (t2[0] - 45, t2[1] - 6),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.4, self.TARGET, 1, cv2.LINE_AA)

        points = np.array([to_px(x, y) for x, y in zip(steps, sums)], dtype=np.int32)
        cv2.polylines(img, [points.reshape(-1, 1, 2)], False, self.LINE, 3, cv2.LINE_AA)

        for point, step in zip(points, result.cumulative_steps):
            center = (int(point[0]), int(point[1]))
            cv2.circle(img, center, 5, (255, 255, 255), -1, cv2.LINE_AA)
            cv2.circle(img, center, 4, self.LINE, -1, cv2.LINE_AA)
            if step.value != 0:
                cv2.putText(img, format_value(step.value), (center[0] - 10, center[1] - 10),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.4, self.LABEL, 1, cv2.LINE_AA)

        # Step ticks
        for step in result.cumulative_steps:
            x, y = to_px(step.step, y_min)
            cv2.putText(img, str(step.step), (x - 4, y + 18),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, self.LABEL, 1, cv2.LINE_AA)

        return img

    def chart_png_base64(self, result: SolverResult, target: int) -> str:
        """Chart encoded as base64 PNG (for JSON responses)."""
        img = self.render_chart(result, target)
        ok, buffer = cv2.imencode('.png', img)
        if not ok:
            raise RuntimeError('Failed to encode chart as PNG')
        return base64.b64encode(buffer.tobytes()).decode('ascii')

    @staticmethod
    def _draw_dashed_line(img: np.ndarray, p1: tuple, p2: tuple, color: tuple,
                          thickness: int, dash: int = 6):
        length = int(np.hypot(p2[0] - p1[0], p2[1] - p1[1]))
        if length == 0:
            return
        for start in range(0, length, dash * 2):
            end = min(start + dash, length)
            a = (int(p1[0] + (p2[0] - p1[0]) * start / length),
                 int(p1[1] + (p2[1] - p1[1]) * start / length))
            b = (int(p1[0] + (p2[0] - p1[0]) * end / length),
                 int(p1[1] + (p2[1] - p1[1]) * end / length))
            cv2.line(img, a, b, color, thickness)
