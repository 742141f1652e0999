"""Progress gauge leaf with a stylable ``filled`` sub-part."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional

from rich.cells import cell_len
from rich.style import Style

from termtree.element.styled import StyledElement
from termtree.layout.rect import Rect
from termtree.style import EMPTY_STYLE, patch

if TYPE_CHECKING:
    from termtree.element.context import RenderContext
    from termtree.terminal.frame import Frame

__all__ = ["GaugeElement"]

DEFAULT_FILLED_STYLE = Style(reverse=True)


class GaugeElement(StyledElement):
    """
    Horizontal progress bar.

    The filled portion is styled by ``filled_style`` when given, otherwise by
    the ``{Type}-filled`` stylesheet rule, otherwise in reverse video. A label
    (the percentage by default) is centred on the middle row and exposed to
    the cascade as the ``label`` attribute.
    """

    def __init__(
        self,
        ratio: float = 0.0,
        *,
        label: Optional[str] = None,
        filled_style: Optional[Style] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._ratio = 0.0
        self.ratio(ratio)
        self._label = label
        self._filled_style = filled_style or EMPTY_STYLE

    def ratio(self, value: float) -> "GaugeElement":
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Gauge ratio must be within [0, 1], got {value}")
        self._ratio = value
        return self

    def percent_value(self, value: int) -> "GaugeElement":
        return self.ratio(value / 100)

    @property
    def value(self) -> float:
        return self._ratio

    def label(self, text: Optional[str]) -> "GaugeElement":
        self._label = text
        return self

    def filled_style(self, style: Optional[Style]) -> "GaugeElement":
        self._filled_style = style or EMPTY_STYLE
        return self

    def display_label(self) -> str:
        if self._label is not None:
            return self._label
        return f"{round(self._ratio * 100)}%"

    def extra_style_attributes(self) -> Mapping[str, str]:
        return {"label": self.display_label()}

    def preferred_width(self) -> int:
        return cell_len(self.display_label())

    def preferred_height(self) -> int:
        return 1

    def render_content(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        base = context.current_style()
        filled = self.resolve_effective_style(
            context, "filled", self._filled_style, patch(base, DEFAULT_FILLED_STYLE)
        )
        filled_width = round(area.width * self._ratio)
        frame.buffer.fill(area, " ", base)
        if filled_width:
            frame.buffer.fill(Rect(area.x, area.y, filled_width, area.height), " ", filled)

        label = self.display_label()
        label_x = area.x + max(0, (area.width - cell_len(label)) // 2)
        label_y = area.y + area.height // 2
        column = frame.buffer.set_string(label_x, label_y, label, base, max_width=area.right - label_x)
        # Label cells over the filled portion keep the filled style.
        filled_right = area.x + filled_width
        for x in range(label_x, min(column, filled_right)):
            cell = frame.buffer.get(x, label_y)
            cell.style = cell.style + filled
