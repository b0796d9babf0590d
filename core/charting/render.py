"""Chart renderers for the per-workout calories bar chart."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from ledger.records import WorkoutRecord

from .schema import DEFAULT_BAR_STYLE, BarChartStyle, ChartData, ChartPayload


class ChartRenderer(Protocol):
    """Capability interface for the chart collaborator."""

    def init(self, records: Sequence[WorkoutRecord]) -> None:
        """Create the chart from the given records."""

    def refresh(self, records: Sequence[WorkoutRecord]) -> None:
        """Replace the chart series with the given records and redraw."""


def series_from_records(records: Sequence[WorkoutRecord]) -> tuple[list[str], list[int]]:
    """Project records into parallel label/value lists (one bar per record)."""

    return [record.name for record in records], [record.calories for record in records]


class ChartJsBarRenderer:
    """Build a Chart.js bar chart config from ledger snapshots.

    The payload is consumed by the dashboard template via `json_script`; a
    redraw here means the payload was fully replaced.
    """

    def __init__(self, *, style: BarChartStyle = DEFAULT_BAR_STYLE) -> None:
        self.style = style
        self._payload: ChartPayload | None = None
        self.redraws = 0

    @property
    def initialized(self) -> bool:
        return self._payload is not None

    @property
    def payload(self) -> ChartPayload:
        """Return the current Chart.js config.

        Raises:
            RuntimeError: When the chart has not been initialized.
        """

        if self._payload is None:
            raise RuntimeError("Chart has not been initialized.")
        return self._payload

    @property
    def series_length(self) -> int:
        return len(self.payload["data"]["labels"])

    def init(self, records: Sequence[WorkoutRecord]) -> None:
        self._payload = {
            "type": "bar",
            "data": self._chart_data(records),
            "options": self._options(),
        }

    def refresh(self, records: Sequence[WorkoutRecord]) -> None:
        payload = self.payload
        labels, values = series_from_records(records)
        payload["data"]["labels"] = labels
        payload["data"]["datasets"][0]["data"] = values
        self.redraws += 1

    def _chart_data(self, records: Sequence[WorkoutRecord]) -> ChartData:
        labels, values = series_from_records(records)
        return {
            "labels": labels,
            "datasets": [
                {
                    "label": self.style.dataset_label,
                    "data": values,
                    "backgroundColor": self.style.background_color,
                    "borderColor": self.style.border_color,
                    "borderWidth": self.style.border_width,
                }
            ],
        }

    def _options(self) -> dict[str, Any]:
        return {
            "responsive": True,
            "scales": {
                "x": {"title": {"display": True, "text": self.style.x_title}},
                "y": {
                    "beginAtZero": True,
                    "title": {"display": True, "text": self.style.y_title},
                },
            },
        }
