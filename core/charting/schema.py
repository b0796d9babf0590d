"""Schema types for Chart.js payloads rendered on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypedDict

ChartType = Literal["bar"]


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload."""

    label: str
    data: list[int]
    backgroundColor: str
    borderColor: str
    borderWidth: int


class ChartData(TypedDict):
    """Chart.js `data` block (labels + datasets)."""

    labels: list[str]
    datasets: list[ChartDataset]


class ChartPayload(TypedDict):
    """Full Chart.js config passed to `new Chart(ctx, payload)`."""

    type: ChartType
    data: ChartData
    options: dict[str, Any]


@dataclass(frozen=True, slots=True)
class BarChartStyle:
    """Presentation settings for the calories bar chart.

    Args:
        dataset_label: Legend label for the single dataset.
        background_color: Bar fill color.
        border_color: Bar border color.
        border_width: Bar border width in pixels.
        x_title: X-axis title.
        y_title: Y-axis title.
    """

    dataset_label: str = "Calories Burned"
    background_color: str = "rgba(39, 174, 96, 0.6)"
    border_color: str = "rgba(39, 174, 96, 1)"
    border_width: int = 1
    x_title: str = "Workout"
    y_title: str = "Calories Burned"


DEFAULT_BAR_STYLE = BarChartStyle()
