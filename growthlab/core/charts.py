"""Shape point sequences into the dataset records the chart components draw."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from pydantic import BaseModel

from growthlab.schemas.series import ChartDataset, ChartSeries


@dataclass(frozen=True)
class SeriesStyle:
    """How one numeric channel of a point is plotted."""

    channel: str
    label: str
    stroke: str
    fill_color: Optional[str] = None
    dashed: bool = False


GROWTH_STYLES: tuple[SeriesStyle, ...] = (
    SeriesStyle(channel="simple", label="Simple interest", stroke="#94a3b8", dashed=True),
    SeriesStyle(
        channel="compound",
        label="Compound interest",
        stroke="#2563eb",
        fill_color="rgba(37, 99, 235, 0.15)",
    ),
)

CONTRIBUTION_STYLES: tuple[SeriesStyle, ...] = (
    SeriesStyle(channel="total", label="Total balance", stroke="#16a34a"),
    SeriesStyle(
        channel="contributions",
        label="Contributions",
        stroke="#64748b",
        fill_color="rgba(100, 116, 139, 0.2)",
    ),
    SeriesStyle(
        channel="interest",
        label="Interest earned",
        stroke="#f59e0b",
        fill_color="rgba(245, 158, 11, 0.2)",
    ),
)

TIMING_STYLES: tuple[SeriesStyle, ...] = (
    SeriesStyle(channel="early", label="Start now", stroke="#2563eb"),
    SeriesStyle(channel="late", label="Start later", stroke="#dc2626", dashed=True),
)


def build_chart_series(
    points: Sequence[BaseModel], styles: Sequence[SeriesStyle]
) -> ChartSeries:
    """Return year labels plus one dataset per style, in style order."""
    datasets: list[ChartDataset] = []
    for style in styles:
        if points and style.channel not in type(points[0]).model_fields:
            raise ValueError(
                f"{type(points[0]).__name__} has no channel '{style.channel}'"
            )
        datasets.append(
            ChartDataset(
                label=style.label,
                values=[getattr(point, style.channel) for point in points],
                stroke=style.stroke,
                fill_color=style.fill_color,
                dashed=style.dashed,
            )
        )

    return ChartSeries(labels=[point.year for point in points], datasets=datasets)
