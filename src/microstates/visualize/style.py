"""
Styling for microstate chart figures.
"""

from typing import Any

import plotly.colors
import plotly.graph_objects as go

# -----------------------------------------------------------------------------
# Style parameters
# -----------------------------------------------------------------------------


FONT_FAMILY = "Helvetica"
FONT_COLOR = "#333333"

FONT_SIZES: dict[str, int] = {
    "title": 20,
    "axis_title": 16,
    "tick_label": 14,
    "cell_label": 13,
}

AXIS_STYLE: dict[str, Any] = {
    "showgrid": False,
    "zeroline": False,
    "linewidth": 2,
    "linecolor": "#333333",
    "mirror": True,
    "dtick": 1,
}

LAYOUT_STYLE: dict[str, Any] = {
    "plot_bgcolor": "#FBFCFF",
    "paper_bgcolor": "#FBFCFF",
    "margin": dict(t=60, b=40, r=40),
}

# Colour of cells that hold no microstates
EMPTY_CELL_COLOR = "#FFFFFF"

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def get_plotly_colorscale(label: str, zero: str | None = None) -> str | list[str]:
    """Get a Plotly sequential colorscale, optionally overriding its lowest colour.

    Args:
        label: Name of the Plotly sequential colorscale
        zero: Optional color for the bottom of the scale (empty cells)

    Returns:
        Either the colorscale name or a modified list of colors
    """
    if zero is None:
        return label
    colorscale = list(getattr(plotly.colors.sequential, label))
    colorscale[0] = zero
    return list(map(str, colorscale))


def get_font_dict(size: int, bold: bool = False) -> dict[str, Any]:
    """Font dictionary shared by titles, ticks and cell labels."""
    return dict(
        family=FONT_FAMILY,
        size=size,
        color=FONT_COLOR,
        weight="bold" if bold else None,
    )


def apply_chart_style(fig: go.Figure, **kwargs: Any) -> None:
    """Apply fonts, axis and layout styling to a microstate chart.

    Args:
        fig: A plotly figure
        **kwargs: Additional layout parameters to override defaults
    """
    fig.update_layout(font=get_font_dict(FONT_SIZES["tick_label"]))
    if fig.layout.title is not None:
        fig.layout.title.update(font=get_font_dict(FONT_SIZES["title"], bold=True))

    for axis in (fig.layout.xaxis, fig.layout.yaxis):
        axis.update(
            AXIS_STYLE,
            title_font=get_font_dict(FONT_SIZES["axis_title"], bold=True),
            tickfont=get_font_dict(FONT_SIZES["tick_label"]),
        )

    layout_style: dict[str, Any] = LAYOUT_STYLE.copy()
    layout_style.update(kwargs)
    fig.update_layout(layout_style)
