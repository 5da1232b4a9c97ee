import plotly.graph_objects as go

from microstates.enumerator import tabulate_microstates
from microstates.typing import format_ms
from microstates.visualize.style import (
    EMPTY_CELL_COLOR,
    FONT_SIZES,
    apply_chart_style,
    get_font_dict,
    get_plotly_colorscale,
)


def microstate_grid(n_electrons: int) -> tuple[list[int], list[int], list[list[int]]]:
    """
    Lays out the (ML, MS) microstate counts of a d^n configuration on a full grid.

    Args:
        n_electrons (int): Number of d electrons, 1 to 10.

    Returns:
        tuple: ``(ml_values, two_ms_values, counts)`` where ``ml_values`` runs from the
            largest ML down, ``two_ms_values`` runs from the most negative 2*MS up in steps
            of 2, and ``counts[i][j]`` is the number of microstates with ``ml_values[i]``
            and ``two_ms_values[j]`` (0 for empty cells).
    """
    table = tabulate_microstates(n_electrons)
    max_ml = max(abs(ml) for ml, _ in table)
    max_two_ms = max(abs(two_ms) for _, two_ms in table)

    ml_values = list(range(max_ml, -max_ml - 1, -1))
    two_ms_values = list(range(-max_two_ms, max_two_ms + 1, 2))
    counts = [[table.get((ml, two_ms), 0) for two_ms in two_ms_values] for ml in ml_values]
    return ml_values, two_ms_values, counts


def plot_microstate_table(n_electrons: int, title: str | None = None, colorscale: str = "Blues") -> go.Figure:
    """
    Plots the microstate chart (number of microstates per ML and MS) as a heatmap.

    Args:
        n_electrons (int): Number of d electrons, 1 to 10.
        title (str, optional): Figure title. Defaults to "d<n> microstates".
        colorscale (str, optional): Plotly sequential colorscale name. Defaults to "Blues".

    Returns:
        plotly.graph_objects.Figure: The generated Plotly figure.
    """
    ml_values, two_ms_values, counts = microstate_grid(n_electrons)
    ms_labels = [format_ms(two_ms) for two_ms in two_ms_values]
    cell_text = [[str(count) if count else "" for count in row] for row in counts]

    fig = go.Figure(
        go.Heatmap(
            z=counts,
            x=ms_labels,
            y=ml_values,
            text=cell_text,
            texttemplate="%{text}",
            textfont=get_font_dict(FONT_SIZES["cell_label"]),
            colorscale=get_plotly_colorscale(colorscale, zero=EMPTY_CELL_COLOR),
            colorbar=dict(title="Microstates"),
            hovertemplate="ML=%{y}<br>MS=%{x}<br>count=%{z}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title or f"d{n_electrons} microstates",
        xaxis_title="MS",
        yaxis_title="ML",
        height=max(400, 40 * len(ml_values) + 120),
    )
    fig.update_xaxes(type="category")
    apply_chart_style(fig)
    return fig
