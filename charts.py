"""
Plotly figures for the FIFO visualizer.

Each builder takes snapshots from a trace and returns a ready-to-render
``go.Figure``; nothing here depends on Streamlit.
"""

import plotly.graph_objects as go           # Interactive plotting library
from typing import Dict, Sequence

from engine import StepSnapshot
from utils import cell_status, frame_label, get_color, result_label


def build_grid_figure(visible: Sequence[StepSnapshot], frame_count: int) -> go.Figure:
    """
    Build the reference grid: one column per visible reference.

    Rows are ``Frame 1`` .. ``Frame n`` followed by ``Result``. Only the
    last (current) column is color-coded and shows FIFO ranks.

    Args:
        visible (Sequence[StepSnapshot]): Snapshots revealed so far
        frame_count (int): Number of physical frames

    Returns:
        go.Figure: Figure holding a single ``go.Table`` trace
    """
    row_headers = [f"Frame {i + 1}" for i in range(frame_count)] + ["Result"]

    header = ["Page Reference"]
    columns = [row_headers]
    fills = [["#e8e8e8"] * len(row_headers)]

    for index, step in enumerate(visible):
        is_current = index == len(visible) - 1
        header.append(str(step.page_reference))

        cells = []
        colors = []
        for page in step.frames:
            rank = step.rank_of(page) if is_current else None
            cells.append(frame_label(page, rank))
            colors.append(get_color(cell_status(step, page, is_current)))

        # Result row
        cells.append(result_label(step))
        colors.append(get_color("fault" if step.is_fault else "hit"))

        columns.append(cells)
        fills.append(colors)

    fig = go.Figure(go.Table(
        header=dict(values=header, fill_color="#d0d0d0", align="center"),
        cells=dict(values=columns, fill_color=fills, align="center", height=30),
    ))
    fig.update_layout(
        height=80 + 32 * len(row_headers),
        margin=dict(l=0, r=0, t=10, b=0),
    )
    return fig


def build_frames_figure(step: StepSnapshot) -> go.Figure:
    """
    Bar chart of physical frames at one step, labeled with page and FIFO rank.
    """
    fig = go.Figure()

    x = []      # Frame numbers (1-based)
    y = []      # Bar heights (all 1 for uniform display)
    text = []   # Labels for each frame
    colors = []

    for frame_no, page in enumerate(step.frames):
        if page is None:
            label = f"F{frame_no + 1}: Free"
        else:
            label = f"F{frame_no + 1}: P{page} (rank {step.rank_of(page)})"
        text.append(label)
        colors.append(get_color(cell_status(step, page, is_current=True)))
        x.append(frame_no + 1)
        y.append(1)

    fig.add_trace(go.Bar(
        x=x,
        y=y,
        text=text,
        marker_color=colors,
        hovertext=text,
        hoverinfo='text'
    ))
    fig.update_layout(
        height=150,
        showlegend=False,
        yaxis=dict(showticklabels=False)
    )
    return fig


def build_hits_figure(summary: Dict[str, float]) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=["Hits", "Faults"],
        y=[summary["hits"], summary["faults"]],
        marker_color=[get_color("hit"), get_color("fault")],
    ))
    fig.update_layout(height=300, title="Hits vs Faults")
    return fig
