"""
FIFO Page Replacement Visualizer

This application provides an interactive, step-by-step visualization of the
FIFO (First-In-First-Out) page replacement algorithm:
    - Enter a page reference string and a frame count
    - Simulate the whole run once
    - Step forwards and backwards through the memory snapshots

Built with Streamlit for the web interface and Plotly for visualizations.
The FIFO logic itself lives in engine.py; this file only renders it.
"""

# =============================================================================
# IMPORTS
# =============================================================================

import streamlit as st                       # Web application framework

from charts import build_frames_figure, build_grid_figure, build_hits_figure
from engine import MAX_FRAMES, MAX_REFERENCES, MIN_FRAMES, simulate
from playback import (
    describe_step,
    event_log,
    is_complete,
    last,
    next_index,
    previous_index,
    summarize,
    visible_steps,
)
from validation import ValidationError, validate

DEFAULT_REFERENCE_STRING = "1, 9, 3, 5, 6, 3, 2, 6"
DEFAULT_FRAME_COUNT = 3


# Configure the Streamlit page
st.set_page_config(page_title="FIFO Page Replacement Simulator", layout="wide")

# -----------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -----------------------------------------------------------------------------

view = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("FIFO Page Replacement Simulator")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if view == "Concepts":
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ### **1. Frames and Pages**
        - Physical memory is split into fixed-size *frames*; each frame holds one *page*.

        ### **2. Page Fault**
        - A reference to a page that is not resident in any frame.
        - The OS loads the page into a free frame, or evicts a resident page first.

        ### **3. FIFO (First In First Out)**
        - On a fault with no free frame, evict the page that has been resident the longest.
        - The load order works like a queue: new pages join at the back, the victim leaves from the front.
        - The small number shown next to a page in the current column is its FIFO rank (1 = next victim).

        ### **4. Belady's Anomaly**
        - Under FIFO, adding frames can *increase* the number of faults.
        - `1,2,3,4,1,2,5,1,2,3,4,5` gives 9 faults with 3 frames and 10 faults with 4 frames.
        """
    )
    st.stop()  # Don't show the simulator on the Concepts page

# -----------------------------------------------------------------------------
# SESSION STATE - Trace and Playback Position
# -----------------------------------------------------------------------------

if 'trace' not in st.session_state:
    st.session_state.trace = None
    st.session_state.step_index = -1
    st.session_state.validation_error = ""


# -----------------------------------------------------------------------------
# CALLBACKS - Playback and input state changes
# -----------------------------------------------------------------------------

def run_simulation():
    """Validate the inputs and replace the current trace with a fresh run."""
    try:
        pages, frames = validate(st.session_state.reference_string, st.session_state.frame_count)
    except ValidationError as e:
        st.session_state.validation_error = str(e)
        return
    st.session_state.trace = simulate(pages, frames)
    st.session_state.step_index = 0  # Start playback at the first column
    st.session_state.validation_error = ""


def reset_simulation():
    st.session_state.trace = None
    st.session_state.step_index = -1
    st.session_state.validation_error = ""


def go_to_previous_step():
    st.session_state.step_index = previous_index(st.session_state.step_index)


def go_to_next_step():
    st.session_state.step_index = next_index(st.session_state.step_index, len(st.session_state.trace))


simulated = st.session_state.trace is not None

# -----------------------------------------------------------------------------
# SIDEBAR - Input Panel
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

st.sidebar.text_input(
    f"Reference String (max {MAX_REFERENCES}, comma-separated)",
    value=DEFAULT_REFERENCE_STRING,
    key="reference_string",
    disabled=simulated,
)

# No min/max here: out-of-range values are reported by the validator
st.sidebar.number_input(
    f"Frames ({MIN_FRAMES}-{MAX_FRAMES})",
    value=DEFAULT_FRAME_COUNT,
    step=1,
    key="frame_count",
    disabled=simulated,
)

st.sidebar.button("Simulate", key="simulate", on_click=run_simulation, disabled=simulated)
st.sidebar.button("Reset", key="reset", on_click=reset_simulation)

if st.session_state.validation_error:
    st.error(st.session_state.validation_error)

trace = st.session_state.trace

# =============================================================================
# MAIN CONTENT AREA
# =============================================================================

if trace is None or len(trace) == 0:
    st.info("Enter a reference string and a frame count, then click **Simulate**.")
else:
    # ----- Playback Controls -----
    prev_col, next_col, position_col = st.columns([1, 1, 3])

    with prev_col:
        st.button(
            "← Previous Step",
            key="previous",
            on_click=go_to_previous_step,
            disabled=st.session_state.step_index <= 0,
        )

    with next_col:
        st.button(
            "Next Step →",
            key="next",
            on_click=go_to_next_step,
            disabled=st.session_state.step_index >= len(trace) - 1,
        )

    step_index = st.session_state.step_index
    with position_col:
        st.write(f"Viewing Step: **{step_index + 1}** of {len(trace)}")

    visible = visible_steps(trace, step_index)
    current = last(visible)
    summary = summarize(visible)

    # ----- Simulation Grid -----
    st.subheader("Simulation Steps")
    st.plotly_chart(build_grid_figure(visible, trace.frame_count))

    col1, col2 = st.columns([1, 2])

    # -------------------------------------------------------------------------
    # LEFT COLUMN - Summary and Event Log
    # -------------------------------------------------------------------------

    with col1:
        st.subheader("Overall Metrics (Cumulative)")
        st.metric("Page References Displayed", summary["references"])
        st.metric("Cumulative Page Faults", summary["faults"])
        st.metric("Cumulative Hits", summary["hits"])

        st.subheader("Action at Current Step")
        st.write(f"Page Reference: **{current.page_reference}**")
        st.write(f"Result: **{'Page Fault' if current.is_fault else 'Page Hit'}**")
        st.write(describe_step(current))

        if is_complete(trace, step_index):
            st.subheader("Final Results")
            st.success(f"Total Simulation Page Faults: {trace.total_faults}")
            st.write(f"Total Hits: **{trace.total_hits}** of {len(trace)} references")

        # Most recent 20 events, newest first
        st.subheader("Event Log")
        for ev in event_log(visible)[-20:][::-1]:
            st.write(ev)

    # -------------------------------------------------------------------------
    # RIGHT COLUMN - Visualizations
    # -------------------------------------------------------------------------

    with col2:
        st.subheader("Physical Frames")
        st.plotly_chart(build_frames_figure(current))

        st.subheader("Replacement Queue (FIFO order)")
        st.table([
            {"rank": rank, "page": page}
            for page, rank in current.load_rank.items()
        ])

        st.plotly_chart(build_hits_figure(summary))

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    f"- Enter 1 to {MAX_REFERENCES} non-negative page numbers separated by commas.\n"
    f"- Pick between {MIN_FRAMES} and {MAX_FRAMES} frames, then click **Simulate**.\n"
    "- Use **Next Step** / **Previous Step** to reveal the run one reference at a time.\n"
    "- Click **Reset** to edit the inputs again."
)

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) Default run: `1, 9, 3, 5, 6, 3, 2, 6` with 3 frames → 6 faults, hits on the second `3` and `6`.\n"
    "2) Cold start: `0, 1, 2, 3, 4` with 5 frames → every reference faults, nothing is replaced.\n"
    "3) Belady's anomaly (see Concepts): the same string can fault more often with more frames."
)
