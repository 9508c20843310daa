"""
Read-only views over a finished SimulationTrace.

Nothing here mutates a trace; progressive reveal is a slice of the
snapshots up to the current playback index.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from engine import SimulationTrace, StepSnapshot


# -----------------------------
# Trace queries
# -----------------------------
def prefix(trace: SimulationTrace, k: int) -> Tuple[StepSnapshot, ...]:
    """First ``k`` snapshots, with ``k`` clamped to the trace length."""
    k = max(0, min(k, len(trace)))
    return trace.steps[:k]


def cumulative_faults(snapshots: Sequence[StepSnapshot]) -> int:
    return sum(1 for step in snapshots if step.is_fault)


def cumulative_hits(snapshots: Sequence[StepSnapshot]) -> int:
    return len(snapshots) - cumulative_faults(snapshots)


def last(snapshots: Sequence[StepSnapshot]) -> Optional[StepSnapshot]:
    if not snapshots:
        return None
    return snapshots[-1]


# -----------------------------
# Playback cursor
# -----------------------------
def visible_steps(trace: Optional[SimulationTrace], current_index: int) -> Tuple[StepSnapshot, ...]:
    """Snapshots shown when playback sits on ``current_index`` (-1 shows nothing)."""
    if trace is None or current_index < 0:
        return ()
    return prefix(trace, current_index + 1)


def next_index(current_index: int, total: int) -> int:
    return min(current_index + 1, total - 1)


def previous_index(current_index: int) -> int:
    return max(current_index - 1, 0)


def is_complete(trace: Optional[SimulationTrace], current_index: int) -> bool:
    if trace is None or len(trace) == 0:
        return False
    return current_index >= len(trace) - 1


# -----------------------------
# Summary
# -----------------------------
def summarize(snapshots: Sequence[StepSnapshot]) -> Dict[str, float]:
    """
    Cumulative statistics for the given snapshots.

    Returns:
        Dict[str, float]: references, faults, hits, hit_ratio and fault_rate
    """
    references = len(snapshots)
    faults = cumulative_faults(snapshots)
    hits = references - faults
    hit_ratio = (hits / references) if references > 0 else 0.0
    fault_rate = (faults / references) if references > 0 else 0.0

    return {
        "references": references,
        "faults": faults,
        "hits": hits,
        "hit_ratio": round(hit_ratio, 4),
        "fault_rate": round(fault_rate, 4),
    }


def describe_step(step: StepSnapshot) -> str:
    """Narrate what FIFO did for one reference."""
    if step.is_hit:
        return f"Page {step.page_reference} is already in Frame {step.frame_index + 1}: page hit."
    if step.replaced_page is not None:
        return (
            f"FIFO Action: Page {step.page_reference} loaded into Frame {step.frame_index + 1}, "
            f"replacing Page {step.replaced_page}."
        )
    return f"FIFO Action: Page {step.page_reference} loaded into a free frame (Frame {step.frame_index + 1})."


def event_log(snapshots: Sequence[StepSnapshot]) -> List[str]:
    """Event log lines of the given snapshots, oldest first."""
    return [event for step in snapshots for event in step.events]
