"""
FIFO Page Replacement Engine

Core simulation for the FIFO (First-In-First-Out) page replacement algorithm.
Given an ordered page reference string and a fixed number of physical frames,
the engine replays every reference and captures an immutable snapshot of
memory after each one, so that a presentation layer can step through the run.

The engine expects validated input (see validation.py) and never re-checks it.
"""

# =============================================================================
# IMPORTS
# =============================================================================

from collections import deque               # deque for the FIFO load-order queue
from dataclasses import dataclass           # For clean data class definitions
from typing import Deque, Dict, Iterator, List, Optional, Sequence, Tuple


# =============================================================================
# CONFIGURATION
# =============================================================================

MIN_FRAMES = 3        # Smallest frame count accepted by the visualizer
MAX_FRAMES = 5        # Largest frame count accepted by the visualizer
MAX_REFERENCES = 10   # Longest page reference string accepted


# =============================================================================
# SIMULATION ENGINE - Core Data Structures
# =============================================================================

@dataclass(frozen=True)
class StepSnapshot:
    """
    Outcome of processing exactly one page reference.

    Attributes:
        page_reference (int): The page that was referenced
        frames (Tuple[Optional[int], ...]): Frame contents after this step,
            None for an empty frame
        is_fault (bool): True if the page was not resident before the step
        replaced_page (Optional[int]): Evicted page, None if nothing was evicted
        load_order (Tuple[int, ...]): Resident pages oldest first, after this step
        frame_index (int): The frame that was hit, filled or overwritten
        events (Tuple[str, ...]): Event log lines written while processing this step
    """
    page_reference: int
    frames: Tuple[Optional[int], ...]
    is_fault: bool
    replaced_page: Optional[int]
    load_order: Tuple[int, ...]
    frame_index: int
    events: Tuple[str, ...] = ()

    @property
    def is_hit(self) -> bool:
        return not self.is_fault

    @property
    def load_rank(self) -> Dict[int, int]:
        """
        FIFO rank of every resident page (1 = oldest = next victim).

        Returns:
            Dict[int, int]: Maps resident page -> 1-based queue position
        """
        return {page: position + 1 for position, page in enumerate(self.load_order)}

    def rank_of(self, page: Optional[int]) -> Optional[int]:
        """
        Look up the FIFO rank of a single page.

        Args:
            page (Optional[int]): Page to look up, None for an empty frame

        Returns:
            Optional[int]: 1-based position in the load order, None if not resident
        """
        if page is None or page not in self.load_order:
            return None
        return self.load_order.index(page) + 1


@dataclass(frozen=True)
class SimulationTrace:
    """
    Complete, immutable result of one FIFO run.

    Attributes:
        frame_count (int): Number of physical frames simulated
        steps (Tuple[StepSnapshot, ...]): One snapshot per reference, in input order
        total_faults (int): Number of snapshots that are faults
        event_log (Tuple[str, ...]): Human-readable log of every memory operation
    """
    frame_count: int
    steps: Tuple[StepSnapshot, ...]
    total_faults: int
    event_log: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[StepSnapshot]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> StepSnapshot:
        return self.steps[index]

    @property
    def total_hits(self) -> int:
        return len(self.steps) - self.total_faults


# =============================================================================
# FIFO ENGINE - Core Simulation
# =============================================================================

class FIFOEngine:
    """
    Physical memory under FIFO replacement.

    Attributes:
        frame_count (int): Number of frames in physical memory
        frames (List[Optional[int]]): Page held by each frame, None if free
        load_order (Deque[int]): Resident pages ordered by load time, oldest first
        faults (int): Count of page faults
        event_log (List[str]): Log of all memory access events
    """

    def __init__(self, frame_count: int):
        self.frame_count = frame_count
        self.reset()

    def reset(self):
        """
        Empty every frame and clear the fault count and the event log.
        """
        self.frames: List[Optional[int]] = [None] * self.frame_count
        self.load_order: Deque[int] = deque()
        self.faults = 0
        self.event_log: List[str] = []

    def access_page(self, page_no: int) -> StepSnapshot:
        """
        Reference a page, handling the hit, free-frame and eviction cases.

        Args:
            page_no (int): Page to reference

        Returns:
            StepSnapshot: Memory state after the reference
        """
        replaced_page = None
        first_event = len(self.event_log)

        # ----- PAGE HIT -----
        if page_no in self.frames:
            frame_no = self.frames.index(page_no)
            self.event_log.append(f"Hit: Page {page_no} in Frame {frame_no + 1}")
            return self._snapshot(page_no, False, None, frame_no, first_event)

        # ----- PAGE FAULT -----
        self.faults += 1
        self.event_log.append(f"Fault: Page {page_no} not in memory")

        if None in self.frames:
            # Lowest-index free frame
            frame_no = self.frames.index(None)
        else:
            replaced_page, frame_no = self._evict()

        self._load_page_into_frame(page_no, frame_no, replaced=replaced_page is not None)
        return self._snapshot(page_no, True, replaced_page, frame_no, first_event)

    def _evict(self) -> Tuple[int, int]:
        """
        Remove the oldest resident page (front of the load-order queue).

        Returns:
            Tuple[int, int]: (evicted page, frame it occupied)
        """
        victim = self.load_order.popleft()
        frame_no = self.frames.index(victim)
        self.frames[frame_no] = None
        self.event_log.append(f"Evicting: Page {victim} from Frame {frame_no + 1}")
        return victim, frame_no

    def _load_page_into_frame(self, page_no: int, frame_no: int, replaced: bool = False):
        self.frames[frame_no] = page_no
        # Newest entry at the back
        self.load_order.append(page_no)
        suffix = " (replaced)" if replaced else ""
        self.event_log.append(f"Loaded: Page {page_no} -> Frame {frame_no + 1}{suffix}")

    def _snapshot(self, page_no: int, is_fault: bool, replaced_page: Optional[int],
                  frame_no: int, first_event: int = 0) -> StepSnapshot:
        return StepSnapshot(
            page_reference=page_no,
            frames=tuple(self.frames),
            is_fault=is_fault,
            replaced_page=replaced_page,
            load_order=tuple(self.load_order),
            frame_index=frame_no,
            events=tuple(self.event_log[first_event:]),
        )


def simulate(pages: Sequence[int], frame_count: int) -> SimulationTrace:
    """
    Run FIFO over a whole reference string.

    A fresh engine is created for every call, so a previous trace is never
    touched by a new run.

    Args:
        pages (Sequence[int]): Validated page reference string
        frame_count (int): Validated number of physical frames

    Returns:
        SimulationTrace: One snapshot per reference plus the total fault count
    """
    engine = FIFOEngine(frame_count)
    steps = [engine.access_page(page) for page in pages]
    return SimulationTrace(
        frame_count=frame_count,
        steps=tuple(steps),
        total_faults=engine.faults,
        event_log=tuple(engine.event_log),
    )
