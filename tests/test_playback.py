from engine import simulate
from playback import (
    cumulative_faults,
    cumulative_hits,
    describe_step,
    event_log,
    is_complete,
    last,
    next_index,
    prefix,
    previous_index,
    summarize,
    visible_steps,
)


def make_trace():
    return simulate([1, 9, 3, 5, 6, 3, 2, 6], 3)


def test_prefix_clamps_k():
    trace = make_trace()
    assert prefix(trace, 0) == ()
    assert prefix(trace, -3) == ()
    assert len(prefix(trace, 4)) == 4
    assert prefix(trace, 100) == trace.steps


def test_cumulative_counts():
    trace = make_trace()
    assert cumulative_faults(prefix(trace, 6)) == 5
    assert cumulative_hits(prefix(trace, 6)) == 1
    assert cumulative_faults(trace.steps) == trace.total_faults
    assert cumulative_faults(()) == 0
    assert cumulative_hits(()) == 0


def test_last():
    trace = make_trace()
    assert last(()) is None
    assert last(prefix(trace, 3)) is trace[2]


def test_visible_steps_follow_the_playback_index():
    trace = make_trace()
    assert visible_steps(None, 3) == ()
    assert visible_steps(trace, -1) == ()
    assert visible_steps(trace, 0) == (trace[0],)
    assert len(visible_steps(trace, 7)) == 8


def test_playback_index_is_clamped():
    assert next_index(0, 8) == 1
    assert next_index(7, 8) == 7
    assert previous_index(3) == 2
    assert previous_index(0) == 0


def test_is_complete():
    trace = make_trace()
    assert not is_complete(None, 0)
    assert not is_complete(trace, 6)
    assert is_complete(trace, 7)


def test_summarize():
    trace = make_trace()
    assert summarize(trace.steps) == {
        "references": 8,
        "faults": 6,
        "hits": 2,
        "hit_ratio": 0.25,
        "fault_rate": 0.75,
    }
    assert summarize(())["hit_ratio"] == 0.0


def test_describe_step():
    trace = make_trace()
    assert describe_step(trace[0]) == "FIFO Action: Page 1 loaded into a free frame (Frame 1)."
    assert describe_step(trace[3]) == "FIFO Action: Page 5 loaded into Frame 1, replacing Page 1."
    assert describe_step(trace[5]) == "Page 3 is already in Frame 3: page hit."


def test_event_log_covers_visible_steps_only():
    trace = make_trace()
    assert event_log(prefix(trace, 1)) == [
        "Fault: Page 1 not in memory",
        "Loaded: Page 1 -> Frame 1",
    ]
    assert event_log(trace.steps) == list(trace.event_log)
