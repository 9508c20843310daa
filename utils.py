# utils.py

STATUS_COLORS = {
    "hit": "#b7e4c7",             # green
    "loaded-free": "#a9d6f5",     # blue
    "loaded-replace": "#f9c784",  # orange
    "fault": "#f4a5a5",           # red
    "resident": "#ffffff",
    "empty": "#f0f0f0",           # light grey
}


def cell_status(step, page, is_current=False):
    """Classify one frame cell of the reference grid."""
    if page is None:
        return "empty"
    if not is_current or page != step.page_reference:
        return "resident"
    if not step.is_fault:
        return "hit"
    if step.replaced_page is not None:
        return "loaded-replace"
    return "loaded-free"


def get_color(status):
    """Return a fill color for a cell status."""
    return STATUS_COLORS.get(status, STATUS_COLORS["resident"])


def frame_label(page, rank=None):
    if page is None:
        return ""
    if rank is None:
        return str(page)
    return f"{page} ({rank})"


def result_label(step):
    return "FAULT ❌" if step.is_fault else "HIT ✅"
