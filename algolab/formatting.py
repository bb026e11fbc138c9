"""Bracketed, comma-separated rendering of sequences."""


def _format_item(item):
    if isinstance(item, float):
        return format(item, "g")
    return str(item)


def format_sequence(items, prefix=""):
    """Render ``items`` as ``prefix[a, b, c]``; floats use general notation."""
    return prefix + "[" + ", ".join(_format_item(item) for item in items) + "]"


def print_sequence(items, prefix=""):
    """Print ``items`` as rendered by :func:`format_sequence`."""
    print(format_sequence(items, prefix))