"""Report formatting — turn policy runs into text and JSON.

The engine returns data; this module decides how it looks.  All
functions are pure (they return strings or dicts, no I/O) so the CLI
and the web UI can share them and tests can check them directly.
"""

from collections.abc import Sequence
from typing import Any

from py_disksched.disk import Direction, PolicyRun


def format_header(count: int, head: int, direction: Direction) -> str:
    """Describe the run parameters."""
    return (
        f"Total requests = {count}\n"
        f"Initial Head Position: {head}\n"
        f"Direction of Head: {direction}\n"
    )


def format_result(run: PolicyRun) -> str:
    """Format one policy's service order and total movement.

    Example::

        LOOK DISK SCHEDULING ALGORITHM:

        170, 200, 90

        LOOK - Total head movements = 210

    """
    sequence = ", ".join(str(cylinder) for cylinder in run.result.sequence)
    return (
        f"{run.name} DISK SCHEDULING ALGORITHM:\n\n"
        f"{sequence}\n\n"
        f"{run.name} - Total head movements = {run.result.movement}\n"
    )


def format_report(
    runs: Sequence[PolicyRun],
    *,
    head: int,
    direction: Direction,
    count: int,
) -> str:
    """Format the header followed by every policy's result."""
    sections = [format_header(count, head, direction)]
    sections.extend(format_result(run) for run in runs)
    return "\n".join(sections)


def format_summary(runs: Sequence[PolicyRun]) -> str:
    """Return a one-line-per-policy comparison, marking the cheapest."""
    if not runs:
        return ""
    best = min(run.result.movement for run in runs)
    width = max(len(run.name) for run in runs)
    lines = [f"{'POLICY':<{width}}  MOVEMENT"]
    for run in runs:
        marker = "  *" if run.result.movement == best else ""
        lines.append(f"{run.name:<{width}}  {run.result.movement:>8}{marker}")
    return "\n".join(lines)


def run_to_dict(run: PolicyRun) -> dict[str, Any]:
    """Return a JSON-ready mapping for one policy run."""
    return {
        "name": run.name,
        "sequence": list(run.result.sequence),
        "movement": run.result.movement,
    }
