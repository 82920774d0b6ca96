"""Text reports of routing results."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

DEFAULT_RESULTS_PATH = "routing_results.txt"


def _result_line(net_id: int, steps: int) -> str:
    if steps == -1:
        return f"Routing failed for net_id {net_id}\n"
    return f"route id: {net_id} => steps: {steps}\n"


def format_results(id_to_steps: Mapping[int, int]) -> str:
    """Return one line per net: its step count, or a failure notice for -1."""
    return "".join(_result_line(net_id, steps) for net_id, steps in id_to_steps.items())


def save_results(
    id_to_steps: Mapping[int, int], path: str | Path = DEFAULT_RESULTS_PATH
) -> Path:
    """Write the routing report to ``path`` and return the path written."""
    target = Path(path)
    target.write_text(format_results(id_to_steps))
    return target