"""Plain-text directions renderer.

Turns a RouteResult into numbered steps. Consecutive rail links on one
line are grouped into a single "travel through stops" step that lists
each stop with its cumulative time; every interchange is its own step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.models import LinkKind, RouteResult

ALREADY_THERE = "Already at destination!"


@dataclass
class TextDirectionsRenderer:
    """Numbered plain-text directions.

    This adapter implements DirectionsRendererPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, route: RouteResult) -> str:
        return "\n".join(self.render_lines(route))

    def render_lines(self, route: RouteResult) -> List[str]:
        """Render a route as a list of output lines."""
        if route.is_empty:
            return [ALREADY_THERE]

        vertices, times = route.vertices, route.times
        lines = [f"1) Begin journey at {vertices[0].station} station. (0 minutes)"]
        step = 2
        block_line: Optional[str] = None

        for i, kind in enumerate(route.kinds):
            here, there = vertices[i], vertices[i + 1]
            if kind is LinkKind.RAIL:
                if block_line != there.line:
                    lines.append(
                        f"{step}) Travel on the {there.line} line, through station stops:"
                    )
                    step += 1
                    block_line = there.line
                lines.append(f"- {there.station} ({times[i + 1]} minutes)")
                continue

            block_line = None
            if kind is LinkKind.LINE_INTERCHANGE:
                lines.append(
                    f"{step}) Get off at {there.station} and interchange to the "
                    f"{there.line} line. ({times[i + 1]} minutes)"
                )
            else:
                lines.append(
                    f"{step}) From {here.station}, interchange on foot to nearby "
                    f"{there.station} station. ({times[i + 1]} minutes)"
                )
            step += 1

        lines.append(
            f"{step}) Reach destination at {route.destination.station} station. "
            f"({route.total_minutes} minutes)"
        )
        self._logger.debug("Directions rendered", extra={"steps": step})
        return lines
