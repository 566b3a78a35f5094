"""LayoutService — the layout engine behind the ServiceResult contract.

Configuration problems become ``INVALID_CONFIG`` failures and engine
guard trips become ``INTERNAL_ERROR`` failures; neither escapes as an
exception.  Oversized words (lines wider than the target width) are
reported as warnings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from txtfmt.domain.definitions import render_definitions
from txtfmt.domain.errors import LayoutConfigError, LayoutInternalError
from txtfmt.domain.layout import layout
from txtfmt.domain.models import LayoutConfig, validate_config
from txtfmt.domain.zones import plan_zones
from txtfmt.services.result import ServiceResult
from txtfmt.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _oversized_warnings(lines: list[str], width: int) -> list[str]:
    return [
        f"line {i} is {len(line)} columns wide (word longer than width {width})"
        for i, line in enumerate(lines, start=1)
        if len(line) > width
    ]


class LayoutService:
    """Lay out text, plan zones and render definition lists."""

    @traced
    def layout(self, text: str, config: LayoutConfig) -> ServiceResult:
        """Lay out *text* with *config*."""
        op = "layout"
        try:
            with trace_span("validate"):
                validate_config(config)
                plan = plan_zones(config)
            with trace_span("layout") as span:
                lines = layout(text, config)
                if span:
                    span.annotate("lines", len(lines))
        except LayoutConfigError as exc:
            logger.warning("Rejected layout config: %s", exc)
            return ServiceResult.failure(op, "INVALID_CONFIG", str(exc))
        except LayoutInternalError as exc:
            logger.error("Layout engine guard tripped: %s", exc)
            return ServiceResult.failure(op, "INTERNAL_ERROR", str(exc))

        return ServiceResult.success(
            op,
            warnings=_oversized_warnings(lines, config.width),
            lines=lines,
            line_count=len(lines),
            width=config.width,
            alignment=str(config.alignment),
            format=str(config.format),
            top_line_count=plan.top_line_count,
        )

    @traced
    def plan(self, config: LayoutConfig) -> ServiceResult:
        """Report the zone plan *config* would use."""
        op = "plan"
        try:
            validate_config(config)
            plan = plan_zones(config)
        except LayoutConfigError as exc:
            logger.warning("Rejected layout config: %s", exc)
            return ServiceResult.failure(op, "INVALID_CONFIG", str(exc))

        return ServiceResult.success(
            op,
            format=str(config.format),
            width=config.width,
            top_line_count=plan.top_line_count,
            top_width=plan.top_width,
            bottom_width=plan.bottom_width,
        )

    @traced
    def definitions(
        self,
        entries: Mapping[str, str] | Iterable[tuple[str, str]],
        width: int,
        *,
        sort: bool = False,
    ) -> ServiceResult:
        """Render *entries* as a definition list *width* columns wide."""
        op = "definitions"
        try:
            lines = render_definitions(entries, width, sort=sort)
        except LayoutConfigError as exc:
            logger.warning("Rejected definition list: %s", exc)
            return ServiceResult.failure(op, "INVALID_CONFIG", str(exc))

        return ServiceResult.success(
            op,
            warnings=_oversized_warnings(lines, width),
            lines=lines,
            line_count=len(lines),
            width=width,
        )
