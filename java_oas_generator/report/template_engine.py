"""
Report Template Engine

This module uses Jinja2 templates to render the console summary of a
generation run.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final

from jinja2 import Environment, FileSystemLoader, select_autoescape

from java_oas_generator.codegen.providers import BatchResult, DispatchOutcome
from java_oas_generator.utils.file_utils import get_relative_path

SUMMARY_TEMPLATE: Final = "summary.txt.j2"

_STATUS_OK: Final = "ok  "
_STATUS_FAILED: Final = "FAIL"


def display_path(path: Path | None, base_dir: Path | None = None) -> str:
    """Render a path relative to ``base_dir`` when it lies below it."""
    if path is None:
        return ""
    if base_dir is None:
        return str(path)
    return get_relative_path(path, base_dir).as_posix()


def status_label(outcome: DispatchOutcome) -> str:
    return _STATUS_OK if outcome.succeeded else _STATUS_FAILED


class ReportTemplateEngine:
    """Template engine for generation reports."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine."""
        if template_dir is None:
            current_dir = Path(__file__).parent
            template_dir = current_dir.parent / "templates"

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(
            {
                "display_path": display_path,
                "status_label": status_label,
            }
        )

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context."""
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_summary(self, results: Sequence[BatchResult], project_dir: Path | None = None) -> str:
        """Render the summary of all provider passes of one run."""
        total_count = sum(len(result.outcomes) for result in results)
        failed_count = sum(len(result.failed) for result in results)
        context = {
            "results": results,
            "project_dir": project_dir,
            "total_count": total_count,
            "failed_count": failed_count,
        }
        return self.render_template(SUMMARY_TEMPLATE, context)
