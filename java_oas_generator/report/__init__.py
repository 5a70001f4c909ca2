"""
Report Module

This module renders generation summaries with Jinja2 templates.
"""

from .template_engine import ReportTemplateEngine, display_path, status_label

__all__ = [
    "ReportTemplateEngine",
    "display_path",
    "status_label",
]
