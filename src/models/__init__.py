"""Public model exports for the project.

Keep the :mod:`src` namespace clean: tests and other modules should import
``from src.models import RuleMatch, AnalysisResult, ReportConfig``.
"""

from __future__ import annotations

from .report_config import DEFAULT_CONTEXT_SIZE, ReportConfig
from .rule_match import AnalysisResult, RuleMatch

__all__ = ["RuleMatch", "AnalysisResult", "ReportConfig", "DEFAULT_CONTEXT_SIZE"]
