"""Media analysis: generator heuristics, match shaping and the pipeline."""

from __future__ import annotations

from lenstrace.analysis.generators import (
    GENERATOR_RULES,
    GeneratorRule,
    identify_generator,
)
from lenstrace.analysis.models import (
    AnalysisReport,
    FootprintAnalysis,
    SearchMethod,
    TimelineIntel,
    WebMatch,
)
from lenstrace.analysis.pipeline import MediaAnalyzer

__all__ = [
    "GENERATOR_RULES",
    "AnalysisReport",
    "FootprintAnalysis",
    "GeneratorRule",
    "MediaAnalyzer",
    "SearchMethod",
    "TimelineIntel",
    "WebMatch",
    "identify_generator",
]
