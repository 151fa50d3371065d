from investor_intake.analysis.analyzer import StructuredAnalyzer
from investor_intake.analysis.base import BaseAnalyzer
from investor_intake.analysis.models import StructuredRecord

__all__ = ["BaseAnalyzer", "StructuredAnalyzer", "StructuredRecord"]
