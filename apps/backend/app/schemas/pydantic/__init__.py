from .ats_analysis import AnalysisResult, KeywordReport, FormattingReport

__all__ = ["AnalysisResult", "KeywordReport", "FormattingReport"]
