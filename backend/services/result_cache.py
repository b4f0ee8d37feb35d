"""Keeps the most recent analysis so the extension popup can re-render it."""

from models.responses import AnalysisResult

_latest: AnalysisResult | None = None


def store_latest(result: AnalysisResult) -> None:
    global _latest
    _latest = result


def get_latest() -> AnalysisResult | None:
    return _latest


def clear() -> None:
    global _latest
    _latest = None
