from typing import Any

import structlog

from price_proxy.models.pricing import Diagnostic

log = structlog.get_logger()


class DiagnosticLog:
    """Collects extraction events and forwards them to the logger."""

    def __init__(self, **context: Any):
        self.events: list[Diagnostic] = []
        self.log = log.bind(**context) if context else log

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("warning", event, fields)

    def _emit(self, level: str, event: str, fields: dict[str, Any]) -> None:
        self.events.append(Diagnostic(event=event, level=level, context=fields))
        getattr(self.log, level)(event, **fields)
