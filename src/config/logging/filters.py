"""Filter que completa cada record com o contexto do serviço."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class LogContextFilter(logging.Filter):
    """Preenche campos fixos (service, environment) e o correlation_id corrente.

    Campos fixos sempre sobrescrevem o record. correlation_id vindo de
    `extra` prevalece sobre o getter.
    """

    def __init__(
        self,
        context: Mapping[str, str],
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._context = dict(context)
        self._correlation_id_getter = correlation_id_getter

    @property
    def context(self) -> dict[str, str]:
        return dict(self._context)

    def _current_correlation_id(self) -> str:
        if self._correlation_id_getter is None:
            return ""
        return self._correlation_id_getter()

    def filter(self, record: logging.LogRecord) -> bool:
        record.__dict__.update(self._context)
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._current_correlation_id()
        return True
