"""Error reporter - keeps the single active error message."""

from __future__ import annotations

from covergen.config.messages import MessageTables
from covergen.models import ErrorKind


class ErrorReporter:
    """
    Maps an error kind to its human-readable message.

    Generator and input errors share one slot: reporting a new kind
    replaces whatever was active before.
    """

    def __init__(self, tables: MessageTables) -> None:
        self.tables = tables
        self._kind: ErrorKind | None = None
        self._message = ""

    def report(self, kind: ErrorKind) -> None:
        self._kind = kind
        self._message = self.tables.lookup(kind)

    def clear(self) -> None:
        self._kind = None
        self._message = ""

    @property
    def kind(self) -> ErrorKind | None:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    def copy(self) -> ErrorReporter:
        other = ErrorReporter(self.tables)
        other._kind = self._kind
        other._message = self._message
        return other
