"""Error message tables - one message per non-empty line, read by position."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, field_validator

from covergen.errors import ConfigError
from covergen.models import GenErrorKind, InputErrorKind

logger = logging.getLogger(__name__)

GEN_ERRORS_NUM = len(GenErrorKind)
INPUT_ERRORS_NUM = len(InputErrorKind)


def read_messages(text: str, size: int) -> list[str]:
    """First `size` non-empty lines; missing slots stay empty."""
    messages = [line.strip() for line in text.splitlines() if line.strip()][:size]
    return messages + [""] * (size - len(messages))


def load_message_table(path: str | Path, size: int) -> list[str]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"unable to read messages file {path}: {e}") from e

    messages = read_messages(text, size)
    if "" in messages:
        logger.warning("Messages file %s has fewer than %d entries", path, size)
    return messages


class MessageTables(BaseModel):
    """Generator-error and input-error messages, indexed by kind position."""
    generator: list[str]
    input: list[str]

    @field_validator("generator")
    @classmethod
    def _generator_size(cls, messages: list[str]) -> list[str]:
        return (messages + [""] * GEN_ERRORS_NUM)[:GEN_ERRORS_NUM]

    @field_validator("input")
    @classmethod
    def _input_size(cls, messages: list[str]) -> list[str]:
        return (messages + [""] * INPUT_ERRORS_NUM)[:INPUT_ERRORS_NUM]

    @classmethod
    def load(cls, generator_path: str | Path, input_path: str | Path) -> MessageTables:
        return cls(
            generator=load_message_table(generator_path, GEN_ERRORS_NUM),
            input=load_message_table(input_path, INPUT_ERRORS_NUM),
        )

    def lookup(self, kind: GenErrorKind | InputErrorKind) -> str:
        table = self.generator if isinstance(kind, GenErrorKind) else self.input
        return table[kind.position]
