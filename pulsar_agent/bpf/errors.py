"""Logging of errors together with their chain of causes."""

from __future__ import annotations

import logging
from typing import Iterator

logger = logging.getLogger(__name__)


def _causes(err: BaseException) -> Iterator[BaseException]:
    seen = {id(err)}
    current = err
    while True:
        cause = current.__cause__
        if cause is None and not current.__suppress_context__:
            cause = current.__context__
        if cause is None or id(cause) in seen:
            return
        seen.add(id(cause))
        yield cause
        current = cause


def format_error_chain(err: BaseException) -> str:
    """Render an error followed by the errors that caused it."""
    causes = list(_causes(err))
    text = str(err)
    if not causes:
        return text
    if len(causes) == 1:
        return f"{text}\n\nCaused by:\n    {causes[0]}"
    lines = "\n".join(f"    {index}: {cause}" for index, cause in enumerate(causes))
    return f"{text}\n\nCaused by:\n{lines}"


def log_error(msg: str, err: BaseException) -> None:
    """Log ``msg`` with the error and all of its causes."""
    logger.error("%s: %s", msg, format_error_chain(err))