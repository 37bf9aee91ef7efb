"""
Cookie-backed keyed state.

A ``StateRegistry`` is created per request from the incoming cookies. Binding
a name returns a ``StateCell`` seeded from the cookie of the same name; binding
the same name again returns the same cell, so every consumer in the request
sees one live value. Cells are replaced, never mutated in place: ``set`` swaps
the value and marks the cell dirty, and ``flush`` writes each dirty cell back
to the response as a JSON cookie that expires a fixed number of days after
the write.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import quote, unquote

from fastapi import Response

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_DAYS = 365


def encode_value(value: Any) -> str:
    return quote(json.dumps(value, separators=(",", ":")), safe="")


def decode_value(raw: str) -> Any:
    return json.loads(unquote(raw))


class StateCell:
    def __init__(self, name: str, value: Any):
        self.name = name
        self._value = value
        self.dirty = False

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        self._value = value
        self.dirty = True


class StateRegistry:
    def __init__(
        self,
        cookies: Mapping[str, str],
        max_age_days: int = DEFAULT_MAX_AGE_DAYS,
    ):
        self._cookies = cookies
        self._cells: Dict[str, StateCell] = {}
        self.max_age_days = max_age_days

    def bind(self, name: str, default: Optional[Callable[[], Any]] = None) -> StateCell:
        cell = self._cells.get(name)
        if cell is not None:
            return cell

        value, readable = self._load(name)
        if value is None and default is not None:
            value = default()

        cell = StateCell(name, value)
        # an unreadable cookie is replaced on the next flush
        cell.dirty = not readable
        self._cells[name] = cell
        return cell

    def _load(self, name: str) -> Tuple[Any, bool]:
        """Persisted value for ``name`` and whether the cookie could be read."""
        raw = self._cookies.get(name)
        if not raw:
            return None, True

        try:
            return decode_value(raw), True
        except ValueError:
            logger.warning(f"Ignoring undecodable state cookie '{name}'")
            return None, False

    def expires_at(self, now: Optional[datetime] = None) -> datetime:
        now = now or datetime.now(timezone.utc)
        return now + timedelta(days=self.max_age_days)

    def flush(self, response: Response) -> None:
        expires = self.expires_at()

        for cell in self._cells.values():
            if not cell.dirty:
                continue

            response.set_cookie(
                key=cell.name,
                value=encode_value(cell.value),
                expires=expires,
                path="/",
                samesite="lax",
            )
            cell.dirty = False
