from __future__ import annotations
from typing import List


class TypedBuffer:
    """The simulated user's in-progress text."""

    def __init__(self, text: str = ""):
        self._chars: List[str] = list(text)

    def append(self, ch: str) -> None:
        self._chars.append(ch)

    def drop_last(self) -> bool:
        """Delete the last character; returns False if there was none."""
        if not self._chars:
            return False
        del self._chars[-1]
        return True

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"TypedBuffer({self.text!r})"
