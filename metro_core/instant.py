"""
Timeline coordinates.

An `Instant` addresses one step of the diagram's discrete timeline: the
coarse `epoch` (typically a year) and the fine `second` within it. Instants
order and compare by `(epoch, second)` only; the flag is metadata that
changes how the transition at that instant is animated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from .enums import InstantFlag

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Instant:
    """
    Immutable timeline coordinate with total ordering.

    Attributes:
        epoch: Coarse time unit
        second: Fine time unit within the epoch
        flag: Transition metadata (ignored by ordering, equality and hashing)
    """

    epoch: int
    second: int
    flag: InstantFlag = field(default=InstantFlag.NONE, compare=False)

    BIG_BANG: ClassVar["Instant"]
    """Origin sentinel: always already present, never displayed."""

    @classmethod
    def from_string(cls, text: str | None) -> "Instant":
        """
        Parse the document notation ``"<epoch> <second> [flag]"``.

        Empty or missing text denotes the origin sentinel. A missing second
        defaults to 0 and unknown flags are ignored.

        Args:
            text: Instant notation, e.g. ``"2020 3 noanim"``

        Returns:
            Instant: The parsed instant
        """
        if text is None:
            return cls.BIG_BANG
        parts = str(text).split()
        if not parts:
            return cls.BIG_BANG
        epoch = int(parts[0])
        second = int(parts[1]) if len(parts) > 1 else 0
        flag = InstantFlag.NONE
        if len(parts) > 2:
            try:
                flag = InstantFlag(parts[2].lower())
            except ValueError:
                logger.debug("Ignoring unknown instant flag %r in %r", parts[2], text)
        return cls(epoch, second, flag)

    def __str__(self) -> str:
        if self.flag is InstantFlag.NONE:
            return f"{self.epoch} {self.second}"
        return f"{self.epoch} {self.second} {self.flag.value}"


Instant.BIG_BANG = Instant(0, 0)
