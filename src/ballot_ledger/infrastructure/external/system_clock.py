"""System clock implementation of IClock."""

import time


class SystemClock:
    """Returns the host's current UNIX time in whole seconds."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """Clock pinned to a settable instant. Used by tests and dry runs."""

    def __init__(self, now: int = 0) -> None:
        self._now = now

    def now(self) -> int:
        return self._now

    def set(self, now: int) -> None:
        self._now = now

    def advance(self, seconds: int) -> None:
        self._now += seconds
