"""File server hit counter."""


class FileserverHits:
    """Counts requests served under /app. Lives on `app.state`."""

    def __init__(self) -> None:
        self._hits = 0

    @property
    def value(self) -> int:
        return self._hits

    def increment(self) -> None:
        self._hits += 1

    def reset(self) -> None:
        self._hits = 0
