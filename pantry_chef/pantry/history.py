"""Recipe history ledger, most recent first."""

from typing import Iterator, Optional

from pantry_chef.models.models import Recipe


class HistoryLedger:
    """Append-only record of successful generations. No capacity bound, no dedup."""

    def __init__(self) -> None:
        self._records: list[Recipe] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._records))

    def append(self, recipe: Recipe) -> None:
        # Newest at index 0
        self._records.insert(0, recipe)

    def records(self) -> list[Recipe]:
        return list(self._records)

    def latest(self) -> Optional[Recipe]:
        return self._records[0] if self._records else None
