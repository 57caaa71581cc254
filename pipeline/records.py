"""
Meal record sinks.

Durable storage lives outside this service; the pipeline only needs
something it can append a record to. InMemoryRecordLog is the default used
by the HTTP server and the tests.
"""
import threading
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Deque, Dict, List, Protocol


DEFAULT_MAX_RECORDS = 10000


@dataclass(frozen=True)
class MealRecord:
    """A meal entry, tagged with the resolved catalog name"""
    login_id: str
    meal_name: str
    calories: int
    meal_datetime: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["meal_datetime"] = self.meal_datetime.strftime("%Y-%m-%d %H:%M:%S")
        return data


class RecordSink(Protocol):
    def append_meal(self, record: MealRecord) -> None:
        ...


class InMemoryRecordLog:
    """
    Thread-safe, bounded meal log for development and tests.

    Keeps at most max_records entries; once full, the oldest record is
    dropped for each new one. Nothing survives a restart.
    """

    def __init__(self, max_records: int = DEFAULT_MAX_RECORDS):
        if isinstance(max_records, bool) or not isinstance(max_records, int) or max_records < 1:
            raise ValueError(f"max_records must be a positive integer, got {max_records!r}")
        self._lock = threading.Lock()
        self._meals: Deque[MealRecord] = deque(maxlen=max_records)

    @property
    def max_records(self) -> int:
        return self._meals.maxlen

    def append_meal(self, record: MealRecord) -> None:
        with self._lock:
            self._meals.append(record)

    def meals_for(self, login_id: str) -> List[MealRecord]:
        """Records for one user, newest first"""
        with self._lock:
            rows = [r for r in self._meals if r.login_id == login_id]
        return sorted(rows, key=lambda r: r.meal_datetime, reverse=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._meals)
