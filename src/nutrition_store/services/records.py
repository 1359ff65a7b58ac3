"""Per-user daily nutrition records."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from nutrition_store.domain.keys import StorageKeys
from nutrition_store.domain.models import DailyRecord
from nutrition_store.domain.results import Failed, StoreResult, unwrap_or
from nutrition_store.services.documents import DocumentStore

_logger = logging.getLogger(__name__)


@dataclass
class DailyRecordStore:
    """Stores one record per calendar date for each user."""

    documents: DocumentStore
    keys: StorageKeys = field(default_factory=StorageKeys)

    def save_daily_record(self, record: DailyRecord, user_id: str) -> None:
        """Insert the record, or replace the one with the same date in place."""
        current = self.get_all_records_result(user_id)
        if isinstance(current, Failed):
            _logger.error(
                "Records for %s unreadable, not saving %s", user_id, record.date
            )
            return
        records = unwrap_or(current, [])
        for position, existing in enumerate(records):
            if existing.date == record.date:
                records[position] = record
                break
        else:
            records.append(record)
        self.documents.write(
            self.keys.records_key(user_id), [item.to_document() for item in records]
        )

    def get_daily_record(self, day: str, user_id: str) -> DailyRecord | None:
        """Return the record stored for an exact date string."""
        for record in self.get_all_records(user_id):
            if record.date == day:
                return record
        return None

    def get_all_records(self, user_id: str) -> list[DailyRecord]:
        """Return every record in stored order."""
        return unwrap_or(self.get_all_records_result(user_id), [])

    def get_all_records_result(self, user_id: str) -> StoreResult[list[DailyRecord]]:
        return self.documents.read_list(
            self.keys.records_key(user_id), DailyRecord.from_document
        )

    def get_last_n_records(self, n: int, user_id: str) -> list[DailyRecord]:
        """Return the last ``n`` stored records, sorted ascending by date.

        The slice is taken by storage order before sorting, so records saved
        out of chronological order can push a recent date out of the result.
        """
        if n <= 0:
            return []
        tail = self.get_all_records(user_id)[-n:]
        return sorted(tail, key=lambda record: _date_sort_key(record.date))


def _date_sort_key(value: str) -> tuple[int, datetime]:
    """Sort parseable dates chronologically and unparseable ones last."""
    parsed = parse_record_date(value)
    if parsed is None:
        return (1, datetime.min)
    return (0, parsed)


def parse_record_date(value: str) -> datetime | None:
    """Parse a record date written as ``YYYY-MM-DD`` or a full ISO timestamp."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            day = date.fromisoformat(value[:10])
        except ValueError:
            return None
        return datetime(day.year, day.month, day.day)
    if parsed.tzinfo is not None:
        return parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed
