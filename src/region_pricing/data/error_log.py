"""
Error log sink - appends failure records to a CSV file.
"""
import csv
from datetime import datetime
from pathlib import Path


class CsvErrorLogSink:
    """Persists {message, action_name, status} records, one CSV row each."""

    CSV_COLUMNS = ['message', 'action_name', 'status', 'logged_at']

    def __init__(self, path: Path):
        self.path = Path(path)

    def write(self, record: dict):
        """Append one record, writing the header on first use."""
        new_file = not self.path.exists() or self.path.stat().st_size == 0
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, 'a', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=self.CSV_COLUMNS, extrasaction='ignore')
            if new_file:
                writer.writeheader()
            writer.writerow({
                **record,
                'logged_at': record.get('logged_at') or datetime.now().isoformat(timespec='seconds'),
            })

    def read_all(self) -> list[dict]:
        """Read back every logged record."""
        if not self.path.exists():
            return []
        with open(self.path, 'r', encoding='utf-8', newline='') as f:
            return list(csv.DictReader(f))
