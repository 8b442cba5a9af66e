"""CSV file audit log — implements AuditPort."""

import csv
import os
import threading
from pathlib import Path


class CsvAuditLog:
    """Appends one ``sender_id,text,name`` row per call, no header.

    Each append opens the file, writes, flushes and fsyncs before returning,
    so a record is on disk once ``append`` returns. A lock keeps concurrent
    requests from interleaving rows. Rows holding a carriage return are fully
    quoted so they read back as a single record.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def append(self, sender_id: str, text: str, name: str) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o600)
            with os.fdopen(fd, "a", encoding="utf-8", newline="") as f:
                row = [sender_id, text, name]
                quoting = csv.QUOTE_ALL if any("\r" in v for v in row) else csv.QUOTE_MINIMAL
                csv.writer(f, lineterminator="\n", quoting=quoting).writerow(row)
                f.flush()
                os.fsync(f.fileno())
