"""
Backups — Snapshot Store

Page-level snapshots of the SQLite database file, taken and restored
with SQLite's online backup API (sqlite3.Connection.backup).

The backup API writes the destination under SQLite's own file lock,
so a restore never truncates the live file under a connection held by
another thread or worker process: those connections see the restored
pages on their next read. A restore waits while another connection
holds a write lock, and a failed restore leaves the live file untouched.
The process-wide lock only serialises create and restore within one
process; in-flight request transactions in other workers are not
replayed, so restores belong in a maintenance window.

@file backups/store.py
"""

import logging
import re
import sqlite3
import threading
from contextlib import closing
from datetime import datetime, timezone as dt_timezone
from pathlib import Path

from django.conf import settings
from django.db import connections as default_connections
from django.utils import timezone

from core.exceptions import BusinessRuleViolation, ConflictError, ResourceNotFoundError

logger = logging.getLogger('assettrack')

BACKUP_NAME_RE = re.compile(r'^backup-[0-9A-Za-z-]+\.sqlite3$')
SQLITE_ENGINE = 'django.db.backends.sqlite3'
BUSY_TIMEOUT_SECONDS = 5


def copy_database(source: Path, target: Path) -> None:
    """Copy every page of ``source`` into ``target`` as one SQLite backup."""
    with closing(sqlite3.connect(source, timeout=BUSY_TIMEOUT_SECONDS)) as src, \
            closing(sqlite3.connect(target, timeout=BUSY_TIMEOUT_SECONDS)) as dst:
        src.backup(dst)


class BackupStore:
    """Create, list, prune and restore snapshots in ``backup_dir``."""

    _lock = threading.Lock()

    def __init__(self, *, db_path, backup_dir, connections=None, max_backups: int = 10):
        self.db_path = Path(db_path)
        self.backup_dir = Path(backup_dir)
        self.connections = connections if connections is not None else default_connections
        self.max_backups = max_backups

    # --- naming ---

    @staticmethod
    def new_name() -> str:
        """``backup-<UTC timestamp>.sqlite3``; lexical order is chronological."""
        return f'backup-{timezone.now().strftime("%Y%m%dT%H%M%S%fZ")}.sqlite3'

    def _path_for(self, name: str) -> Path:
        if not BACKUP_NAME_RE.match(name or ''):
            raise BusinessRuleViolation(detail=f'Invalid backup name: {name!r}.')
        return self.backup_dir / name

    # --- operations ---

    def _describe(self, path: Path) -> dict:
        stat = path.stat()
        return {
            'name': path.name,
            'size': stat.st_size,
            'time': datetime.fromtimestamp(stat.st_mtime, tz=dt_timezone.utc),
        }

    def list_backups(self) -> list[dict]:
        """Snapshots, newest first."""
        if not self.backup_dir.is_dir():
            return []
        entries = [
            self._describe(path)
            for path in self.backup_dir.iterdir()
            if path.is_file() and BACKUP_NAME_RE.match(path.name)
        ]
        entries.sort(key=lambda e: e['name'], reverse=True)
        return entries

    def create(self) -> dict:
        if not self.db_path.is_file():
            raise ResourceNotFoundError(detail=f'Database file {self.db_path} not found.')
        self.backup_dir.mkdir(parents=True, exist_ok=True)
        target = self.backup_dir / self.new_name()
        with self._lock:
            copy_database(self.db_path, target)
        logger.info('Database backup created: %s', target.name)
        self.prune()
        return self._describe(target)

    def prune(self) -> list[str]:
        """Delete all but the newest ``max_backups`` snapshots."""
        removed = []
        for entry in self.list_backups()[self.max_backups:]:
            (self.backup_dir / entry['name']).unlink(missing_ok=True)
            removed.append(entry['name'])
        if removed:
            logger.info('Pruned %d old backups: %s', len(removed), ', '.join(removed))
        return removed

    def restore(self, name: str) -> dict:
        source = self._path_for(name)
        if not source.is_file():
            raise ResourceNotFoundError(detail=f'Backup {name} not found.')
        with self._lock:
            self.connections.close_all()
            try:
                copy_database(source, self.db_path)
            except sqlite3.Error as exc:
                logger.error('Restore from %s failed: %s', name, exc)
                raise ConflictError(detail=f'Restore from {name} not applied: {exc}.')
        logger.warning('Database restored from backup %s', name)
        return self._describe(source)


def get_backup_store() -> BackupStore:
    """Store bound to the default database. Only SQLite is supported."""
    db = settings.DATABASES['default']
    if db['ENGINE'] != SQLITE_ENGINE:
        raise BusinessRuleViolation(detail='Backups are only supported for the SQLite engine.')
    return BackupStore(
        db_path=db['NAME'],
        backup_dir=settings.BACKUP_DIR,
        max_backups=settings.BACKUP_MAX_COUNT,
    )
