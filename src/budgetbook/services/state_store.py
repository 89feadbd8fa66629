"""
State store - the single owner of the household ledger snapshot.

The store holds one frozen AppState. Every mutation builds a new aggregate,
swaps it in, and writes the whole snapshot to the blob store before
returning. Readers get the current AppState through ``snapshot``; since the
models are frozen and collections are tuples, nothing handed out can be
mutated behind the store's back.

Behavior worth knowing:
- No validation beyond the pydantic types of drafts and patches; callers are
  expected to hand in already-validated values. A patch whose merged record
  fails validation (e.g. None for a required field) raises ValidationError
  and leaves the snapshot and stored data untouched.
- Updating or deleting an unknown id is a no-op: nothing changes and
  nothing is written. Single-user races (edit after delete) end up here.
- Deleting a category never touches transactions that reference it.
- A failed write is logged and recorded in ``last_save``; in-memory state is
  kept as is (no rollback).
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from budgetbook.ids import generate_id
from budgetbook.config import SNAPSHOT_KEY
from budgetbook.model.entities import (
    AppState,
    Category,
    CategoryDraft,
    CategoryPatch,
    Goal,
    GoalDraft,
    GoalPatch,
    SettingsPatch,
    Transaction,
    TransactionDraft,
    TransactionPatch,
    UserPatch,
)
from budgetbook.model.snapshot_io import SnapshotFormatError, dump_snapshot, export_filename, parse_snapshot
from budgetbook.services.seed import default_snapshot
from budgetbook.storage.blob_store import BlobStore, BlobStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveStatus:
    """Outcome of the most recent persistence attempt."""

    ok: bool
    error: Optional[str] = None


def _merged(record, patch_fields: dict):
    """Validated copy of ``record`` with ``patch_fields`` applied.

    Raises:
        ValidationError: the merged record is invalid, e.g. a required field set to None
    """
    return type(record).model_validate({**record.model_dump(), **patch_fields})


def _replace_by_id(records: tuple, record_id: str, patch_fields: dict) -> tuple | None:
    """Records with the matching one patched, or None when the id is unknown."""
    if not any(r.id == record_id for r in records):
        return None
    return tuple(_merged(r, patch_fields) if r.id == record_id else r for r in records)


def _remove_by_id(records: tuple, record_id: str) -> tuple | None:
    remaining = tuple(r for r in records if r.id != record_id)
    return None if len(remaining) == len(records) else remaining


class StateStore:
    """Owns the AppState snapshot and persists it after every mutation.

    Usage:
        store = StateStore(SqliteBlobStore(workspace.database_path))
        tx_id = store.add_transaction(TransactionDraft(...))
        store.update_transaction(tx_id, TransactionPatch(status="completed"))
        balance = current_balance(store.snapshot.transactions)
    """

    def __init__(
        self,
        blobs: BlobStore,
        *,
        key: str = SNAPSHOT_KEY,
        seed: Callable[[], AppState] = default_snapshot,
        id_factory: Callable[[], str] = generate_id,
    ):
        """Load the persisted snapshot, or seed and persist a default one.

        Args:
            blobs: Blob store collaborator holding the serialized snapshot
            key: Key the snapshot lives under
            seed: Factory for the first-run snapshot
            id_factory: Identifier generator for new records
        """
        self._blobs = blobs
        self._key = key
        self._new_id = id_factory
        self.load_warning: Optional[str] = None
        self.last_save = SaveStatus(ok=True)

        loaded = self._load()
        if loaded is None:
            self._state = seed()
            self._persist()
        else:
            self._state = loaded

    # ------------------------------------------------------------------
    # Loading and persistence
    # ------------------------------------------------------------------

    def _load(self) -> AppState | None:
        try:
            text = self._blobs.read(self._key)
        except BlobStoreError as e:
            self._warn_lost(f"stored data could not be read ({e})")
            return None

        if text is None:
            logger.info("No stored snapshot under %r; starting from seed data", self._key)
            return None

        try:
            return parse_snapshot(text)
        except SnapshotFormatError as e:
            self._warn_lost(f"stored data is corrupt ({e})")
            return None

    def _warn_lost(self, reason: str) -> None:
        self.load_warning = f"Saved data was discarded and replaced with defaults: {reason}"
        logger.warning("Falling back to seed snapshot: %s", reason)

    def _persist(self) -> SaveStatus:
        try:
            self._blobs.write(self._key, dump_snapshot(self._state))
        except BlobStoreError as e:
            logger.error("Failed to persist snapshot under %r", self._key, exc_info=True)
            self.last_save = SaveStatus(ok=False, error=str(e))
        else:
            self.last_save = SaveStatus(ok=True)
        return self.last_save

    def _commit(self, **changes) -> SaveStatus:
        self._state = self._state.model_copy(update=changes)
        return self._persist()

    def _commit_list(self, field: str, records: tuple | None) -> None:
        if records is None:
            logger.debug("No %s record with that id; nothing to change", field)
            return
        self._commit(**{field: records})

    @property
    def snapshot(self) -> AppState:
        """The current aggregate. Read-only: frozen models and tuples."""
        return self._state

    def save(self) -> SaveStatus:
        """Write the current snapshot again (e.g. to retry after a failed save)."""
        return self._persist()

    def replace_snapshot(self, state: AppState) -> SaveStatus:
        """Swap in a whole new aggregate (already validated) and persist it."""
        self._state = state
        logger.info("Snapshot replaced")
        return self._persist()

    def import_snapshot(self, text: str) -> SaveStatus:
        """Validate exported JSON text and make it the current snapshot.

        Raises:
            SnapshotFormatError: the text is not a valid snapshot; state is unchanged
        """
        return self.replace_snapshot(parse_snapshot(text))

    def export_snapshot(self, *, indent: int | None = 2) -> str:
        """Serialize the current snapshot as an export document."""
        return dump_snapshot(self._state, indent=indent)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def add_transaction(self, draft: TransactionDraft) -> str:
        new_id = self._new_id()
        record = Transaction(id=new_id, **draft.model_dump())
        self._commit(transactions=self._state.transactions + (record,))
        return new_id

    def update_transaction(self, transaction_id: str, patch: TransactionPatch) -> None:
        self._commit_list("transactions", _replace_by_id(self._state.transactions, transaction_id, patch.changes()))

    def delete_transaction(self, transaction_id: str) -> None:
        self._commit_list("transactions", _remove_by_id(self._state.transactions, transaction_id))

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def add_category(self, draft: CategoryDraft) -> str:
        new_id = self._new_id()
        record = Category(id=new_id, **draft.model_dump())
        self._commit(categories=self._state.categories + (record,))
        return new_id

    def update_category(self, category_id: str, patch: CategoryPatch) -> None:
        self._commit_list("categories", _replace_by_id(self._state.categories, category_id, patch.changes()))

    def delete_category(self, category_id: str) -> None:
        # Transactions keep their category_id; derivations render it as uncategorized.
        self._commit_list("categories", _remove_by_id(self._state.categories, category_id))

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    def add_goal(self, draft: GoalDraft) -> str:
        new_id = self._new_id()
        record = Goal(id=new_id, **draft.model_dump())
        self._commit(goals=self._state.goals + (record,))
        return new_id

    def update_goal(self, goal_id: str, patch: GoalPatch) -> None:
        self._commit_list("goals", _replace_by_id(self._state.goals, goal_id, patch.changes()))

    def delete_goal(self, goal_id: str) -> None:
        self._commit_list("goals", _remove_by_id(self._state.goals, goal_id))

    # ------------------------------------------------------------------
    # Singletons
    # ------------------------------------------------------------------

    def update_user(self, patch: UserPatch) -> None:
        self._commit(user=_merged(self._state.user, patch.changes()))

    def update_settings(self, patch: SettingsPatch) -> None:
        self._commit(settings=_merged(self._state.settings, patch.changes()))


def export_document(store: StateStore, today: dt.date | None = None) -> tuple[str, str]:
    """(filename, JSON text) pair for a dated backup of the store's snapshot."""
    return export_filename(today), store.export_snapshot()


__all__ = ["StateStore", "SaveStatus", "export_document"]
