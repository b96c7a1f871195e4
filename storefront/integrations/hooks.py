"""
Hook registry: binds handlers to record mutations and drives their chains.

Handlers are ``async (store, event) -> RuleOutcome`` callables. For each
event the bound handlers run one after another in registration order; the
write carried by each outcome is applied before the next handler runs, and
the chain stops early when an outcome has ``continue_chain=False``. A
handler that raises aborts the chain with HookError.

Writes are best effort: collection lookup and persist failures are logged
and never reach the mutation that fired the event.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

from storefront.core.enums import MutationKind
from storefront.core.exceptions import (
    BaseServiceError,
    CollectionNotFoundError,
    HookError,
)
from storefront.integrations.base import Record, RecordStore
from storefront.integrations.events import RecordEvent

logger = logging.getLogger(__name__)


class CreateRecord:
    """Create a record in ``collection`` with ``fields``."""

    def __init__(self, collection: str, fields: Dict[str, Any], label: str = "record"):
        self.collection = collection
        self.fields = fields
        self.label = label

    def __repr__(self):
        return f"<CreateRecord {self.collection} {self.fields}>"


class DeleteRecord:
    """Delete an existing record."""

    def __init__(self, record: Record, label: str = "record"):
        self.record = record
        self.label = label

    def __repr__(self):
        return f"<DeleteRecord {self.record.collection.name}/{self.record.id}>"


RecordWrite = Union[CreateRecord, DeleteRecord]


class RuleOutcome:
    """What a handler wants done: at most one write, then continue or stop."""

    def __init__(self, write: Optional[RecordWrite] = None, continue_chain: bool = True):
        self.write = write
        self.continue_chain = continue_chain

    @classmethod
    def proceed(cls) -> "RuleOutcome":
        return cls()

    @classmethod
    def create(cls, collection: str, fields: Dict[str, Any], label: str = "record") -> "RuleOutcome":
        return cls(write=CreateRecord(collection, fields, label))

    @classmethod
    def delete(cls, record: Record, label: str = "record") -> "RuleOutcome":
        return cls(write=DeleteRecord(record, label))

    @property
    def has_write(self) -> bool:
        return self.write is not None

    def __repr__(self):
        return f"<RuleOutcome write={self.write!r} continue_chain={self.continue_chain}>"


Handler = Callable[[RecordStore, RecordEvent], Awaitable[RuleOutcome]]


async def apply_write(store: RecordStore, write: RecordWrite) -> Optional[Record]:
    """
    Apply a handler's write to the store.

    Returns the created record (or the deleted one), or None if the write
    could not be applied. Failures, including a failing chain fired by the
    write itself, are logged only.
    """
    if isinstance(write, CreateRecord):
        try:
            collection = await store.find_collection(write.collection)
        except CollectionNotFoundError as e:
            logger.error(f"Failed to find {write.collection} collection: {e}")
            return None

        record = store.new_record(collection, write.fields)
        try:
            await store.save(record)
        except BaseServiceError as e:
            logger.error(f"Failed to create {write.label}: {e}")
            return None

        logger.info(f"Successfully created {write.label}")
        return record

    if isinstance(write, DeleteRecord):
        try:
            await store.delete(write.record)
        except BaseServiceError as e:
            logger.error(f"Failed to remove {write.label}: {e}")
            return None

        logger.info(f"Successfully removed {write.label}")
        return write.record

    logger.error(f"Unsupported record write: {write!r}")
    return None


class Hook:
    """Ordered handlers bound to one mutation kind on one collection."""

    def __init__(self, kind: MutationKind, collection: str):
        self.kind = kind
        self.collection = collection
        self._handlers: List[Handler] = []

    def bind_func(self, handler: Handler) -> Handler:
        """Append ``handler`` to the chain. Usable as a decorator."""
        self._handlers.append(handler)
        logger.debug(f"Bound {getattr(handler, '__name__', handler)} to {self.kind.value} on '{self.collection}'")
        return handler

    @property
    def handlers(self) -> List[Handler]:
        return list(self._handlers)

    def __len__(self):
        return len(self._handlers)

    async def trigger(self, store: RecordStore, event: RecordEvent) -> List[RuleOutcome]:
        """Run the chain for ``event``; returns the outcome of every handler that ran."""
        outcomes = []
        for handler in self._handlers:
            try:
                outcome = await handler(store, event)
            except Exception as e:
                logger.error(
                    f"Handler {getattr(handler, '__name__', handler)} failed for "
                    f"{self.kind.value} on '{self.collection}' record {event.record_id}",
                    exc_info=True,
                )
                raise HookError(self.kind.value, self.collection, e) from e

            outcome = outcome or RuleOutcome.proceed()
            if outcome.has_write:
                await apply_write(store, outcome.write)
            outcomes.append(outcome)

            if not outcome.continue_chain:
                break
        return outcomes


class HookRegistry:
    """
    The event source: record stores call ``trigger`` after a committed
    create or update, and the bound handlers run in registration order.
    """

    def __init__(self):
        self._hooks: Dict[Tuple[MutationKind, str], Hook] = {}

    def _hook(self, kind: MutationKind, collection: str) -> Hook:
        key = (kind, collection)
        if key not in self._hooks:
            self._hooks[key] = Hook(kind, collection)
        return self._hooks[key]

    def on_record_after_create_success(self, collection: str) -> Hook:
        return self._hook(MutationKind.AFTER_CREATE_SUCCESS, collection)

    def on_record_after_update_success(self, collection: str) -> Hook:
        return self._hook(MutationKind.AFTER_UPDATE_SUCCESS, collection)

    def has_handlers(self, kind: MutationKind, collection: str) -> bool:
        hook = self._hooks.get((kind, collection))
        return bool(hook and len(hook))

    async def trigger(self, store: RecordStore, kind: MutationKind, record: Record) -> List[RuleOutcome]:
        """Fire ``kind`` for ``record``; a no-op when nothing is bound."""
        hook = self._hooks.get((kind, record.collection.name))
        if hook is None:
            return []
        event = RecordEvent(kind=kind, collection=record.collection.name, record=record)
        return await hook.trigger(store, event)
