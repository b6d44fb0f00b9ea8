"""Optimistic updates over an in-memory, list-backed collection.

A mutation is applied to the local collection before the network call is
issued, so the view reflects it immediately. Once the call settles the
caller either commits the server's authoritative fields or rolls back to
the snapshot taken just before the optimistic write.

Mutations are serialized per entity: while one is pending for an id, a
second ``apply`` for the same id raises ``MutationInProgress``. A rollback
snapshot therefore always holds confirmed state. Mutations on different
entities are independent and may settle in any order.
"""

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Generic, Protocol, TypeVar, get_args

from pydantic import BaseModel, ValidationError

from seller_dashboard.api.errors import MutationInProgress, NotFound, ValidationFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BoundControl(Protocol):
    """An input widget that keeps its own displayed value."""

    def set_value(self, value: Any) -> None: ...


class ControlValue:
    """Displayed value of an input widget, kept in sync by commit and rollback."""

    def __init__(self, value: Any = None):
        self.value = value

    def set_value(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ControlValue({self.value!r})"


def _merge(entity: ModelT, fields: Mapping[str, Any]) -> ModelT:
    """Return a validated copy of ``entity`` with ``fields`` overlaid."""
    return type(entity).model_validate({**entity.model_dump(), **fields})


def _accepts_none(model: type[BaseModel], name: str) -> bool:
    field = model.model_fields.get(name)
    if field is None:
        return True
    return field.annotation is type(None) or type(None) in get_args(field.annotation)


def _server_fields(model: type[BaseModel], update: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Fields explicitly returned by the server; nulls for non-nullable fields are ignored."""
    if update is None:
        return {}
    if isinstance(update, BaseModel):
        fields = update.model_dump(exclude_unset=True)
    else:
        fields = dict(update)
    return {k: v for k, v in fields.items() if v is not None or _accepts_none(model, k)}


class PendingMutation(Generic[ModelT]):
    """
    One optimistic write awaiting its network call.

    Settle it exactly once with ``commit`` or ``rollback``. Used as a context
    manager it rolls back when left unsettled, including when an exception
    escapes the block.
    """

    def __init__(
        self,
        collection: "OptimisticCollection[ModelT]",
        entity_id: Hashable,
        snapshot: ModelT,
        controls: Mapping[str, BoundControl] | None = None,
    ):
        self.collection = collection
        self.entity_id = entity_id
        self.snapshot = snapshot
        self.controls = dict(controls or {})
        self.settled = False

    def commit(self, update: BaseModel | Mapping[str, Any] | None = None) -> ModelT | None:
        """
        Merge the server's response into the entity.

        Args:
            update: Partial-update model (only explicitly returned fields are
                merged) or plain mapping of field names

        Returns:
            The committed entity, None if it left the collection meanwhile

        Raises:
            ValidationFailure: The merged entity is invalid; the mutation
                stays unsettled so the caller can still roll back
        """
        if self.settled:
            raise RuntimeError(f"Mutation of {self.collection.name} {self.entity_id} already settled")
        current = self.collection.get(self.entity_id)
        if current is None:
            self._settle()
            logger.warning(f"{self.collection.name} {self.entity_id} disappeared before commit")
            return None

        fields = _server_fields(type(current), update)
        try:
            committed = _merge(current, fields)
        except ValidationError as e:
            logger.error(f"Server response for {self.collection.name} {self.entity_id} is invalid: {e}")
            message = f"Invalid {self.collection.name} update: {e.errors()[0]['msg']}"
            raise ValidationFailure(message, list(fields)) from e

        self._settle()
        self.collection._put(self.entity_id, committed)
        for field, control in self.controls.items():
            control.set_value(getattr(committed, field))
        logger.debug(f"Committed {self.collection.name} {self.entity_id}: {sorted(fields)}")
        return committed

    def rollback(self) -> ModelT | None:
        """
        Restore the pre-mutation snapshot and reset bound controls.

        Returns:
            The restored entity, None if it left the collection meanwhile
        """
        self._settle()
        for field, control in self.controls.items():
            control.set_value(getattr(self.snapshot, field))

        if self.collection.get(self.entity_id) is None:
            logger.warning(f"{self.collection.name} {self.entity_id} disappeared before rollback")
            return None

        self.collection._put(self.entity_id, self.snapshot)
        logger.info(f"Rolled back {self.collection.name} {self.entity_id}")
        return self.snapshot

    def _settle(self) -> None:
        if self.settled:
            raise RuntimeError(f"Mutation of {self.collection.name} {self.entity_id} already settled")
        self.settled = True
        self.collection._in_flight.discard(self.entity_id)

    def __enter__(self) -> "PendingMutation[ModelT]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.settled:
            self.rollback()


class OptimisticCollection(Generic[ModelT]):
    """Ordered collection of DTOs keyed by an identifier field."""

    def __init__(self, items: Iterable[ModelT] = (), name: str = "item", key: str = "id"):
        """
        Args:
            items: Initial entities
            name: Entity name used in errors and logs
            key: Attribute holding each entity's identifier
        """
        self.name = name
        self.key = key
        self._items: list[ModelT] = list(items)
        self._in_flight: set[Hashable] = set()

    def __iter__(self) -> Iterator[ModelT]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[ModelT]:
        return list(self._items)

    def replace_all(self, items: Iterable[ModelT]) -> None:
        """Swap in a freshly fetched collection."""
        self._items = list(items)

    def _index(self, entity_id: Hashable) -> int | None:
        for i, item in enumerate(self._items):
            if getattr(item, self.key) == entity_id:
                return i
        return None

    def get(self, entity_id: Hashable) -> ModelT | None:
        index = self._index(entity_id)
        return None if index is None else self._items[index]

    def _put(self, entity_id: Hashable, entity: ModelT) -> None:
        index = self._index(entity_id)
        if index is not None:
            self._items[index] = entity

    def remove(self, entity_id: Hashable) -> bool:
        index = self._index(entity_id)
        if index is None:
            return False
        del self._items[index]
        return True

    def is_pending(self, entity_id: Hashable) -> bool:
        return entity_id in self._in_flight

    def apply(
        self,
        entity_id: Hashable,
        changes: Mapping[str, Any],
        controls: Mapping[str, BoundControl] | None = None,
    ) -> PendingMutation[ModelT]:
        """
        Optimistically apply ``changes`` to one entity.

        Args:
            entity_id: Identifier of the target entity
            changes: Field values to show before the server confirms them
            controls: Widgets bound to fields, reset to the snapshot on rollback

        Returns:
            Pending mutation to commit or roll back once the call settles

        Raises:
            NotFound: No entity has this identifier; nothing is mutated
            MutationInProgress: A mutation for this entity has not settled
            ValidationFailure: ``changes`` produce an invalid entity
        """
        current = self.get(entity_id)
        if current is None:
            raise NotFound(self.name, entity_id)
        if entity_id in self._in_flight:
            raise MutationInProgress(entity_id)

        snapshot = current.model_copy(deep=True)
        try:
            optimistic = _merge(current, changes)
        except ValidationError as e:
            raise ValidationFailure(f"Invalid {self.name} update: {e.errors()[0]['msg']}", list(changes)) from e

        self._put(entity_id, optimistic)
        self._in_flight.add(entity_id)
        logger.debug(f"Optimistically updated {self.name} {entity_id}: {dict(changes)}")
        return PendingMutation(self, entity_id, snapshot, controls)
