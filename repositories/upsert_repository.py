"""
Upsert-by-natural-key repository.

Every record type in DailyLog is identified by user-meaningful columns (a date,
or a date and a meal type) rather than by its surrogate ``id``. This module
holds the one implementation of "find by that key, then update or insert"
shared by all record types.

The table must carry a unique constraint over ``key_columns``. Lookup and
write are still two round trips, so two concurrent first saves for the same
key can both see "absent"; the loser's insert then trips the constraint and is
turned into an update of the winner's row.
"""

import logging
from typing import Any, Generic, Mapping, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import StoreError
from app.messages import failure_message
from domain.enums import UpsertAction

ModelType = TypeVar("ModelType")

logger = logging.getLogger("dailylog.repository")


class UpsertRepository(Generic[ModelType]):
    """
    Repository for tables keyed by a natural key.

    Subclasses set ``key_columns`` (the natural key) and ``mutable_columns``
    (the fields a save replaces).
    """

    key_columns: Tuple[str, ...] = ()
    mutable_columns: Tuple[str, ...] = ()

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model
        if not self.key_columns:
            raise TypeError(f"{self.__class__.__name__} must define key_columns")

    def find_by_key(self, **key: Any) -> Optional[ModelType]:
        """
        Point lookup by natural key, at most one row.

        ``NoResultFound`` means the key is free and yields ``None``; any other
        database error is raised as ``StoreError``.
        """
        self._check_key(key)
        query = self.db.query(self.model).filter_by(**key).limit(1)
        try:
            return query.one()
        except NoResultFound:
            return None
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._store_error("select", key, e) from e

    def upsert(
        self,
        key: Mapping[str, Any],
        values: Mapping[str, Any],
        exists: Optional[bool] = None,
    ) -> Tuple[ModelType, UpsertAction]:
        """
        Create or update the record identified by ``key``.

        Args:
            key: natural key columns and their values
            values: mutable columns, replaced wholesale on update
            exists: result of an earlier lookup for the same key, if the caller
                already has one. ``None`` performs the lookup here.

        Returns:
            Tuple of (record, action) where action tells whether a row was
            inserted or an existing one updated.

        Raises:
            StoreError: if the lookup or the write fails
        """
        self._check_key(key)
        self._check_values(values)

        if exists is None:
            existing = self.find_by_key(**key)
            if existing is not None:
                return self._update(existing, key, values), UpsertAction.UPDATED
            return self._insert(key, values)

        if exists:
            updated = self._update_by_key(key, values)
            if updated is not None:
                return updated, UpsertAction.UPDATED
            logger.debug(
                f"upsert_hint_stale table={self.model.__tablename__} key={dict(key)}"
            )
        return self._insert(key, values)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _insert(
        self, key: Mapping[str, Any], values: Mapping[str, Any]
    ) -> Tuple[ModelType, UpsertAction]:
        entity = self.model(**dict(key), **dict(values))
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Another save for the same key got there first
            self.db.rollback()
            existing = self.find_by_key(**key)
            if existing is None:
                raise self._store_error("insert", key, e) from e
            logger.info(
                f"upsert_conflict table={self.model.__tablename__} key={dict(key)} "
                f"resolved=update id={existing.id}"
            )
            return self._update(existing, key, values), UpsertAction.UPDATED
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._store_error("insert", key, e) from e

        self.db.refresh(entity)
        return entity, UpsertAction.CREATED

    def _update(
        self, entity: ModelType, key: Mapping[str, Any], values: Mapping[str, Any]
    ) -> ModelType:
        for column, value in values.items():
            setattr(entity, column, value)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._store_error("update", key, e) from e
        self.db.refresh(entity)
        return entity

    def _update_by_key(
        self, key: Mapping[str, Any], values: Mapping[str, Any]
    ) -> Optional[ModelType]:
        """Update straight through the key; ``None`` when no row matched"""
        try:
            matched = (
                self.db.query(self.model)
                .filter_by(**key)
                .update(dict(values), synchronize_session="fetch")
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._store_error("update", key, e) from e
        if not matched:
            return None
        return self.find_by_key(**key)

    def _check_key(self, key: Mapping[str, Any]) -> None:
        if set(key) != set(self.key_columns):
            raise ValueError(
                f"{self.model.__tablename__} key must be {self.key_columns}, got {tuple(key)}"
            )

    def _check_values(self, values: Mapping[str, Any]) -> None:
        unknown = set(values) - set(self.mutable_columns)
        if unknown:
            raise ValueError(
                f"{self.model.__tablename__} cannot set {sorted(unknown)}; "
                f"mutable columns are {self.mutable_columns}"
            )

    def _store_error(
        self, operation: str, key: Mapping[str, Any], exc: BaseException
    ) -> StoreError:
        logger.error(
            f"store_{operation}_failed table={self.model.__tablename__} "
            f"key={dict(key)} error={exc}"
        )
        return StoreError(
            failure_message(operation), operation=operation, cause=exc
        )
