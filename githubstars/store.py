"""
Snapshot storage.

Snapshots are grouped in *sets* named after the query that produced them
(see githubstars.naming). A set holds one or more *collections*; each
collection is one complete capture: a capture time plus one star count per
repository title. Writing a collection replaces it in full.
"""

from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
    selectinload,
    sessionmaker,
)

from githubstars.config import DEFAULT_COLLECTION, DEFAULT_DATABASE_URL
from githubstars.exceptions import StorageFailure
from githubstars.logging import get_logger, log_storage_operation, mask_sensitive_data
from githubstars.types.snapshots import MetricRecord, Snapshot

logger = get_logger()


class Base(DeclarativeBase):
    pass


class SnapshotCollection(Base):
    """One capture of a snapshot set; holds the capture-time marker."""

    __tablename__ = "snapshot_collections"
    __table_args__ = (UniqueConstraint("set_name", "name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    set_name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    captured_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    entries: Mapped[list["SnapshotEntry"]] = relationship(
        back_populates="collection",
        cascade="all, delete-orphan",
        order_by="SnapshotEntry.position",
    )

    def __repr__(self) -> str:
        return f"<SnapshotCollection {self.set_name}/{self.name} @ {self.captured_at}>"


class SnapshotEntry(Base):
    """A repository title and its star count within a collection."""

    __tablename__ = "snapshot_entries"
    __table_args__ = (UniqueConstraint("collection_id", "title"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    collection_id: Mapped[int] = mapped_column(
        ForeignKey("snapshot_collections.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    value: Mapped[int] = mapped_column(Integer, nullable=False)

    collection: Mapped[SnapshotCollection] = relationship(back_populates="entries")

    def __repr__(self) -> str:
        return f"<SnapshotEntry {self.title}={self.value}>"


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _unique_records(
    records: Iterable[MetricRecord] | Mapping[str, int],
) -> list[MetricRecord]:
    """Collapse duplicate titles, keeping the first position and the last value."""
    if isinstance(records, Mapping):
        values = dict(records)
    else:
        values = {}
        for record in records:
            values[record.title] = record.value
    return [MetricRecord(title=title, value=value) for title, value in values.items()]


class SnapshotStore:
    """
    Snapshot persistence over a SQLAlchemy engine.

    Example:
        ```python
        from githubstars.store import SnapshotStore

        with SnapshotStore.from_url("sqlite:///githubstars.db") as store:
            store.write("gogr1000", {"golang/go": 120000})
            snapshot = store.read("gogr1000")
        ```
    """

    def __init__(self, engine: Engine, collection: str = DEFAULT_COLLECTION) -> None:
        """
        Initialize the store.

        Args:
            engine: SQLAlchemy engine for the storage database
            collection: Default collection used when none is given
        """
        self.engine = engine
        self.collection = collection
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(
        cls,
        url: str = DEFAULT_DATABASE_URL,
        collection: str = DEFAULT_COLLECTION,
        **engine_kwargs: Any,
    ) -> "SnapshotStore":
        """
        Connect to a database and make sure the schema exists.

        Args:
            url: SQLAlchemy database URL
            collection: Default collection used when none is given
            **engine_kwargs: Extra arguments for sqlalchemy.create_engine

        Returns:
            Ready-to-use SnapshotStore

        Raises:
            StorageFailure: If the database cannot be reached
        """
        logger.info("Connection to the database %s...", mask_sensitive_data(url))
        try:
            engine = create_engine(url, **engine_kwargs)
        except (SQLAlchemyError, ValueError) as e:
            raise StorageFailure(f"Invalid database URL: {e}") from e
        store = cls(engine, collection=collection)
        store.create_schema()
        return store

    def create_schema(self) -> None:
        """Create the snapshot tables if they do not exist."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageFailure(f"Can't initialise snapshot tables: {e}") from e

    def write(
        self,
        name: str,
        records: Iterable[MetricRecord] | Mapping[str, int],
        collection: str | None = None,
        captured_at: datetime | None = None,
    ) -> Snapshot:
        """
        Replace a collection with a fresh capture.

        Any existing content of the collection is dropped before the new
        capture is inserted; both happen in one transaction.

        Args:
            name: Snapshot set name
            records: MetricRecords, or a mapping of title to star count
            collection: Collection to write (default: the store's collection)
            captured_at: Capture time (default: now, UTC)

        Returns:
            The Snapshot as stored

        Raises:
            StorageFailure: If the write fails; the previous capture is kept
        """
        collection = collection or self.collection
        captured_at = _as_utc(captured_at or datetime.now(timezone.utc))
        unique = _unique_records(records)

        try:
            with self._session_factory.begin() as session:
                existing = session.scalars(
                    select(SnapshotCollection).where(
                        SnapshotCollection.set_name == name,
                        SnapshotCollection.name == collection,
                    )
                ).one_or_none()
                if existing is not None:
                    session.delete(existing)
                    session.flush()

                session.add(
                    SnapshotCollection(
                        set_name=name,
                        name=collection,
                        captured_at=captured_at,
                        entries=[
                            SnapshotEntry(position=i, title=r.title, value=r.value)
                            for i, r in enumerate(unique)
                        ],
                    )
                )
        except SQLAlchemyError as e:
            raise StorageFailure(
                f"Can't write snapshot {name!r}/{collection!r}: {e}"
            ) from e

        log_storage_operation("write", name, collection, len(unique))
        return Snapshot(
            name=name,
            collection=collection,
            captured_at=captured_at,
            records=tuple(unique),
        )

    def read(self, name: str, collection: str | None = None) -> Snapshot | None:
        """
        Read a stored capture.

        Args:
            name: Snapshot set name
            collection: Collection to read (default: the store's collection)

        Returns:
            The Snapshot, or None if nothing has been captured under that name

        Raises:
            StorageFailure: If the read fails
        """
        collection = collection or self.collection
        try:
            with self._session_factory() as session:
                row = session.scalars(
                    select(SnapshotCollection)
                    .where(
                        SnapshotCollection.set_name == name,
                        SnapshotCollection.name == collection,
                    )
                    .options(selectinload(SnapshotCollection.entries))
                ).one_or_none()
                if row is None:
                    log_storage_operation("read", name, collection)
                    return None
                records = tuple(
                    MetricRecord(title=entry.title, value=entry.value)
                    for entry in row.entries
                )
                captured_at = _as_utc(row.captured_at)
        except SQLAlchemyError as e:
            raise StorageFailure(
                f"Can't read snapshot {name!r}/{collection!r}: {e}"
            ) from e

        log_storage_operation("read", name, collection, len(records))
        return Snapshot(
            name=name,
            collection=collection,
            captured_at=captured_at,
            records=records,
        )

    def captured_at(self, name: str, collection: str | None = None) -> datetime | None:
        """
        Get the capture time of a stored collection.

        Returns:
            Capture time (UTC), or None if the collection does not exist
        """
        collection = collection or self.collection
        try:
            with self._session_factory() as session:
                value = session.scalar(
                    select(SnapshotCollection.captured_at).where(
                        SnapshotCollection.set_name == name,
                        SnapshotCollection.name == collection,
                    )
                )
        except SQLAlchemyError as e:
            raise StorageFailure(
                f"Can't read capture time of {name!r}/{collection!r}: {e}"
            ) from e
        return _as_utc(value) if value is not None else None

    def list_names(self, name: str) -> Iterator[str]:
        """
        Enumerate the collections stored in a snapshot set.

        The query runs when the returned iterator is first consumed; every
        call re-reads the current state.

        Args:
            name: Snapshot set name

        Yields:
            Collection names in sorted order
        """
        log_storage_operation("list_names", name)
        try:
            with self._session_factory() as session:
                names = session.scalars(
                    select(SnapshotCollection.name)
                    .where(SnapshotCollection.set_name == name)
                    .order_by(SnapshotCollection.name)
                ).all()
        except SQLAlchemyError as e:
            raise StorageFailure(f"Can't list collections of {name!r}: {e}") from e
        yield from names

    def list_sets(self) -> Iterator[str]:
        """
        Enumerate known snapshot set names.

        Yields:
            Distinct snapshot set names in sorted order
        """
        log_storage_operation("list_sets", "*")
        try:
            with self._session_factory() as session:
                names = session.scalars(
                    select(SnapshotCollection.set_name)
                    .distinct()
                    .order_by(SnapshotCollection.set_name)
                ).all()
        except SQLAlchemyError as e:
            raise StorageFailure(f"Can't list snapshot sets: {e}") from e
        yield from names

    def close(self) -> None:
        """Release pooled database connections."""
        self.engine.dispose()

    def __enter__(self) -> "SnapshotStore":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = ["SnapshotStore", "SnapshotCollection", "SnapshotEntry", "Base"]
