"""SQLAlchemy-backed capability handles for host tables.

Host applications whose voters and votables live in SQL tables can
register these instead of writing handles by hand:

    users = TableHandle(User, users_table, session_factory, row_to_user)
    posts = CounterCacheHandle(
        Post, posts_table, session_factory, row_to_post, column="votes_count"
    )
    registry = TypeRegistry([users, posts])

Both handles open their own session per call, so the cache update
commits independently of the vote write. An entity kind that votes and
keeps a counter combines them: class UserHandle(CounterCacheHandle, VoterHandle).
"""

from typing import Any, Callable, Dict, Mapping, Sequence

import logfire
from sqlalchemy import Table, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from votex.domain.capability import EntityHandle, VotableHandle, VoterHandle
from votex.domain.value import Identifier, to_identifier

RowMapper = Callable[[Dict[str, Any]], Any]


def _coerce(column: Any, identifier: Identifier) -> Any:
    """Convert a stored identifier back to the key column's Python type."""
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return identifier
    return identifier if isinstance(identifier, python_type) else python_type(identifier)


class TableAccess(EntityHandle):
    """Identifier extraction and batch loading for entities in a SQL table."""

    def __init__(
        self,
        entity: type,
        table: Table,
        session_factory: async_sessionmaker[AsyncSession],
        row_mapper: RowMapper,
        type_tag: str | None = None,
        key_column: str = "id",
    ) -> None:
        """Initialize handle.

        Args:
            entity: Entity class
            table: Table holding the entities
            session_factory: Factory for database sessions
            row_mapper: Converts a row dict to an entity instance
            type_tag: Tag stored on vote records (defaults to the class name)
            key_column: Primary key column name
        """
        super().__init__(entity, type_tag)
        self.table = table
        self.session_factory = session_factory
        self.row_mapper = row_mapper
        self.key_column = key_column

    def get_identifier(self, instance: Any) -> Any | None:
        return getattr(instance, self.key_column, None)

    async def load(self, identifiers: Sequence[Identifier]) -> Mapping[Identifier, Any]:
        """Load entities with a single IN query."""
        if not identifiers:
            return {}

        key = self.table.c[self.key_column]
        stmt = select(self.table).where(key.in_([_coerce(key, i) for i in identifiers]))
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = [row._asdict() for row in result.fetchall()]

        return {to_identifier(row[self.key_column]): self.row_mapper(row) for row in rows}


class TableHandle(TableAccess, VoterHandle):
    """Voter handle for entities stored in a SQL table."""


class CounterCacheHandle(TableAccess, VotableHandle):
    """Votable handle keeping a vote counter column on the entity table.

    The counter is adjusted with an atomic UPDATE (col = col + 1), so two
    concurrent votes on the same row cannot lose an increment. The counter
    never goes below zero.
    """

    def __init__(
        self,
        entity: type,
        table: Table,
        session_factory: async_sessionmaker[AsyncSession],
        row_mapper: RowMapper,
        column: str = "votes_count",
        type_tag: str | None = None,
        key_column: str = "id",
    ) -> None:
        super().__init__(
            entity,
            table,
            session_factory,
            row_mapper,
            type_tag=type_tag,
            key_column=key_column,
        )
        self.column = column

    async def recalculate_cache(self, votable_id: Identifier, increment: bool) -> None:
        """Atomically adjust the counter column by one."""
        counter = self.table.c[self.column]
        key = self.table.c[self.key_column]
        stmt = self.table.update().where(key == _coerce(key, votable_id))
        if increment:
            stmt = stmt.values({self.column: counter + 1})
        else:
            stmt = stmt.where(counter > 0).values({self.column: counter - 1})

        async with self.session_factory.begin() as session:
            result = await session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            logfire.warn(
                "Counter cache not updated",
                type_tag=self.type_tag,
                votable_id=votable_id,
                column=self.column,
                increment=increment,
            )
