from contextlib import contextmanager
from unittest.mock import patch

import pytest
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncEngine

from airbb.core.database.utils import create_sessionmaker


@pytest.fixture
def delete_before_update(test_engine: AsyncEngine):
    """Patch a repository's ``update`` so another session deletes the row first.

    The delete is committed through a separate session, so the request's own
    session still holds the row and its UPDATE matches nothing.
    """

    @contextmanager
    def _patch(repository_cls, entity_cls, key: str):
        original_update = repository_cls.update
        other_sessions = create_sessionmaker(test_engine)

        async def update_after_delete(self, entity):
            async with other_sessions() as other:
                await other.execute(delete(entity_cls).where(getattr(entity_cls, key) == getattr(entity, key)))
                await other.commit()
            return await original_update(self, entity)

        with patch.object(repository_cls, "update", update_after_delete):
            yield

    return _patch
