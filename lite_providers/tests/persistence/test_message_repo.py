from __future__ import annotations

import pytest

from lite_providers.base.models import Message
from lite_providers.persistence import MessageRepository


async def test_history_is_ordered_and_scoped(row_store):
    repo = MessageRepository(row_store)
    await repo.save_message("c1", "user", "hello", model="m")
    await repo.save_message("c2", "user", "other chat")
    await repo.save_message("c1", "assistant", "hi there", model="m", tokens_prompt=3, tokens_completion=2)

    assert await repo.get_history("c1") == [
        Message(role="user", content="hello"),
        Message(role="assistant", content="hi there"),
    ]
    records = await repo.get_records("c1")
    assert records[1].tokens_completion == 2
    assert records[0].created_at


async def test_save_returns_increasing_ids(row_store):
    repo = MessageRepository(row_store)
    first = await repo.save_message("c", "user", "a")
    second = await repo.save_message("c", "assistant", "b")
    assert second > first


async def test_invalid_role_rejected(row_store):
    with pytest.raises(ValueError):
        await MessageRepository(row_store).save_message("c", "tool", "x")
    assert await MessageRepository(row_store).get_history("c") == []
