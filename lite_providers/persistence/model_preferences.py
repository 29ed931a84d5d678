"""Model preference repository over a :class:`RowStore`.

One row per ``(provider_id, model_id)``. Using a model upserts its row and
stamps ``last_used``; favorites are toggled explicitly. Listings put
favorites first, then the most recently used.
"""

from __future__ import annotations

from typing import List, Optional

from .interfaces import ModelPreference, Row, RowStore

_UPSERT = (
    "INSERT INTO model_preferences (provider_id, model_id, model_name, last_used) "
    "VALUES (?, ?, ?, datetime('now')) "
    "ON CONFLICT(provider_id, model_id) "
    "DO UPDATE SET last_used = datetime('now'), model_name = excluded.model_name"
)


def row_to_model_preference(row: Row) -> ModelPreference:
    return ModelPreference(
        id=int(row["id"]),
        provider_id=int(row["provider_id"]),
        model_id=str(row["model_id"]),
        model_name=str(row["model_name"]),
        is_favorite=row.get("is_favorite") == 1,
        last_used=row.get("last_used"),
    )


class ModelPreferenceRepository:
    """Record model usage and favorites per stored provider config."""

    def __init__(self, store: RowStore) -> None:
        self._store = store

    async def record_usage(self, provider_id: int, model_id: str, model_name: Optional[str] = None) -> None:
        """Upsert the row for this model and refresh ``last_used``."""
        await self._store.execute(_UPSERT, (provider_id, model_id, model_name or model_id))

    async def get_preferences(self, provider_id: int) -> List[ModelPreference]:
        rows = await self._store.get_all(
            "SELECT * FROM model_preferences WHERE provider_id = ? "
            "ORDER BY is_favorite DESC, last_used DESC, id DESC",
            (provider_id,),
        )
        return [row_to_model_preference(r) for r in rows]

    async def toggle_favorite(self, provider_id: int, model_id: str) -> None:
        """Flip the favorite flag; a model never used has no row and is left alone."""
        await self._store.execute(
            "UPDATE model_preferences "
            "SET is_favorite = CASE WHEN is_favorite = 1 THEN 0 ELSE 1 END "
            "WHERE provider_id = ? AND model_id = ?",
            (provider_id, model_id),
        )


__all__ = ["row_to_model_preference", "ModelPreferenceRepository"]
