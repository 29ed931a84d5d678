"""Provider configuration repository over a :class:`RowStore`.

Row shape (``provider_configs``): ``id, name, type, api_key, base_url,
organization, custom_headers (JSON text or NULL), is_default (0/1)``.
At most one row is the default; setting a new default clears the old one
first.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..base.models import ProviderConfig, ProviderType
from .interfaces import Row, RowStore, StoredProviderConfig

_SELECT_ALL = "SELECT * FROM provider_configs ORDER BY is_default DESC, name ASC"
_CLEAR_DEFAULT = "UPDATE provider_configs SET is_default = 0 WHERE is_default = 1"

_UPDATABLE = ("name", "type", "api_key", "base_url", "organization", "custom_headers")


def _provider_type(value: Any) -> ProviderType | str:
    try:
        return ProviderType(value)
    except ValueError:
        return str(value)


def row_to_provider_config(row: Row) -> StoredProviderConfig:
    """Convert a ``provider_configs`` row into a stored config."""
    headers = row.get("custom_headers")
    return StoredProviderConfig(
        id=int(row["id"]),
        name=str(row["name"]),
        config=ProviderConfig(
            type=_provider_type(row["type"]),
            api_key=str(row["api_key"]),
            base_url=row.get("base_url") or None,
            organization=row.get("organization") or None,
            custom_headers=json.loads(headers) if headers else {},
        ),
        is_default=row.get("is_default") == 1,
    )


def config_to_row(name: str, config: ProviderConfig) -> Dict[str, Any]:
    """Column values for inserting ``config`` under ``name``."""
    return {
        "name": name,
        "type": config.type_name,
        "api_key": config.api_key,
        "base_url": config.base_url,
        "organization": config.organization,
        "custom_headers": json.dumps(config.custom_headers) if config.custom_headers else None,
    }


class ProviderConfigRepository:
    """CRUD access to stored provider configurations."""

    def __init__(self, store: RowStore) -> None:
        self._store = store

    async def get_all(self) -> List[StoredProviderConfig]:
        """All configs, default first, then by name."""
        rows = await self._store.get_all(_SELECT_ALL)
        return [row_to_provider_config(r) for r in rows]

    async def get_by_id(self, config_id: int) -> Optional[StoredProviderConfig]:
        row = await self._store.get("SELECT * FROM provider_configs WHERE id = ?", (config_id,))
        return row_to_provider_config(row) if row else None

    async def get_default(self) -> Optional[StoredProviderConfig]:
        row = await self._store.get("SELECT * FROM provider_configs WHERE is_default = 1 LIMIT 1")
        return row_to_provider_config(row) if row else None

    async def create(self, name: str, config: ProviderConfig, set_as_default: bool = False) -> int:
        """Insert a config and return its id."""
        values = config_to_row(name, config)
        if set_as_default:
            await self._store.execute(_CLEAR_DEFAULT)
        row = await self._store.get(
            "INSERT INTO provider_configs "
            "(name, type, api_key, base_url, organization, custom_headers, is_default) "
            "VALUES (?, ?, ?, ?, ?, ?, ?) RETURNING id",
            (
                values["name"],
                values["type"],
                values["api_key"],
                values["base_url"],
                values["organization"],
                values["custom_headers"],
                1 if set_as_default else 0,
            ),
        )
        if row is None:
            raise RuntimeError("INSERT into provider_configs returned no id")
        return int(row["id"])

    async def update(self, config_id: int, **fields: Any) -> None:
        """Update the given columns; unknown names raise ``ValueError``.

        ``custom_headers`` may be a mapping (stored as JSON) or ``None``.
        A call with no fields is a no-op.
        """
        unknown = set(fields) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Unknown provider config fields: {sorted(unknown)}")
        if not fields:
            return
        assignments: List[str] = []
        params: List[Any] = []
        for column in _UPDATABLE:
            if column not in fields:
                continue
            value = fields[column]
            if column == "custom_headers":
                value = json.dumps(dict(value)) if value else None
            elif column == "type" and isinstance(value, ProviderType):
                value = value.value
            assignments.append(f"{column} = ?")
            params.append(value)
        assignments.append("updated_at = datetime('now')")
        params.append(config_id)
        await self._store.execute(
            f"UPDATE provider_configs SET {', '.join(assignments)} WHERE id = ?",  # nosec B608 - fixed column names
            params,
        )

    async def set_default(self, config_id: int) -> None:
        await self._store.execute(_CLEAR_DEFAULT)
        await self._store.execute("UPDATE provider_configs SET is_default = 1 WHERE id = ?", (config_id,))

    async def delete(self, config_id: int) -> None:
        await self._store.execute("DELETE FROM provider_configs WHERE id = ?", (config_id,))


__all__ = ["row_to_provider_config", "config_to_row", "ProviderConfigRepository"]
