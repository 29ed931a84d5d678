"""Persistence contracts: row store protocol and repositories built on it.

Concrete database drivers live outside this package; anything satisfying
:class:`RowStore` can back the repositories.
"""

from .interfaces import MessageRecord, ModelPreference, Row, RowStore, StoredProviderConfig
from .messages import MessageRepository, row_to_message_record
from .model_preferences import ModelPreferenceRepository, row_to_model_preference
from .provider_configs import ProviderConfigRepository, config_to_row, row_to_provider_config
from .schema import SCHEMA_SQL

__all__ = [
    "Row",
    "RowStore",
    "StoredProviderConfig",
    "MessageRecord",
    "ModelPreference",
    "ModelPreferenceRepository",
    "row_to_model_preference",
    "MessageRepository",
    "row_to_message_record",
    "ProviderConfigRepository",
    "config_to_row",
    "row_to_provider_config",
    "SCHEMA_SQL",
]
