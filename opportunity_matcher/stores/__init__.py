"""Store backends for profiles, opportunities and matches."""

from opportunity_matcher.config import AppConfig
from opportunity_matcher.stores.base import MatchStore, OpportunityStore, ProfileStore


def build_stores(config: AppConfig) -> tuple[ProfileStore, OpportunityStore, MatchStore]:
    """Build the configured backend; one object serves all three roles."""
    upsert = config.matching.persist_mode == "upsert"

    if config.store.backend == "sql":
        from opportunity_matcher.models import create_session_factory
        from opportunity_matcher.stores.sql import SqlStore

        store = SqlStore(create_session_factory(config.store.database_url, create_tables=True), upsert=upsert)
    elif config.store.backend == "rest":
        from opportunity_matcher.stores.rest import SupabaseStore

        store = SupabaseStore(config.store, upsert=upsert)
    else:
        raise ValueError(f"Unknown store backend: {config.store.backend}")

    return store, store, store


__all__ = ["ProfileStore", "OpportunityStore", "MatchStore", "build_stores"]
