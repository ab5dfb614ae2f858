"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

STORE_BACKENDS = ("rest", "sql")
PERSIST_MODES = ("append", "upsert")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StoreConfig:
    backend: str = "rest"
    supabase_url: str = ""
    service_role_key: str = ""
    database_url: str = "sqlite:///data/opportunity_matcher.db"
    timeout_seconds: int = 30
    profiles_table: str = "profiles"
    opportunities_table: str = "opportunities"
    matches_table: str = "student_matches"


@dataclass
class MatchingConfig:
    acceptance_threshold: int = 40
    completion_threshold: float = 50.0
    top_n: int = 10
    max_workers: int = 1
    persist_mode: str = "append"  # append, upsert


@dataclass
class AppConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    log_dir: str = "logs"  # empty = console only
    log_level: str = "INFO"


def _normalize_database_url(url: str) -> str:
    # Hosted Postgres often hands out postgres:// but SQLAlchemy 2.x requires postgresql://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Store (env vars take precedence for endpoints and credentials)
    store_raw = raw.get("store", {})
    config.store = StoreConfig(
        backend=store_raw.get("backend", "rest"),
        supabase_url=os.environ.get("SUPABASE_URL", store_raw.get("supabase_url", "")).rstrip("/"),
        service_role_key=os.environ.get(
            "SUPABASE_SERVICE_ROLE_KEY", store_raw.get("service_role_key", "")
        ),
        database_url=_normalize_database_url(
            os.environ.get(
                "DATABASE_URL",
                store_raw.get("database_url", "sqlite:///data/opportunity_matcher.db"),
            )
        ),
        timeout_seconds=store_raw.get("timeout_seconds", 30),
        profiles_table=store_raw.get("profiles_table", "profiles"),
        opportunities_table=store_raw.get("opportunities_table", "opportunities"),
        matches_table=store_raw.get("matches_table", "student_matches"),
    )

    # Matching
    matching_raw = raw.get("matching", {})
    config.matching = MatchingConfig(
        acceptance_threshold=matching_raw.get("acceptance_threshold", 40),
        completion_threshold=matching_raw.get("completion_threshold", 50.0),
        top_n=matching_raw.get("top_n", 10),
        max_workers=matching_raw.get("max_workers", 1),
        persist_mode=matching_raw.get("persist_mode", "append"),
    )

    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = os.environ.get("LOG_LEVEL", raw.get("log_level", "INFO"))

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if config.store.backend not in STORE_BACKENDS:
        warnings.append(
            f"Unknown store backend '{config.store.backend}' (expected one of: {', '.join(STORE_BACKENDS)})"
        )

    if config.store.backend == "rest":
        if not config.store.supabase_url:
            warnings.append("No Supabase URL configured - profile and opportunity fetches will fail")
        if not config.store.service_role_key:
            warnings.append("No service role key configured - store requests will be rejected")

    if config.store.backend == "sql" and not config.store.database_url:
        warnings.append("SQL backend selected but no database_url configured")

    if config.matching.persist_mode not in PERSIST_MODES:
        warnings.append(
            f"Unknown persist mode '{config.matching.persist_mode}' - falling back to append"
        )

    if not 0 <= config.matching.acceptance_threshold <= 100:
        warnings.append("Acceptance threshold should be between 0 and 100")

    if not 0 <= config.matching.completion_threshold <= 100:
        warnings.append("Completion threshold should be between 0 and 100")

    if config.matching.top_n < 1:
        warnings.append("top_n should be at least 1")

    if config.matching.max_workers < 1:
        warnings.append("max_workers should be at least 1 - scoring will run sequentially")

    if str(config.log_level).upper() not in LOG_LEVELS:
        warnings.append(f"Unknown log level '{config.log_level}' - falling back to INFO")

    return warnings
