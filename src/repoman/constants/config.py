"""Rules-document keys and configuration defaults."""

from __future__ import annotations

RULES_FILENAME: str = ".repoman.yml"

KEY_REVISION: str = "revision"
KEY_SCHEMA_VERSION: str = "schema-version"
KEY_OWNER: str = "owner-ms-alias"
KEY_CONFIG: str = "config"

RESERVED_TOP_KEYS: frozenset[str] = frozenset({KEY_REVISION, KEY_SCHEMA_VERSION, KEY_OWNER, KEY_CONFIG})

CONFIG_METADATA_HEADERS: str = "metadata-headers"
CONFIG_METADATA_PARSER: str = "metadata-parser"
CONFIG_RERUN_LABEL_PREFIX: str = "rerun-label-prefix"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {CONFIG_METADATA_HEADERS, CONFIG_METADATA_PARSER, CONFIG_RERUN_LABEL_PREFIX}
)

DEFAULT_METADATA_HEADERS: tuple[str, ...] = (
    "#### Document Details",
    "<!-- issue-metadata -->",
)
DEFAULT_METADATA_PARSER: str = r"^\s*[*-]\s+(?P<name>[^:]+?):\s*(?P<value>.*)$"
DEFAULT_RERUN_LABEL_PREFIX: str = "rerun-action-"

# GitHub's content API occasionally prepends a literal '?' to decoded files.
CONTENT_API_STRAY_PREFIX: str = "?"
