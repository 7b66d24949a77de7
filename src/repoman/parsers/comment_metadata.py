"""Extract structured ``* Name: value`` metadata from issue and comment bodies.

Documentation feedback issues end with a generated block such as::

    #### Document Details

    * ID: 0a1b2c3d
    * Content Source: [docs/csharp/index.md](https://github.com/...)
    * Product: **dotnet-csharp**
    * GitHub Login: @someone

Only the lines after the first configured header are scanned. When no header
is present the whole body is scanned.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from repoman.config.model import RulesSettings

logger = logging.getLogger(__name__)

_EMPHASIS_CHARS: str = "*`_"


class MetadataExtractor(Protocol):
    """Scans a body for comment markers and returns marker name -> captured text."""

    def extract(self, body: str) -> dict[str, str]: ...


class CommentMetadataExtractor:
    """Regex-driven extractor configured from the rules document settings."""

    def __init__(self, settings: RulesSettings | None = None) -> None:
        resolved = settings or RulesSettings()
        self._headers = resolved.metadata_headers
        self._pattern = re.compile(resolved.metadata_parser)

    def extract(self, body: str) -> dict[str, str]:
        if not body:
            return {}

        lines = body.splitlines()
        start = self._header_line(lines)
        metadata: dict[str, str] = {}
        for line in lines[start:]:
            match = self._pattern.match(line)
            if match is None:
                continue
            name = match.group("name").strip().strip(_EMPHASIS_CHARS).strip()
            if not name or name in metadata:
                continue
            metadata[name] = _clean_value(match.group("value"))

        logger.debug("Extracted %d metadata field(s)", len(metadata))
        return metadata

    def _header_line(self, lines: list[str]) -> int:
        for index, line in enumerate(lines):
            stripped = line.strip()
            if any(stripped.startswith(header) for header in self._headers):
                return index + 1
        return 0


def _clean_value(raw: str) -> str:
    value = raw.strip()
    # **bold** and `code` wrappers are presentation only.
    while len(value) >= 2 and value[0] == value[-1] and value[0] in _EMPHASIS_CHARS:
        value = value[1:-1].strip()
    return value
