"""JSON files holding training-content fragments."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from domain.entities import ContentFragment, ScoredResult
from domain.errors import InvalidArgument, RetrievalUnavailable
from domain.interfaces import FragmentSource

logger = logging.getLogger(__name__)


class JsonFragmentSource(FragmentSource):
    """Reads ``[{...}]`` or ``{"fragments": [{...}]}`` files and writes exports."""

    def load(self, path: str | Path) -> list[ContentFragment]:
        file_path = Path(path)
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise RetrievalUnavailable(f"Corpus file not found: {file_path}") from exc
        except (OSError, ValueError) as exc:
            raise RetrievalUnavailable(f"Corpus file {file_path} is unreadable: {exc}") from exc

        if isinstance(payload, dict):
            if "fragments" not in payload:
                raise InvalidArgument(f"Corpus file {file_path} has no \"fragments\" key.")
            records = payload["fragments"]
        else:
            records = payload
        if not isinstance(records, list):
            raise InvalidArgument(f"Corpus file {file_path} does not contain a list of fragments.")
        fragments = [self._parse(record, position) for position, record in enumerate(records)]
        logger.info("Loaded %d fragments from %s", len(fragments), file_path)
        return fragments

    def export(self, fragments: Sequence[ContentFragment], path: str | Path) -> None:
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "fragments": [fragment_to_dict(fragment) for fragment in fragments],
            "exportedAt": datetime.now(timezone.utc).isoformat(),
            "totalEntries": len(fragments),
        }
        file_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    @staticmethod
    def _parse(record: Any, position: int) -> ContentFragment:
        if not isinstance(record, dict):
            raise InvalidArgument(f"Fragment #{position} is not an object.")
        missing = [key for key in ("id", "title", "body") if key not in record]
        if missing:
            raise InvalidArgument(f"Fragment #{position} is missing {', '.join(missing)}.")
        source_ref = record.get("sourceRef", record.get("source_ref"))
        tags = record.get("tags") or ()
        if isinstance(tags, str):
            tags = (tags,)
        return ContentFragment(
            id=str(record["id"]),
            title=str(record["title"] or ""),
            body=str(record["body"] or ""),
            source_ref=str(source_ref) if source_ref is not None else None,
            category=record.get("category"),
            tags=tuple(str(tag) for tag in tags),
        )


def fragment_to_dict(fragment: ContentFragment) -> dict[str, Any]:
    return {
        "id": fragment.id,
        "title": fragment.title,
        "body": fragment.body,
        "sourceRef": fragment.source_ref,
        "category": fragment.category,
        "tags": list(fragment.tags),
    }


def scored_result_to_dict(result: ScoredResult) -> dict[str, Any]:
    payload = fragment_to_dict(result.fragment)
    payload["relevance"] = result.relevance
    payload["rank"] = result.rank
    return payload


__all__ = ["JsonFragmentSource", "fragment_to_dict", "scored_result_to_dict"]
