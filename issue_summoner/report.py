"""Report payloads handed to reporting collaborators.

The issue tracker integration and the interactive selection UI live outside
this package. They consume the structures built here: IssuePayload for
creating issues, and the JSON report for everything else.
"""

import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from issue_summoner.tag.models import Tag
from issue_summoner.utils.logging import logger


@dataclass(frozen=True)
class IssuePayload:
    """Title and body of an issue to open for one tag."""

    title: str
    body: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def build_issue_payload(tag: Tag) -> IssuePayload:
    location = f"Location: {tag.source_file}:{tag.line_number}"
    body = f"{tag.description}\n\n{location}" if tag.description else location
    return IssuePayload(title=tag.title, body=body)


def build_issue_payloads(tags: Iterable[Tag]) -> list[IssuePayload]:
    return [build_issue_payload(tag) for tag in tags]


def build_report(tags: list[Tag], root: str, annotation: str) -> dict[str, Any]:
    """Assemble the JSON-serializable scan report."""
    return {
        "root": root,
        "annotation": annotation,
        "total": len(tags),
        "tags": [tag.to_dict() for tag in tags],
    }


def write_report(report: dict[str, Any], path: str | Path) -> Path:
    """Write ``report`` as indented JSON, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
        f.write("\n")
    logger.debug(f"Report written to {out}")
    return out
