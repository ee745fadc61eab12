"""Serialize a plan's missing targets for command output (private)."""

from pathlib import Path
from typing import Any

from .MissingLinkPlan import MissingLinkPlan


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def _plan_to_output(missing_plan: MissingLinkPlan) -> list[dict[str, Any]]:
    return [
        {
            "target": target,
            "file": missing_plan.target_file(target),
            "occurrences": [
                {"source_file": _relative(loc.source_file, missing_plan.root), "line_number": loc.line_number}
                for loc in locations
            ],
        }
        for target, locations in missing_plan.missing.items()
    ]
