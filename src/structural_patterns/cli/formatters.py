"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- Text output mirroring the catalog's console demos
- JSON and YAML output keyed by pattern name
"""
from typing import Any, Dict, List

from structural_patterns.application.dto import PatternRunDTO

SEPARATOR = "****************************"


def format_output(runs: List[PatternRunDTO], format_type: str) -> str:
    """Format demo runs according to the specified format type."""
    if format_type == "json":
        import json

        return json.dumps(runs_to_dict(runs), indent=2)
    elif format_type == "yaml":
        import yaml

        return yaml.dump(runs_to_dict(runs), default_flow_style=False, sort_keys=False)
    else:
        return format_text_output(runs)


def runs_to_dict(runs: List[PatternRunDTO]) -> Dict[str, Any]:
    """Key each run's render lines and stats by pattern name."""
    return {
        run.pattern: {"lines": list(run.lines), "stats": dict(run.stats)}
        for run in runs
    }


def format_text_output(runs: List[PatternRunDTO]) -> str:
    """Banner, render lines and separator for each run."""
    lines: List[str] = []
    for run in runs:
        lines.append(run.banner)
        lines.extend(run.lines)
        lines.append(SEPARATOR)
    return "\n".join(lines)
