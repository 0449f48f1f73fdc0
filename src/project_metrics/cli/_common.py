"""Shared CLI helpers."""

import json
from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from ..exceptions import InvalidReportError
from ..models import ProjectResult

console = Console()


def format_percent(value: Optional[float]) -> str:
    """Render a percentage for display; unset values show as a dash."""
    if value is None:
        return "-"
    return f"{value:.1f}%"


def read_result_document(path: Path) -> ProjectResult:
    """Load a result document (or a bare report list) from a JSON file."""
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidReportError(f"not valid JSON: {e.msg}", str(path)) from e
    except UnicodeDecodeError as e:
        raise InvalidReportError(f"not valid UTF-8: {e.reason} at byte {e.start}", str(path)) from e
    except OSError as e:
        raise InvalidReportError(f"cannot read file: {e.strerror or e}", str(path)) from e
    return ProjectResult.from_dict(data)
