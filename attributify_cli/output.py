"""Shared output utilities for CLI verbs."""

import json
import sys
from typing import Any, Dict, Optional


def ok_response(
    data: Any = None, metadata: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create standard success response."""
    result: Dict[str, Any] = {"success": True}
    if data is not None:
        result["data"] = data
    if metadata:
        result["metadata"] = metadata
    return result


def print_result(result: Dict, compact: bool = False) -> None:
    """Print a result dict as JSON to stdout."""
    indent = None if compact else 2
    print(json.dumps(result, indent=indent, default=str))


def die(msg: str, code: int = 1) -> None:
    """Print error to stderr and exit."""
    print(f"error: {msg}", file=sys.stderr)
    sys.exit(code)
