"""JSON envelope printed by every non-interactive todo command."""

import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

EXIT_OK = 0
EXIT_ERROR = 1


def iso_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_response(
    command: str,
    status: str,
    message: str,
    payload: Optional[Dict[str, Any]] = None,
    summary: Optional[str] = None,
) -> Dict[str, Any]:
    envelope: Dict[str, Any] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": dict(payload or {}),
    }
    if summary:
        envelope["summary"] = summary
    return envelope


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict[str, Any]] = None,
    summary: Optional[str] = None,
    exit_code: int = EXIT_OK,
    stream: Optional[TextIO] = None,
) -> int:
    """Print the envelope as indented JSON and hand back the exit code."""
    envelope = build_response(command, status, message, payload, summary)
    print(json.dumps(envelope, ensure_ascii=False, indent=2), file=stream or sys.stdout)
    return exit_code


def structured_error(command: str, message: str, *, payload: Optional[Dict[str, Any]] = None) -> int:
    return structured_response(command, status="ERROR", message=message, payload=payload, exit_code=EXIT_ERROR)


__all__ = ["EXIT_OK", "EXIT_ERROR", "iso_timestamp", "build_response", "structured_response", "structured_error"]
