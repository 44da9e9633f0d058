"""Report helpers: body decoding and the stdout log record."""

from __future__ import annotations

import codecs
import json
import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from fastapi import Request

REPORT_BANNER = "--- ✅ Received Report ---"
REPORT_TRAILER = "-----------------------"
MAX_REPORT_DEPTH = 256


class ReportError(ValueError):
    """Request body could not be accepted as a report."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MalformedReportError(ReportError):
    status_code = 400


class ReportTooLargeError(ReportError):
    status_code = 413


class UnsupportedCharsetError(ReportError):
    status_code = 415


def is_json_media_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


def body_charset(content_type: Optional[str]) -> str:
    """Charset declared on the content type, ``utf-8`` when absent.

    Only the ``utf-*`` family is accepted.
    """
    charset = "utf-8"
    for param in (content_type or "").split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            charset = value.strip().strip('"').lower()
    if not charset.startswith("utf-"):
        raise UnsupportedCharsetError(f'Unsupported charset "{charset.upper()}"')
    try:
        codecs.lookup(charset)
    except LookupError:
        raise UnsupportedCharsetError(f'Unsupported charset "{charset.upper()}"')
    return charset


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name} in JSON")


def report_depth(report: Any) -> int:
    depth = 0
    pending = [(report, 1)]
    while pending:
        value, level = pending.pop()
        if isinstance(value, dict):
            children = value.values()
        elif isinstance(value, list):
            children = value
        else:
            continue
        depth = max(depth, level)
        pending.extend((child, level + 1) for child in children)
    return depth


def parse_report(raw: bytes, charset: str = "utf-8") -> Any:
    """Parse a raw JSON body. An empty body is treated as an empty object."""
    if not raw:
        return {}
    try:
        report = json.loads(raw.decode(charset), parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedReportError(f"Malformed JSON body: {e}")
    except RecursionError:
        raise MalformedReportError(f"JSON body nested deeper than {MAX_REPORT_DEPTH} levels.")

    # the pretty printer recurses once per level
    if report_depth(report) > MAX_REPORT_DEPTH:
        raise MalformedReportError(f"JSON body nested deeper than {MAX_REPORT_DEPTH} levels.")
    return report


async def read_report(request: Request, max_body_bytes: int) -> Any:
    """
    Read and decode the report carried by ``request``.

    - Bodies with a non-JSON content type are not read and decode to ``{}``
    - ``Content-Length`` above ``max_body_bytes`` is rejected before reading
    - Streamed bodies are rejected as soon as they cross the ceiling
    """
    content_type = request.headers.get("content-type")
    if not is_json_media_type(content_type):
        return {}
    charset = body_charset(content_type)

    declared = request.headers.get("content-length")
    if declared is not None:
        try:
            declared_size = int(declared)
        except ValueError:
            raise MalformedReportError("Invalid Content-Length header.")
        if declared_size > max_body_bytes:
            raise ReportTooLargeError(f"Request body too large. Maximum size is {max_body_bytes} bytes.")

    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > max_body_bytes:
            raise ReportTooLargeError(f"Request body too large. Maximum size is {max_body_bytes} bytes.")
        chunks.append(chunk)

    return parse_report(b"".join(chunks), charset)


def format_timestamp(moment: datetime) -> str:
    # e.g. 2024-05-01T12:30:00.123Z
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def format_report_log(report: Any, received_at: datetime) -> str:
    return "\n".join(
        [
            REPORT_BANNER,
            f"Timestamp: {format_timestamp(received_at)}",
            f"Body: {json.dumps(report, indent=2, ensure_ascii=False)}",
            REPORT_TRAILER + "\n",
        ]
    )


def log_report(report: Any, received_at: Optional[datetime] = None, stream: Optional[TextIO] = None) -> str:
    """Write one report record to stdout (or ``stream``) and return it."""
    if received_at is None:
        received_at = datetime.now(timezone.utc)
    record = format_report_log(report, received_at)
    print(record, file=stream or sys.stdout, flush=True)
    return record
