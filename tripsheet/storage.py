from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def read_json(path: Path) -> dict[str, Any]:
    payload = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(payload, dict):
        raise ValueError(f'expected a JSON object in {path}')
    return payload


def write_bytes_atomic(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + '.tmp')
    tmp.write_bytes(data)
    tmp.replace(path)


def _slug(value: str) -> str:
    token = re.sub(r'\s+', '-', str(value or '').strip().lower())
    token = re.sub(r'[^a-z0-9-]', '', token)
    return re.sub(r'-{2,}', '-', token).strip('-') or 'client'


def build_output_filename(client_name: str, now: datetime | None = None) -> str:
    moment = now or datetime.now(timezone.utc)
    timestamp = int(moment.timestamp() * 1000)
    return f'luxury-itinerary-{_slug(client_name)}-{timestamp}.pdf'
