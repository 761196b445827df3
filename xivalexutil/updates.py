"""Release information fetched from a JSON release endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Union
from urllib import request


@dataclass(frozen=True)
class VersionInformation:
    name: str
    body: str
    publish_date: datetime
    download_link: str
    download_size: int


def parse_release(data: Union[str, bytes, Mapping[str, Any]]) -> VersionInformation:
    """Read the latest-release document; its first asset is the download."""
    parsed = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
    assets = parsed["assets"]
    if not assets:
        raise RuntimeError("Could not detect updates. Please try again at a later time.")
    item = assets[0]

    published = parsed["published_at"]
    try:
        stamp = datetime.strptime(published, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    except (TypeError, ValueError):
        raise ValueError(f'Failed to parse datetime string "{published}"') from None

    return VersionInformation(
        name=str(parsed["name"]),
        body=str(parsed["body"]),
        publish_date=stamp.astimezone(),
        download_link=str(item["browser_download_url"]),
        download_size=int(item["size"]),
    )


def check_updates(url: str, timeout: float = 30.0) -> VersionInformation:
    """Fetch ``url`` and parse it as a latest-release document."""
    req = request.Request(url, headers={"User-Agent": "Mozilla/5.0"})
    with request.urlopen(req, timeout=timeout) as response:
        return parse_release(response.read())