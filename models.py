"""
models.py - Flat records for the two service responses and the run outcome.

Short link service, GET /api/v1/links/{id}:
{
    "status": 200,
    "data": {"id": "...", "alias": "...", "url": "<destination>", "short_url": "..."}
}

Campaign service, GET /3.0/campaigns:
{
    "total_items": 1,
    "campaigns": [{"id": "...", "archive_url": "...", "status": "sent"}]
}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


def _require_object(payload: Any, what: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError(f"{what} response is not a JSON object")
    return payload


def _string_field(obj: Dict[str, Any], key: str, what: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{what} field '{key}' is not a string")
    return value


@dataclass
class ShortLinkState:
    status: int = 0
    id: str = ""
    alias: str = ""
    url: str = ""
    short_url: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "ShortLinkState":
        payload = _require_object(payload, "Short link")
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise ValueError("Short link response field 'data' is not an object")
        return cls(
            status=payload.get("status") or 0,
            id=str(data.get("id") or ""),
            alias=_string_field(data, "alias", "Short link"),
            url=_string_field(data, "url", "Short link"),
            short_url=_string_field(data, "short_url", "Short link"),
        )


@dataclass
class Campaign:
    id: str = ""
    archive_url: str = ""
    status: str = ""


@dataclass
class CampaignList:
    total_items: int = 0
    campaigns: List[Campaign] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "CampaignList":
        payload = _require_object(payload, "Campaign list")
        items = payload.get("campaigns") or []
        if not isinstance(items, list):
            raise ValueError("Campaign list field 'campaigns' is not an array")
        campaigns = []
        for item in items:
            item = _require_object(item, "Campaign")
            campaigns.append(
                Campaign(
                    id=item.get("id") or "",
                    archive_url=_string_field(item, "archive_url", "Campaign"),
                    status=_string_field(item, "status", "Campaign"),
                )
            )
        return cls(total_items=payload.get("total_items") or 0, campaigns=campaigns)

    def latest_archive_url(self) -> str:
        """Archive URL of the only campaign, or "" unless exactly one was returned."""
        if len(self.campaigns) == 1:
            return self.campaigns[0].archive_url
        return ""


@dataclass
class SyncResult:
    current_destination: str
    campaign_url: str
    updated: bool = False

    @property
    def update_required(self) -> bool:
        return self.current_destination != self.campaign_url

    def summary(self) -> str:
        """Body of the status email."""
        lines = [
            f"Current UrlDay: {self.current_destination}",
            f"Current MailChimp: {self.campaign_url}",
        ]
        if self.update_required:
            lines.append("\tUpdate Required")
            if self.updated:
                lines.append("\tUpdate Successful")
        else:
            lines.append("\tNO Update Required")
        return "\n".join(lines)
