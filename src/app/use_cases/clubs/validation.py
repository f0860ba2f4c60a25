"""
Club field validation shared by create and update.
"""

import re
from typing import Any, Dict, Optional

from libs.result import Error
from src.domain.entities import ClubModule, ClubType

LOGO_URL_PATTERN = re.compile(r"^https?://.+\.(jpg|jpeg|png|gif|svg|webp)$", re.IGNORECASE)

CLUB_FIELDS = ("name", "type", "description", "logo_url", "enabled_modules")


def _invalid(message: str) -> Error:
    return Error("INVALID_CLUB_DATA", message)


def validate_club_data(data: Dict[str, Any], partial: bool = False) -> Optional[Error]:
    """
    Validate club fields.

    Args:
        data: Field values; only the keys present are checked
        partial: True for updates, where name and type may be omitted

    Returns:
        None if valid, otherwise INVALID_CLUB_DATA
    """
    unknown = set(data) - set(CLUB_FIELDS)
    if unknown:
        return _invalid(f"Unknown club fields: {', '.join(sorted(unknown))}")

    if not partial:
        for required in ("name", "type"):
            if data.get(required) is None:
                return _invalid(f"Club {required} is required")

    if "name" in data:
        name = (data["name"] or "").strip()
        if len(name) < 2 or len(name) > 100:
            return _invalid("Club name must be between 2 and 100 characters")

    if "type" in data:
        valid_types = [t.value for t in ClubType]
        if data["type"] not in valid_types:
            return _invalid(f"Club type must be one of: {', '.join(valid_types)}")

    description = data.get("description")
    if description is not None and len(description) > 500:
        return _invalid("Description must be at most 500 characters")

    logo_url = data.get("logo_url")
    if logo_url and not LOGO_URL_PATTERN.match(logo_url):
        return _invalid("Logo URL must be a valid image URL (jpg, jpeg, png, gif, svg, webp)")

    if "enabled_modules" in data:
        modules = data["enabled_modules"]
        valid_modules = [m.value for m in ClubModule]
        if modules is None:
            return _invalid("enabled_modules must be a list")
        invalid = [m for m in modules if m not in valid_modules]
        if invalid:
            return _invalid(f"Invalid modules: {', '.join(map(str, invalid))}")

    return None
