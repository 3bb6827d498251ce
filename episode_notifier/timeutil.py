"""时间与时区换算。"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import TimeError


def resolve_zone(name: str) -> ZoneInfo:
    """把 IANA 时区名解析为 ZoneInfo，未知时区抛出 TimeError。"""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TimeError(f"无效的时区：{name}") from exc


def parse_utc(timestamp: str) -> datetime:
    """解析 ISO-8601 UTC 时间戳，无时区信息时按 UTC 处理。"""

    if not isinstance(timestamp, str) or not timestamp.strip():
        raise TimeError(f"无效的时间戳：{timestamp!r}")
    value = timestamp.strip()
    # 旧版本 fromisoformat 不认识结尾的 Z
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise TimeError(f"无法解析时间戳：{timestamp}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_local(timestamp: str, zone_name: str) -> datetime:
    return parse_utc(timestamp).astimezone(resolve_zone(zone_name))


def today_in(zone_name: str, now: Optional[datetime] = None) -> date:
    zone = resolve_zone(zone_name)
    if now is None:
        return datetime.now(zone).date()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(zone).date()


_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    return f"{day}{_SUFFIXES.get(day % 10, 'th')}"


def format_air_time(moment: datetime) -> str:
    """格式化为 "Sunday, January 12th, 2025 at 10:00 PM EST"。"""

    hour = moment.hour % 12 or 12
    return (
        f"{moment.strftime('%A, %B')} {_ordinal(moment.day)}, {moment.year}"
        f" at {hour}:{moment.strftime('%M %p')} {moment.strftime('%Z')}"
    )
