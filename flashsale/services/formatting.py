import os
from datetime import datetime, timedelta, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

DISPLAY_UTC_OFFSET_MIN = int(os.getenv("FLASHSALE_DISPLAY_UTC_OFFSET_MIN", "330"))
DISPLAY_TZ = timezone(timedelta(minutes=DISPLAY_UTC_OFFSET_MIN))
INVALID_DATE = "Invalid Date"
EXPIRED = "Expired"
INVALID_REMAINING = "NaNm remaining"
CURRENCY_SYMBOL = "₹"

# en-IN abbreviates September as "Sept".
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sept", "Oct", "Nov", "Dec")
_MS_PER_MINUTE = 60 * 1000
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """
    Read an ISO 8601 string or a datetime as an aware UTC datetime.

    Naive values are taken as UTC. Anything unparsable gives None, the
    equivalent of an "invalid date": it never compares and formats as a
    placeholder instead of raising.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw[-1] in {"Z", "z"}:
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def resolve_now(now: datetime | None) -> datetime:
    return parse_timestamp(now) if now is not None else utc_now()


def format_date(value: Any, tz: tzinfo | None = None) -> str:
    """Render a timestamp the en-IN way, e.g. ``20 Jan 2024, 05:30 am``."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return INVALID_DATE
    local = parsed.astimezone(tz or DISPLAY_TZ)
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{local.day} {_MONTHS[local.month - 1]} {local.year}, {hour:02d}:{local.minute:02d} {meridiem}"


def _group_indian(digits: str) -> str:
    # Last three digits stay together, the rest is grouped in pairs.
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: Any) -> str:
    """Render an amount as Indian Rupees, e.g. ``₹1,25,000.00``."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        return f"{CURRENCY_SYMBOL}NaN"
    if value.is_nan():
        return f"{CURRENCY_SYMBOL}NaN"
    if value.is_infinite():
        return f"{'-' if value < 0 else ''}{CURRENCY_SYMBOL}∞"

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        rounded = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        whole, fraction = f"{abs(rounded):.2f}".split(".")
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{fraction}"


def format_date_for_input(value: Any) -> str:
    """UTC ``YYYY-MM-DDTHH:mm`` for a datetime-local input; empty when unparsable."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    return (
        f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"
        f"T{parsed.hour:02d}:{parsed.minute:02d}"
    )


def get_remaining_time(end_date: Any, now: datetime | None = None) -> str:
    end = parse_timestamp(end_date)
    if end is None:
        return INVALID_REMAINING
    diff_ms = (end - resolve_now(now)) // timedelta(milliseconds=1)
    if diff_ms <= 0:
        return EXPIRED

    days = diff_ms // _MS_PER_DAY
    hours = (diff_ms % _MS_PER_DAY) // _MS_PER_HOUR
    minutes = (diff_ms % _MS_PER_HOUR) // _MS_PER_MINUTE

    if days > 0:
        return f"{days}d {hours}h remaining"
    if hours > 0:
        return f"{hours}h {minutes}m remaining"
    return f"{minutes}m remaining"
