"""Small helpers shared by models, services and routes."""
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal, InvalidOperation

TWO_PLACES = Decimal('0.01')
ONE_PLACE = Decimal('0.1')


def to_decimal(value, default=None):
    """Coerce a string/number to Decimal, going through str() so floats keep their printed value."""
    if value is None or value == '':
        return default
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f'Invalid decimal value: {value!r}')


def money(value):
    """Render an amount as a two-decimal string, the wire format for money."""
    if value is None:
        return None
    return str(to_decimal(value).quantize(TWO_PLACES))


def mileage(value):
    if value is None:
        return None
    return str(to_decimal(value).quantize(ONE_PLACE))


def coord(value):
    if value is None:
        return None
    return str(to_decimal(value))


def iso(value):
    return value.isoformat() if value else None


def parse_date(value):
    """Parse YYYY-MM-DD (or a full ISO timestamp) into a date."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value[:10], '%Y-%m-%d').date()
    except (TypeError, ValueError):
        raise ValueError(f'Invalid date: {value!r}, expected YYYY-MM-DD')


def parse_datetime(value):
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value
    try:
        parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        raise ValueError(f'Invalid timestamp: {value!r}')
    # Stored timestamps are naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def day_window(day):
    """Half-open [start, end) datetime window covering one calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)
