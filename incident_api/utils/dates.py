from datetime import datetime, timezone

from incident_api.errors import ValidationError


def parse_datetime(value, field='dateTime'):
    """Parse an ISO-8601 timestamp into a naive UTC datetime.

    Aware values (including a trailing 'Z') are converted to UTC; naive
    values are returned as given. Datetime instances pass through the same
    normalization.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f'Invalid {field}: expected an ISO 8601 datetime', field=field)
        text = value.strip()
        if text.endswith('Z') or text.endswith('z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f'Invalid {field}: {value!r} is not an ISO 8601 datetime', field=field)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_locale_datetime(value, fmt=None):
    """Render a datetime the way a US-English locale prints it: 1/2/2024, 5:00:00 AM."""
    if value is None:
        return ''
    if fmt:
        return value.strftime(fmt)
    hour = value.hour % 12 or 12
    meridiem = 'AM' if value.hour < 12 else 'PM'
    return f'{value.month}/{value.day}/{value.year}, {hour}:{value.minute:02d}:{value.second:02d} {meridiem}'
