"""Feed records — one parsed line of the carrier event feed.

Line format: ``type,id,timestamp[,payload]``. The line is split into at
most four fields, so a payload containing commas is kept verbatim.
Only the field count and the integer timestamp are validated: any type
and id strings, empty or long, make a record.
"""

from protean.exceptions import ValidationError
from protean.fields import Integer, Text

from tracking.domain import tracking

FIELD_DELIMITER = ","
MAX_FIELDS = 4


@tracking.value_object
class TrackingRecord:
    """A single timestamped event for one shipment."""

    event_type = Text(sanitize=False)
    shipment_id = Text(sanitize=False)
    timestamp = Integer(required=True)
    payload = Text(sanitize=False)


def parse_record(line: str) -> TrackingRecord:
    """Parse one feed line into a ``TrackingRecord``.

    Raises:
        ValidationError: If the line has fewer than three fields or the
            timestamp is not a base-10 integer.
    """
    parts = line.rstrip("\r\n").split(FIELD_DELIMITER, MAX_FIELDS - 1)
    if len(parts) < 3:
        raise ValidationError({"line": [f"Expected at least 3 fields, got {len(parts)}: {line!r}"]})

    event_type, shipment_id, timestamp = parts[0], parts[1], parts[2]
    payload = parts[3] if len(parts) == MAX_FIELDS and parts[3] else None

    try:
        timestamp = int(timestamp)
    except ValueError:
        raise ValidationError({"timestamp": [f"Invalid timestamp {timestamp!r}"]}) from None

    return TrackingRecord(
        event_type=event_type,
        shipment_id=shipment_id,
        timestamp=timestamp,
        payload=payload,
    )
