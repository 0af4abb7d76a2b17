"""12-hour clock formatting"""
from datetime import datetime


def pad(value: int) -> str:
    """Left-pads a clock field to two digits."""
    text = str(value)
    if 0 <= value < 10:
        return "0" + text
    return text


def to_twelve_hour(hour: int) -> tuple[int, str]:
    """
    Converts a 0-23 hour into its 12-hour display form.

    :param hour: hour of the day, 0 to 23
    :return: (display_hour, meridiem), e.g. 0 -> (12, "AM"), 13 -> (1, "PM")
    """
    meridiem = "PM" if hour >= 12 else "AM"
    return hour % 12 or 12, meridiem


def format_time(instant: datetime, pad_hour: bool = False) -> str:
    """
    Formats an instant as "H:MM:SS AM" in local time.

    Naive datetimes are taken as already local, aware ones are converted.
    With pad_hour the hour gets a leading zero too ("01:05:09 PM").
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone()

    hour, meridiem = to_twelve_hour(instant.hour)
    hour_text = pad(hour) if pad_hour else str(hour)
    return f"{hour_text}:{pad(instant.minute)}:{pad(instant.second)} {meridiem}"
