from datetime import datetime
import pytz


def get_current_time(timezone_name="Asia/Kolkata") -> datetime:
    """
    Current wall-clock time in the given timezone (IST by default).
    """
    return datetime.now(pytz.timezone(timezone_name))


def localize_datetime(value: datetime, timezone_name="Asia/Kolkata") -> datetime:
    """
    Attach the timezone to a naive datetime, or convert an aware one into it.
    """
    local_tz = pytz.timezone(timezone_name)
    if value.tzinfo is None:
        return local_tz.localize(value)
    return value.astimezone(local_tz)
