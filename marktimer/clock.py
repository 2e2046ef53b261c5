import datetime
import typing

Clock = typing.Callable[[], datetime.datetime]

EPOCH = datetime.datetime(2000, 1, 1, tzinfo=datetime.timezone.utc)


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class ManualClock:
    """Clock that only moves when told to.

    Usable anywhere a Clock is accepted, so elapsed times can be made
    deterministic.
    """

    def __init__(self, start: datetime.datetime | None = None):
        self._now = EPOCH if start is None else start

    def __call__(self) -> datetime.datetime:
        return self._now

    def __repr__(self):
        return f"ManualClock({self._now.isoformat()})"

    def advance(self, milliseconds: float = 0, **kwargs) -> datetime.datetime:
        self._now += datetime.timedelta(milliseconds=milliseconds, **kwargs)
        return self._now

    def rewind(self, milliseconds: float = 0, **kwargs) -> datetime.datetime:
        self._now -= datetime.timedelta(milliseconds=milliseconds, **kwargs)
        return self._now

    def set(self, instant: datetime.datetime) -> datetime.datetime:
        self._now = instant
        return self._now
