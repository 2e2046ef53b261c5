import dataclasses
import datetime
import logging
import typing

from marktimer import clock as clock_

logger = logging.getLogger(__name__)

_MILLISECOND = datetime.timedelta(milliseconds=1)


@dataclasses.dataclass(frozen=True)
class NotStarted:
    pass


@dataclasses.dataclass(frozen=True)
class Started:
    last_marked: datetime.datetime


State = typing.Union[NotStarted, Started]


class Timer:
    """Reports the time elapsed between successive marks.

    The first mark starts the timer and reports zero, so any time between
    construction and the first mark is not counted. Later marks report the
    whole milliseconds since the previous one. A clock that goes backwards
    yields zero rather than a negative value.
    """

    def __init__(self, clock: clock_.Clock | None = None):
        self._clock = clock_.utc_now if clock is None else clock
        self._state: State = NotStarted()

    def __repr__(self):
        return f"Timer({self._state!r})"

    def __eq__(self, other):
        if not isinstance(other, Timer):
            return NotImplemented
        return self._state == other._state

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self):
        timer = Timer(self._clock)
        timer._state = self._state
        return timer

    @property
    def state(self) -> State:
        return self._state

    @property
    def started(self) -> bool:
        return isinstance(self._state, Started)

    @property
    def last_marked(self) -> datetime.datetime | None:
        if isinstance(self._state, Started):
            return self._state.last_marked
        return None

    def mark_millis(self) -> int:
        now = self._clock()
        state = self._state
        self._state = Started(last_marked=now)
        if isinstance(state, NotStarted):
            return 0

        # floored to whole milliseconds
        delta = (now - state.last_marked) // _MILLISECOND
        if delta < 0:
            logger.debug(
                f"Clock moved back {-delta}ms since last mark ({state.last_marked.isoformat()})"
            )
            return 0
        return delta

    def mark_seconds(self) -> float:
        return self.mark_millis() / 1000

    def mark_duration(self) -> datetime.timedelta:
        return datetime.timedelta(milliseconds=self.mark_millis())

    mark = mark_seconds
