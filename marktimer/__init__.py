from marktimer.clock import Clock, ManualClock, utc_now
from marktimer.time import NotStarted, Started, State, Timer
from marktimer.version import __version__

__all__ = [
    "Clock",
    "ManualClock",
    "NotStarted",
    "Started",
    "State",
    "Timer",
    "__version__",
    "utc_now",
]
