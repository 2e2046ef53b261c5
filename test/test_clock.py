import datetime

from marktimer import clock


def test_utc_now_is_aware():
    now = clock.utc_now()
    assert now.tzinfo is datetime.timezone.utc
    assert clock.utc_now() - now >= datetime.timedelta(0)


def test_manual_clock_default_start():
    assert clock.ManualClock()() == clock.EPOCH


def test_manual_clock_moves_only_when_told():
    start = datetime.datetime(2024, 5, 1, 12, tzinfo=datetime.timezone.utc)
    manual = clock.ManualClock(start)
    assert manual() == manual() == start

    assert manual.advance(250) == start + datetime.timedelta(milliseconds=250)
    assert manual.advance(seconds=1) == start + datetime.timedelta(
        milliseconds=1250
    )
    assert manual.rewind(100) == start + datetime.timedelta(milliseconds=1150)
    assert manual() == start + datetime.timedelta(milliseconds=1150)

    assert manual.set(start) == start
    assert manual() == start


def test_manual_clock_repr():
    assert repr(clock.ManualClock()) == "ManualClock(2000-01-01T00:00:00+00:00)"
