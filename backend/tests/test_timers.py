import pytest

from cookmind.utils.timers import format_timer, parse_step_timer


@pytest.mark.parametrize(
    "step, expected_seconds",
    [
        ("Kook de pasta 10 minuten.", 600),
        ("Laat 30 min rusten", 1800),
        ("Laat 2 uur marineren", 7200),
        ("Laat 1,5 uur sudderen en roer 10 min door", 6000),
        ("Bak 1.5 minuten", 90),
        ("Blancheer 30 seconden", 30),
        ("Roer 45 sec", 45),
        ("Bake for 20 minutes", 1200),
    ],
)
def test_parse_step_timer(step, expected_seconds):
    timer = parse_step_timer(step)
    assert timer is not None
    assert timer.seconds == expected_seconds


def test_parse_step_timer_components():
    timer = parse_step_timer("Laat 1 uur en 15 minuten garen")
    assert timer.seconds == 4500
    assert timer.hours == 1
    assert timer.minutes == 15
    assert timer.original_text == "1 uur, 15 minuten"


@pytest.mark.parametrize("step", ["", "Snijd de ui fijn.", "Voeg 0 minuten toe", "Gebruik 2 eieren"])
def test_parse_step_timer_without_time(step):
    assert parse_step_timer(step) is None


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00"),
        (45, "00:45"),
        (600, "10:00"),
        (3599, "59:59"),
        (3600, "1:00:00"),
        (5430, "1:30:30"),
    ],
)
def test_format_timer(seconds, expected):
    assert format_timer(seconds) == expected
