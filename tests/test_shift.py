import pytest

from rescuekit.shift import Day, Shift


def test_shift_ending_before_start_is_rejected():
    with pytest.raises(ValueError):
        Shift(Day.MONDAY, 10, 8, 0)


def test_zero_length_shift_is_allowed():
    shift = Shift(Day.MONDAY, 9, 9, 3)
    assert shift.length == 0


@pytest.mark.parametrize(
    "day, expected",
    [
        (Day.SUNDAY, "{ Sunday, 08:00 - 12:00, value $0 }"),
        (Day.WEDNESDAY, "{ Wednesday, 08:00 - 12:00, value $0 }"),
        (Day.SATURDAY, "{ Saturday, 08:00 - 12:00, value $0 }"),
    ],
)
def test_day_names(day, expected):
    assert str(Shift(day, 8, 12, 0)) == expected


def test_days_are_in_week_order():
    assert Shift(0, 8, 12).day is Day.SUNDAY
    assert Shift(6, 8, 12).day is Day.SATURDAY
    saturday = Shift(Day.SATURDAY, 8, 12, 0)
    wednesday = Shift(Day.WEDNESDAY, 8, 12, 0)
    sunday = Shift(Day.SUNDAY, 8, 12, 0)
    assert sorted([saturday, wednesday, sunday]) == [sunday, wednesday, saturday]


def test_string_format():
    assert str(Shift(Day.SUNDAY, 8, 14, 5)) == "{ Sunday, 08:00 - 14:00, value $5 }"


def test_ordering_is_day_then_start_then_end_then_value():
    a = Shift(Day.SUNDAY, 12, 18, 0)
    b = Shift(Day.MONDAY, 8, 12, 0)
    c = Shift(Day.MONDAY, 8, 16, 0)
    d = Shift(Day.MONDAY, 8, 16, 7)
    e = Shift(Day.MONDAY, 12, 16, 0)
    assert sorted([e, d, c, b, a]) == [a, b, c, d, e]


def test_equal_shifts_hash_alike():
    shifts = {Shift(Day.FRIDAY, 8, 12, 4), Shift(Day.FRIDAY, 8, 12, 4)}
    assert len(shifts) == 1
    assert Shift(Day.FRIDAY, 8, 12, 4) != Shift(Day.FRIDAY, 8, 12, 5)


def test_day_accepts_plain_integer():
    assert Shift(2, 8, 12).day is Day.TUESDAY


def test_overlapping_shifts_on_same_day():
    long_shift = Shift(Day.MONDAY, 8, 16)
    inner = Shift(Day.MONDAY, 12, 20)
    assert long_shift.overlaps_with(inner)
    assert inner.overlaps_with(long_shift)


def test_adjacent_shifts_do_not_overlap():
    morning = Shift(Day.TUESDAY, 8, 12)
    afternoon = Shift(Day.TUESDAY, 12, 16)
    assert not morning.overlaps_with(afternoon)
    assert not afternoon.overlaps_with(morning)


def test_shifts_on_different_days_do_not_overlap():
    assert not Shift(Day.MONDAY, 8, 12).overlaps_with(Shift(Day.TUESDAY, 8, 12))


def test_shift_overlaps_itself():
    shift = Shift(Day.THURSDAY, 8, 12)
    assert shift.overlaps_with(shift)


def test_length_adds_up_across_adjacent_shifts():
    first = Shift(Day.MONDAY, 8, 12)
    second = Shift(Day.MONDAY, 12, 16)
    combined = Shift(Day.MONDAY, 8, 16)
    assert first.length + second.length == combined.length