import math

from xivalexutil.stats import NumericStatisticsTracker


class FakeClock:
    def __init__(self):
        self.now = 1000

    def __call__(self):
        return self.now


def test_empty_returns_empty_value():
    t = NumericStatisticsTracker(4, -1)
    assert t.latest() == -1
    assert t.minimum() == -1
    assert t.maximum() == -1
    assert t.mean() == -1
    assert t.median() == -1
    assert t.deviation() == 0
    assert len(t) == 0


def test_basic_statistics():
    t = NumericStatisticsTracker(10, -1)
    for v in (3, 1, 2):
        t.add_value(v)
    assert t.latest() == 2
    assert t.minimum() == 1
    assert t.maximum() == 3
    assert t.median() == 2
    assert t.mean() == 2
    assert len(t) == 3


def test_mean_rounds_half_away_from_zero():
    t = NumericStatisticsTracker(10, 0)
    for v in (1, 2):
        t.add_value(v)
    assert t.mean() == 2
    n = NumericStatisticsTracker(10, 0)
    for v in (-1, -2):
        n.add_value(v)
    assert n.mean() == -2


def test_even_median_averages_middle_pair():
    t = NumericStatisticsTracker(10, 0)
    for v in (10, 20, 30, 40):
        t.add_value(v)
    assert t.minimum() <= t.median() <= t.maximum()
    assert t.median() == 25


def test_window_drops_oldest():
    t = NumericStatisticsTracker(2, -1)
    for v in (100, 5, 6):
        t.add_value(v)
    assert len(t) == 2
    assert t.maximum() == 6
    assert t.minimum() == 5


def test_deviation_of_constant_is_zero():
    t = NumericStatisticsTracker(5, 0)
    for _ in range(5):
        t.add_value(9)
    assert t.deviation() == 0
    assert t.mean() == 9


def test_deviation_is_non_negative_and_bounded():
    t = NumericStatisticsTracker(5, 0)
    for v in (0, 10, 20, 30, 40):
        t.add_value(v)
    assert 0 < t.deviation() <= t.maximum() - t.minimum()


def test_values_expire():
    clock = FakeClock()
    t = NumericStatisticsTracker(3, -1, max_age=100, clock=clock)
    t.add_value(1)
    clock.now += 50
    t.add_value(2)
    clock.now += 51
    assert len(t) == 1
    assert t.latest() == 2
    clock.now += 100
    assert len(t) == 0
    assert t.latest() == -1


def test_next_blank_in():
    clock = FakeClock()
    t = NumericStatisticsTracker(2, -1, max_age=100, clock=clock)
    t.add_value(1)
    assert t.next_blank_in() == 0
    t.add_value(2)
    clock.now += 30
    assert t.next_blank_in() == 70


def test_next_blank_in_without_expiry_is_infinite():
    t = NumericStatisticsTracker(1, -1)
    t.add_value(1)
    assert t.next_blank_in() == math.inf