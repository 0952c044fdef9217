import time

import pytest

from unixplay.ticker import countdown, main, ticker_interval


def test_ticker_interval_half_second():
    assert ticker_interval(500) == 0.5


@pytest.mark.parametrize("msecs", [0, 1, 999, 1000, 1500, 60000])
def test_ticker_interval_matches_milliseconds(msecs):
    assert ticker_interval(msecs) * 1000 == pytest.approx(msecs)


def test_ticker_interval_rejects_negative():
    with pytest.raises(ValueError):
        ticker_interval(-1)


def test_countdown_runs_to_zero():
    values = list(countdown(10))
    assert values[0] == 10
    assert values[-1] == 0
    assert len(values) == 11
    assert values == sorted(values, reverse=True)


def test_countdown_from_zero():
    assert list(countdown(0)) == [0]


def test_sleep_test_output(monkeypatch, capsys):
    slept = []
    monkeypatch.setattr(time, "sleep", slept.append)
    assert main(["--sleep"]) == 0
    assert capsys.readouterr().out == "hello world\nThe second hello world\n"
    assert slept == [2]


def test_main_counts_down(capsys):
    assert main(["10"]) == 0
    expected = "".join(f"{n}.." for n in range(10, -1, -1)) + "DONE!\n"
    assert capsys.readouterr().out == expected


def test_main_rejects_bad_interval():
    assert main(["soon"]) == 1
    assert main(["0"]) == 1