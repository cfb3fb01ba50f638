import pytest

from netcrypt.leaky_bucket import main, simulate


def _one_burst_then_fail():
    yield 2
    raise AssertionError("read past the first burst")


def test_stops_at_zero():
    arrivals = list(simulate(3, 10, [5, 12, 4, 0, 7]))
    assert [a.incoming for a in arrivals] == [5, 12, 4]


def test_overflow_flags_and_pending():
    arrivals = list(simulate(3, 10, [5, 12, 4]))
    assert [a.overflow for a in arrivals] == [False, True, False]
    assert [a.pending for a in arrivals] == [5, 0, 4]
    assert arrivals[1].ticks == ()


def test_exactly_full_bucket_fits():
    (arrival,) = simulate(4, 10, [10])
    assert arrival.overflow is False
    assert arrival.pending == 10


def test_negative_burst_overflows():
    (arrival,) = simulate(4, 10, [-3])
    assert arrival.overflow is True
    assert arrival.pending == 0


def test_tick_invariants():
    rate = 3
    arrivals = list(simulate(rate, 20, [7, 25, 9, 1]))
    times = [t.time for a in arrivals for t in a.ticks]
    assert times == list(range(len(times)))
    for arrival in arrivals:
        assert sum(t.sent for t in arrival.ticks) == arrival.pending
        assert all(0 < t.sent <= rate for t in arrival.ticks)
        remaining = [t.remaining for t in arrival.ticks]
        assert remaining == sorted(remaining, reverse=True)
        if arrival.ticks:
            assert arrival.ticks[-1].remaining == 0


def test_is_lazy_over_input():
    first = next(simulate(5, 10, _one_burst_then_fail()))
    assert first.pending == 2


@pytest.mark.parametrize("rate, size", [(0, 10), (-1, 10), (3, -1)])
def test_invalid_parameters(rate, size):
    with pytest.raises(ValueError):
        simulate(rate, size, [1])


def test_main_output(capsys):
    assert main(["--rate", "3", "--size", "10", "5", "12", "0"]) == 0
    out = capsys.readouterr().out
    assert "Overflow!! Dropping packets" in out
    assert "Incoming packet :5" in out
    assert "Time:0sec-Transmitted3 packets" in out


def test_main_prompts(monkeypatch, capsys):
    answers = iter(["2 10", "4", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Incoming packet :4" in out
    assert "Overflow" not in out


def test_main_rejects_bad_rate(capsys):
    assert main(["--rate", "0", "--size", "10", "3"]) == 1
    assert "error" in capsys.readouterr().err