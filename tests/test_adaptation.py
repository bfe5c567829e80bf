import pytest

from antcolony.adaptation import (
    ParameterAdapter,
    ParameterSchedule,
    Variation,
    clamp,
)


def _adapter(n_ants=None, beta=None, rho=None, q0=None):
    return ParameterAdapter(
        n_ants or ParameterSchedule(25),
        beta or ParameterSchedule(2.0),
        rho or ParameterSchedule(0.5),
        q0 or ParameterSchedule(0.0),
    )


@pytest.mark.parametrize(
    "value,start,end,expected",
    [
        (5, 1, 10, 5),
        (0, 1, 10, 1),
        (20, 1, 10, 10),
        (5, 10, 1, 5),
        (20, 10, 1, 10),
        (0, 10, 1, 1),
    ],
)
def test_clamp_both_orientations(value, start, end, expected):
    assert clamp(value, start, end) == expected


def test_schedule_end_defaults_to_start():
    schedule = ParameterSchedule(3.5)
    assert schedule.end == 3.5
    assert schedule.value == 3.5


def test_none_variation_keeps_value():
    adapter = _adapter()
    adapter.init()
    for it in range(1, 50):
        adapter.next_iteration(it)
    assert adapter.beta.value == 2.0
    assert adapter.n_ants.value == 25


def test_delta_increases_and_clamps_at_end():
    beta = ParameterSchedule(1.0, 3.0, Variation.DELTA, delta=0.5)
    adapter = _adapter(beta=beta)
    adapter.init()
    adapter.next_iteration(1)
    assert adapter.beta.value == pytest.approx(1.0 + 0.5)
    for it in range(2, 20):
        adapter.next_iteration(it)
    assert adapter.beta.value == pytest.approx(3.0)


def test_delta_decreases_when_end_below_start():
    rho = ParameterSchedule(0.9, 0.1, Variation.DELTA, delta=0.2)
    adapter = _adapter(rho=rho)
    adapter.init()
    adapter.next_iteration(1)
    assert adapter.rho.value == pytest.approx(0.9 - 0.2)
    for it in range(2, 20):
        adapter.next_iteration(it)
        assert 0.1 <= adapter.rho.value <= 0.9
    assert adapter.rho.value == pytest.approx(0.1)


def test_switch_happens_at_given_iteration():
    q0 = ParameterSchedule(0.0, 0.9, Variation.SWITCH, switch=3)
    adapter = _adapter(q0=q0)
    adapter.init()
    adapter.next_iteration(1)
    adapter.next_iteration(2)
    assert adapter.q0.value == 0.0
    adapter.next_iteration(3)
    assert adapter.q0.value == 0.9


def test_fractional_n_ants_delta_accumulates():
    n_ants = ParameterSchedule(10, 20, Variation.DELTA, delta=0.5)
    adapter = _adapter(n_ants=n_ants)
    adapter.init()
    adapter.next_iteration(1)
    assert adapter.n_ants.value == 10
    adapter.next_iteration(2)
    assert adapter.n_ants.value == 10 + 1
    for it in range(3, 100):
        adapter.next_iteration(it)
    assert adapter.n_ants.value == 20


def test_n_ants_decreasing_delta():
    n_ants = ParameterSchedule(20, 5, Variation.DELTA, delta=3)
    adapter = _adapter(n_ants=n_ants)
    adapter.init()
    adapter.next_iteration(1)
    assert adapter.n_ants.value == 20 - 3
    for it in range(2, 30):
        adapter.next_iteration(it)
    assert adapter.n_ants.value == 5


def test_init_resets_values():
    n_ants = ParameterSchedule(10, 20, Variation.SWITCH, switch=1)
    beta = ParameterSchedule(1.0, 3.0, Variation.DELTA, delta=1.0)
    adapter = _adapter(n_ants=n_ants, beta=beta)
    adapter.init()
    adapter.next_iteration(1)
    assert adapter.n_ants.value == 20
    adapter.init()
    assert adapter.n_ants.value == 10
    assert adapter.beta.value == 1.0