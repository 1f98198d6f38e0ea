import pytest

from withdrawcurve.config import (
    DEFAULT_INPUTS,
    MAX_WITHDRAW_PERCENT,
    ScenarioConfig,
    ScenarioError,
    ScenarioInputs,
    derive_config,
)


def test_derived_bounds():
    cfg = derive_config(ScenarioInputs(60, 2025, 30, 4.0))

    assert cfg.min_year == 2025
    assert cfg.max_year == 2055
    assert cfg.plan_end_age == 90
    assert cfg.min_withdraw_percent == 0.0
    assert cfg.max_withdraw_percent == 10.0


def test_config_is_immutable():
    cfg = derive_config(DEFAULT_INPUTS)

    with pytest.raises(AttributeError):
        cfg.current_age = 70


def test_reference_may_equal_maximum():
    cfg = derive_config(ScenarioInputs(60, 2025, 30, MAX_WITHDRAW_PERCENT))

    assert cfg.reference_withdraw_percent == MAX_WITHDRAW_PERCENT


@pytest.mark.parametrize("reference", [0.0, -1.0, 10.01])
def test_reference_out_of_range_is_rejected(reference):
    with pytest.raises(ScenarioError):
        derive_config(ScenarioInputs(60, 2025, 30, reference))


@pytest.mark.parametrize("duration", [0, -5])
def test_non_positive_duration_is_rejected(duration):
    with pytest.raises(ScenarioError):
        derive_config(ScenarioInputs(60, 2025, duration, 4.0))


def test_direct_construction_checks_duration():
    with pytest.raises(ScenarioError, match="duration"):
        ScenarioConfig(current_age=60, start_year=2025, plan_duration_years=0, reference_withdraw_percent=4.0)


def test_direct_construction_checks_reference_against_own_bounds():
    with pytest.raises(ScenarioError, match="Reference rate"):
        ScenarioConfig(60, 2025, 30, 6.0, min_withdraw_percent=0.0, max_withdraw_percent=5.0)
