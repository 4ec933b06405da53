import pytest

from nano_neuron import PROFILES, QUICK_CONFIG, STANDARD_CONFIG, get_profile, validate_config


def test_standard_profile_uses_reference_constants():
    assert STANDARD_CONFIG['epochs'] == 70000
    assert STANDARD_CONFIG['alpha'] == 0.0005


def test_all_profiles_validate():
    for config in PROFILES.values():
        assert validate_config(config) is config


def test_get_profile_returns_copy():
    profile = get_profile('quick')
    profile['epochs'] = 1
    assert QUICK_CONFIG['epochs'] == 5


def test_get_profile_unknown_key():
    with pytest.raises(ValueError, match="Unknown profile"):
        get_profile('turbo')


def test_validate_config_missing_field():
    with pytest.raises(ValueError, match="alpha"):
        validate_config({'epochs': 10})


def test_validate_config_bad_values():
    with pytest.raises(ValueError):
        validate_config({'epochs': -3, 'alpha': 0.1})
    with pytest.raises(ValueError):
        validate_config({'epochs': 3, 'alpha': 0.0})
    with pytest.raises(ValueError, match="log_interval"):
        validate_config({'epochs': 3, 'alpha': 0.1, 'log_interval': 0})
