from .trainer import check_hyperparameters

# ============================================================================
# CONFIGURATION PROFILES
# ============================================================================

QUICK_CONFIG = {
    'name': 'Quick look (5 epochs)',
    'epochs': 5,
    'alpha': 0.0005,
    'seed': None,  # None = fresh random start
    'log_interval': 1,
}

STANDARD_CONFIG = {
    'name': 'Full training (70000 epochs)',
    'epochs': 70000,
    'alpha': 0.0005,  # above ~0.0006 the cost diverges on this data
    'seed': None,
    'log_interval': 10000,
}

PROFILES = {
    'quick': QUICK_CONFIG,
    'standard': STANDARD_CONFIG,
}


def get_profile(key):
    """Return a copy of a named profile."""
    if key not in PROFILES:
        raise ValueError(f"Unknown profile {key!r}, expected one of {sorted(PROFILES)}")
    return dict(PROFILES[key])


def validate_config(config):
    """Check a profile dict has usable training settings."""
    for field in ('epochs', 'alpha'):
        if field not in config:
            raise ValueError(f"Config is missing '{field}'")
    check_hyperparameters(config['epochs'], config['alpha'])
    log_interval = config.get('log_interval')
    if log_interval is not None and (not isinstance(log_interval, int) or log_interval <= 0):
        raise ValueError(f"log_interval must be a positive integer or None, got {log_interval!r}")
    return config
