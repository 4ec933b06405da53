from .dataset import (
    B,
    SAMPLE_COUNT,
    W,
    SampleSet,
    celsius_to_fahrenheit,
    generate_datasets,
    generate_sample_sets,
)
from .model import LinearUnit
from .propagation import backward, forward, prediction_cost
from .trainer import evaluate, summarize_history, train
from .config import PROFILES, QUICK_CONFIG, STANDARD_CONFIG, get_profile, validate_config
