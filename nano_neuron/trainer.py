import logging
import numbers

import numpy as np

from .dataset import SampleSet
from .propagation import backward, forward

logger = logging.getLogger(__name__)


def check_hyperparameters(epochs, alpha):
    """Raise ValueError unless epochs is a non-negative int and alpha > 0."""
    if isinstance(epochs, bool) or not isinstance(epochs, numbers.Integral) or epochs < 0:
        raise ValueError(f"epochs must be a non-negative integer, got {epochs!r}")
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real) or not alpha > 0:
        raise ValueError(f"alpha must be a positive number, got {alpha!r}")


# ============================================================================
# TRAINING LOOP
# ============================================================================

def train(model, epochs, alpha, inputs, targets, log_interval=None):
    """
    Full-batch gradient descent on the linear unit.

    Each epoch runs forward, records the average cost, runs backward, then
    moves w and b by their deltas scaled by alpha. The model is updated in
    place. A learning rate that is too large makes the cost blow up; nothing
    here stops that.

    Args:
        model: LinearUnit to train (mutated)
        epochs: Number of full passes over the training set
        alpha: Learning rate
        inputs: Training Celsius values
        targets: Training Fahrenheit values
        log_interval: Log progress every N epochs (None disables logging)

    Returns:
        Cost history, one average cost per epoch
    """
    check_hyperparameters(epochs, alpha)
    inputs, targets = SampleSet(inputs, targets).astuple()

    cost_history = []

    for epoch in range(epochs):
        predictions, average_cost = forward(model, inputs, targets)
        cost_history.append(average_cost)

        avg_delta_w, avg_delta_b = backward(predictions, inputs, targets)

        model.w += avg_delta_w * alpha
        model.b += avg_delta_b * alpha

        if log_interval and ((epoch + 1) % log_interval == 0 or epoch + 1 == epochs):
            logger.info(
                "Epoch %d | cost=%.6f | w=%.4f, b=%.4f",
                epoch + 1, average_cost, model.w, model.b,
            )

    return cost_history


# ============================================================================
# EVALUATION
# ============================================================================

def evaluate(model, inputs, targets):
    """
    Score a model on a held-out sample set.

    Returns:
        Dict with the average cost and the largest absolute prediction error
    """
    samples = SampleSet(inputs, targets)
    predictions, average_cost = forward(model, samples.inputs, samples.targets)
    max_abs_error = (samples.targets - predictions).abs().max().item()

    return {
        'cost': average_cost,
        'max_abs_error': max_abs_error,
        'samples': len(samples),
    }


def summarize_history(cost_history):
    """First/last/min/mean of a cost history (None values when it is empty)."""
    if len(cost_history) == 0:
        return {'epochs': 0, 'first': None, 'last': None, 'min': None, 'mean': None}

    costs = np.asarray(cost_history, dtype=np.float64)
    return {
        'epochs': int(costs.shape[0]),
        'first': float(costs[0]),
        'last': float(costs[-1]),
        'min': float(np.min(costs)),
        'mean': float(np.mean(costs)),
    }
