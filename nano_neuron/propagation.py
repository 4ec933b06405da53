from .dataset import SampleSet, as_column


def prediction_cost(y, y_predicted):
    """
    Squared error scaled by 1/2 (the 1/2 cancels when differentiating).

    y=33.8, y_predicted=33.95 -> 0.01125 (good)
    y=33.8, y_predicted=459.1 -> 90440.045 (bad)
    """
    return (y - y_predicted) ** 2 / 2


# ============================================================================
# FORWARD PASS
# ============================================================================

def forward(model, inputs, targets):
    """
    Run the model over every sample and average the per-sample cost.

    Args:
        model: LinearUnit (read only)
        inputs: Celsius values
        targets: Fahrenheit values, aligned with inputs

    Returns:
        predictions (tensor, same order as inputs), average_cost (float)
    """
    samples = SampleSet(inputs, targets)
    m = len(samples)

    predictions = model.predict(samples.inputs)
    cost = prediction_cost(samples.targets, predictions)
    average_cost = cost.sum().item() / m

    return predictions, average_cost


# ============================================================================
# BACKWARD PASS
# ============================================================================

def backward(predictions, inputs, targets):
    """
    Average parameter deltas for the 1/2-scaled mean squared error.

    Differentiating (t - (x*w + b))^2 / 2 gives -(t - p) * x for w and
    -(t - p) for b. The deltas returned are those derivatives negated, so a
    positive delta means the parameter has to grow to reduce the cost.

    Args:
        predictions: Output of forward() for this same sample set
        inputs: Celsius values
        targets: Fahrenheit values, aligned with inputs

    Returns:
        avg_delta_w, avg_delta_b (floats)
    """
    samples = SampleSet(inputs, targets)
    predictions = as_column(predictions, "predictions")
    m = len(samples)

    if predictions.shape[0] != m:
        raise ValueError(
            f"predictions are not aligned with the sample set: "
            f"{predictions.shape[0]} != {m}"
        )

    error = samples.targets - predictions
    avg_delta_w = (error * samples.inputs).sum().item() / m
    avg_delta_b = error.sum().item() / m

    return avg_delta_w, avg_delta_b
