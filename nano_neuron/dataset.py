import torch

# Tf = Tc * W + B
W = 1.8
B = 32.0
SAMPLE_COUNT = 100

DTYPE = torch.float64


def celsius_to_fahrenheit(c):
    """Ground-truth transform the unit is supposed to learn."""
    return c * W + B


# ============================================================================
# SAMPLE SETS
# ============================================================================

def as_column(values, name):
    """Convert to a 1-D float64 tensor. Only 1-D or (m, 1) shapes are accepted."""
    tensor = torch.as_tensor(values, dtype=DTYPE)
    if tensor.dim() == 2 and tensor.shape[1] == 1:
        return tensor.reshape(-1)
    if tensor.dim() != 1:
        raise ValueError(
            f"{name} must be 1-D or shaped (m, 1), got shape {tuple(tensor.shape)}"
        )
    return tensor


class SampleSet:
    """Paired inputs/targets, aligned by index."""
    def __init__(self, inputs, targets):
        self.inputs = as_column(inputs, "inputs")
        self.targets = as_column(targets, "targets")

        if self.inputs.shape[0] != self.targets.shape[0]:
            raise ValueError(
                f"inputs and targets differ in length: "
                f"{self.inputs.shape[0]} != {self.targets.shape[0]}"
            )
        if self.inputs.shape[0] == 0:
            raise ValueError("Sample set is empty.")

    def __len__(self):
        return self.inputs.shape[0]

    def astuple(self):
        return self.inputs, self.targets


# ============================================================================
# GENERATION
# ============================================================================

def generate_datasets():
    """
    Build the training and test sets from the ground-truth transform.

    Training inputs are the integers 0..99. Test inputs sit halfway between
    them (0.5..99.5) so no test point is also a training point.

    Returns:
        train_inputs, train_targets, test_inputs, test_targets (float64 tensors)
    """
    train_inputs = torch.arange(0, SAMPLE_COUNT, 1, dtype=DTYPE)
    train_targets = celsius_to_fahrenheit(train_inputs)

    test_inputs = torch.arange(0.5, SAMPLE_COUNT, 1, dtype=DTYPE)
    test_targets = celsius_to_fahrenheit(test_inputs)

    return train_inputs, train_targets, test_inputs, test_targets


def generate_sample_sets():
    """Same data as generate_datasets(), wrapped as (train, test) SampleSets."""
    train_inputs, train_targets, test_inputs, test_targets = generate_datasets()
    return SampleSet(train_inputs, train_targets), SampleSet(test_inputs, test_targets)
