import pytest
import torch

from nano_neuron import SampleSet, celsius_to_fahrenheit, generate_datasets, generate_sample_sets


def test_training_inputs_are_integers_0_to_99():
    train_inputs, _, _, _ = generate_datasets()
    assert train_inputs.shape == (100,)
    assert train_inputs.tolist() == [float(i) for i in range(100)]


def test_test_inputs_are_offset_by_half():
    train_inputs, _, test_inputs, _ = generate_datasets()
    assert test_inputs.shape == (100,)
    assert test_inputs[0].item() == 0.5
    assert test_inputs[-1].item() == 99.5
    assert torch.all(test_inputs[1:] - test_inputs[:-1] == 1.0)
    assert set(test_inputs.tolist()).isdisjoint(train_inputs.tolist())


def test_targets_follow_ground_truth():
    train_inputs, train_targets, test_inputs, test_targets = generate_datasets()
    for x, y in zip(train_inputs.tolist(), train_targets.tolist()):
        assert y == pytest.approx(x * 1.8 + 32, rel=1e-12)
    for x, y in zip(test_inputs.tolist(), test_targets.tolist()):
        assert y == pytest.approx(x * 1.8 + 32, rel=1e-12)


def test_generation_is_deterministic():
    first = generate_datasets()
    second = generate_datasets()
    for a, b in zip(first, second):
        assert torch.equal(a, b)


def test_celsius_to_fahrenheit_known_points():
    assert celsius_to_fahrenheit(0) == 32
    assert celsius_to_fahrenheit(100) == pytest.approx(212)
    assert celsius_to_fahrenheit(30) == pytest.approx(86)


def test_sample_sets_wrap_generated_data():
    train, test = generate_sample_sets()
    assert len(train) == 100
    assert len(test) == 100
    assert train.inputs.dtype == torch.float64
    inputs, targets = test.astuple()
    assert inputs[0].item() == 0.5
    assert targets[0].item() == pytest.approx(32.9)


def test_sample_set_accepts_plain_lists():
    samples = SampleSet([1, 2, 3], [3.8, 5.6, 7.4])
    assert len(samples) == 3
    assert samples.targets.dtype == torch.float64


def test_sample_set_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="differ in length"):
        SampleSet([1.0, 2.0, 3.0], [1.0, 2.0])


def test_sample_set_rejects_empty():
    with pytest.raises(ValueError, match="empty"):
        SampleSet([], [])


def test_sample_set_length_matches_sample_count_not_fields():
    samples = SampleSet([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    inputs, targets = samples.astuple()
    assert len(samples) == 3
    assert inputs.shape == targets.shape == (3,)
    assert not hasattr(samples, '__iter__')


def test_sample_set_accepts_column_vectors():
    x = torch.arange(4, dtype=torch.float64)
    samples = SampleSet(x.unsqueeze(1), celsius_to_fahrenheit(x).unsqueeze(1))
    assert samples.inputs.shape == (4,)
    assert samples.targets.shape == (4,)


@pytest.mark.parametrize("shape_in,shape_out", [((2, 3), (3, 2)), ((2, 3), (6,)), ((6,), (1, 6))])
def test_sample_set_rejects_matrices(shape_in, shape_out):
    x = torch.arange(6, dtype=torch.float64)
    with pytest.raises(ValueError, match="must be 1-D"):
        SampleSet(x.reshape(shape_in), celsius_to_fahrenheit(x).reshape(shape_out))


def test_sample_set_rejects_scalars():
    with pytest.raises(ValueError, match="must be 1-D"):
        SampleSet(3.0, 37.4)
