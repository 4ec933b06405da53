import torch


class LinearUnit:
    """Single neuron: one weight, one bias, no activation."""
    def __init__(self, w, b):
        self.w = float(w)
        self.b = float(b)

    @classmethod
    def random(cls, seed=None):
        """
        Build a unit with both parameters drawn uniformly from [0, 1).

        Args:
            seed: Seed for a private torch.Generator. None draws a fresh seed.

        Returns:
            LinearUnit
        """
        generator = torch.Generator()
        if seed is None:
            generator.seed()
        else:
            generator.manual_seed(seed)
        w, b = torch.rand(2, generator=generator, dtype=torch.float64).tolist()
        return cls(w, b)

    def predict(self, x):
        # Scalars and tensors both broadcast here
        return x * self.w + self.b

    def parameters(self):
        return self.w, self.b

    def __repr__(self):
        return f"LinearUnit(w={self.w!r}, b={self.b!r})"
