"""Errors raised while building graphs."""


class GraphError(ValueError):
    """Base class for invalid graph construction arguments."""


class InvalidProbabilityError(GraphError):
    """The edge probability lies outside the closed interval [0, 1]."""

    def __init__(self, p: float) -> None:
        self.p = p
        super().__init__(f"Probability must be between 0.0 and 1.0, got {p}")


class InvalidCostRangeError(GraphError):
    """The minimum cost is greater than the maximum cost."""

    def __init__(self, min_cost: int, max_cost: int) -> None:
        self.min_cost = min_cost
        self.max_cost = max_cost
        super().__init__(
            f"Invalid cost range: min ({min_cost}) > max ({max_cost})"
        )


class EmptyInputError(GraphError):
    """An input collection was empty."""

    def __init__(self) -> None:
        super().__init__("Input collection cannot be empty")