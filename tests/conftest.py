import pytest

from core.models import SupporterData


class FixedRandom:
    """Stands in for random.Random with a constant draw."""

    def __init__(self, value: int):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom(10)


@pytest.fixture
def canvasser():
    return SupporterData(name="Canvasser", description="Door to door.", cost=10, votes_per_second=2, max_count=3)
