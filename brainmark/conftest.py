import pytest

from brainmark.client.best_scores import BestScoreStore
from brainmark.client.storage import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def best_scores(store):
    return BestScoreStore(store)
