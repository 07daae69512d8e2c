import logging
import random

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    # setup_logging() replaces root handlers; drop the ones a test installed
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _random_instance(seed):
    rng = random.Random(seed)
    n = rng.randint(0, 12)
    weights = [rng.randint(0, 15) for _ in range(n)]
    values = [rng.randint(0, 100) for _ in range(n)]
    capacity = rng.randint(0, 40)
    return weights, values, capacity


@pytest.fixture
def random_instance():
    """Seeded (weights, values, capacity) generator; weights may be zero."""
    return _random_instance
