import random

import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dice():
    return [
        {"identifier": face, "luckiness": face, "payload": face}
        for face in range(1, 7)
    ]
