import numpy as np
import pytest

from trigomestre.model.exercises import ExerciseGenerator


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture
def generator(rng):
    return ExerciseGenerator(rng=rng)
