"""Shared test helpers."""

import itertools

import numpy as np
import pytest


class SequenceRandom:
    """Random source that hands out a fixed sequence of floats, cycling."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def always_flip():
    """Every coin flip says 'switch to the later move'."""
    return SequenceRandom([0.0])


@pytest.fixture
def never_flip():
    """Every coin flip says 'keep the earlier move'."""
    return SequenceRandom([0.9])
