"""Shared test helpers."""
from __future__ import annotations

import pytest


class ScriptedRNG:
    """Stands in for random.Random, replaying fixed draws from random()."""

    def __init__(self, values) -> None:
        self.values = list(values)

    def random(self) -> float:
        if not self.values:
            raise AssertionError("unexpected random draw")
        return self.values.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRNG
