import random

import pytest

from voxgarden.plants import ColorPalette

RED = (255, 0, 0)
GREEN = (0, 170, 0)
BLUE = (0, 0, 255)


class FixedRandom(random.Random):
    """random() always returns the same value; randint is unaffected."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def palette():
    return ColorPalette(primary=RED, secondary=BLUE, foliage=GREEN)


@pytest.fixture
def plain_palette():
    return ColorPalette(primary=RED, secondary=None, foliage=GREEN)
