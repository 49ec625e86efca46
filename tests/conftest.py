import pytest

from geostruct import Position, linear_ring


@pytest.fixture
def square():
    return linear_ring(
        Position(0, 0), Position(4, 0), Position(4, 4), Position(0, 4), Position(0, 0)
    )


@pytest.fixture
def hole():
    return linear_ring(
        Position(1, 1), Position(2, 1), Position(2, 2), Position(1, 1)
    )
