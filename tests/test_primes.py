import pytest

from hashmaps import is_prime, next_prime


@pytest.mark.parametrize("n, expected", [
    (-7, False), (0, False), (1, False), (2, True), (3, True), (4, False),
    (9, False), (25, False), (29, True), (49, False), (97, True), (7919, True), (7921, False),
])
def test_is_prime(n, expected):
    assert is_prime(n) is expected


@pytest.mark.parametrize("n, expected", [
    (-5, 2), (0, 2), (1, 2), (2, 2), (4, 5), (8, 11), (10, 11), (14, 17), (24, 29), (200, 211),
])
def test_next_prime(n, expected):
    assert next_prime(n) == expected
