"""Sum to N — the three implementations must agree.

Tests:
    - Known values (0, 1, 5, 100)
    - Agreement across a range of n
"""

import pytest

from resource_api.core.sum_to_n import sum_to_n_a, sum_to_n_b, sum_to_n_c

IMPLEMENTATIONS = [sum_to_n_a, sum_to_n_b, sum_to_n_c]


@pytest.mark.parametrize("fn", IMPLEMENTATIONS)
def test_zero_sums_to_zero(fn):
    assert fn(0) == 0


@pytest.mark.parametrize("fn", IMPLEMENTATIONS)
def test_five_sums_to_fifteen(fn):
    assert fn(5) == 15


@pytest.mark.parametrize("fn", IMPLEMENTATIONS)
def test_one_and_hundred(fn):
    assert fn(1) == 1
    assert fn(100) == 5050


def test_implementations_agree_up_to_five_hundred():
    for n in range(0, 501):
        assert sum_to_n_a(n) == sum_to_n_b(n) == sum_to_n_c(n)


def test_closed_form_returns_int():
    assert isinstance(sum_to_n_b(7), int)
