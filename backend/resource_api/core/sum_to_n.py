"""Sum to N — three equivalent ways to compute 1 + 2 + ... + n.

Invariants:
    - All three agree for every n >= 0; n == 0 yields 0
    - sum_to_n_c recurses once per integer, so it is bounded by the
      interpreter recursion limit
"""


def sum_to_n_a(n: int) -> int:
    """Iterative: O(n) time, O(1) space."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """Closed form (Gauss): O(1)."""
    return n * (n + 1) // 2


def sum_to_n_c(n: int) -> int:
    """Recursive: O(n) time and stack depth."""
    if n <= 0:
        return 0
    return n + sum_to_n_c(n - 1)
