"""Cleartext Fibonacci helpers.

These compute public, query-independent values: reference results for tests
and the contents of encrypted lookup tables.
"""

from collections.abc import Iterator

from absl import logging


def fibonacci_sequence(n_max: int) -> Iterator[int]:
  """Yields fib(0), fib(1), ..., fib(n_max)."""
  a, b = 0, 1
  for _ in range(n_max + 1):
    yield a
    a, b = b, a + b


def fibonacci_plaintext(n: int) -> int:
  a, b = 0, 1
  for _ in range(n):
    a, b = b, a + b
  return a


def max_fibonacci_index(width: int) -> int:
  """Returns the largest n such that fib(n) fits in `width` unsigned bits."""
  limit = 1 << width
  n = 0
  a, b = 0, 1
  while b < limit:
    a, b = b, a + b
    n += 1
  return n


def warn_if_out_of_range(n_max: int, width: int) -> None:
  """Logs when indices or values up to `n_max` wrap modulo 2**width."""
  if n_max >= 1 << width:
    logging.warning(
        'n_max=%d is not representable in %d bits; indices will wrap',
        n_max,
        width,
    )
  elif n_max > max_fibonacci_index(width):
    logging.warning(
        'fib(%d) overflows %d bits; results will wrap modulo 2**%d',
        n_max,
        width,
        width,
    )
