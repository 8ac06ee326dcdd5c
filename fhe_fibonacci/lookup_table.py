"""Encrypted Fibonacci lookup tables, built once and shared across queries."""

import dataclasses

from absl import logging

from fhe_fibonacci import encrypted_int
from fhe_fibonacci import errors
from fhe_fibonacci import plaintext


@dataclasses.dataclass(frozen=True)
class LookupTable:
  """Parallel columns: indices[i] encrypts i and values[i] encrypts fib(i)."""

  indices: tuple[encrypted_int.EncryptedInt, ...]
  values: tuple[encrypted_int.EncryptedInt, ...]

  def __post_init__(self):
    object.__setattr__(self, 'indices', tuple(self.indices))
    object.__setattr__(self, 'values', tuple(self.values))

  @property
  def n_max(self) -> int:
    return len(self.indices) - 1


def _check_n_max(n_max: int) -> None:
  if n_max < 0:
    raise errors.PreconditionError(f'n_max must be non-negative, got {n_max}')


def build_encrypted_indices(
    n_max: int, width: int, server: encrypted_int.ServerKeys
) -> list[encrypted_int.EncryptedInt]:
  """Encrypts 0, 1, ..., n_max."""
  _check_n_max(n_max)
  return [
      encrypted_int.encrypt_constant(i, width, server)
      for i in range(n_max + 1)
  ]


def build_encrypted_fibs(
    n_max: int, width: int, server: encrypted_int.ServerKeys
) -> list[encrypted_int.EncryptedInt]:
  """Encrypts fib(0), fib(1), ..., fib(n_max).

  The sequence is public and computed in the clear; values that do not fit in
  `width` bits wrap.
  """
  _check_n_max(n_max)
  plaintext.warn_if_out_of_range(n_max, width)
  return [
      encrypted_int.encrypt_constant(value, width, server)
      for value in plaintext.fibonacci_sequence(n_max)
  ]


def build_lookup_table(
    n_max: int, width: int, server: encrypted_int.ServerKeys
) -> LookupTable:
  logging.info('Building lookup table for n_max=%d, width=%d', n_max, width)
  return LookupTable(
      indices=tuple(build_encrypted_indices(n_max, width, server)),
      values=tuple(build_encrypted_fibs(n_max, width, server)),
  )
