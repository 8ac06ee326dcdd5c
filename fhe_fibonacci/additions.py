"""Single-query Fibonacci evaluation by sweeping the recurrence."""

from absl import logging

from fhe_fibonacci import encrypted_int
from fhe_fibonacci import errors
from fhe_fibonacci import plaintext


def fibonacci_additions(
    query: encrypted_int.EncryptedInt,
    n_max: int,
    server: encrypted_int.ServerKeys,
) -> encrypted_int.EncryptedInt:
  """Computes an encryption of fib(query) for 0 <= query <= n_max.

  Every index in 0..n_max is visited with one equality test, one select and
  one addition, whatever the query decrypts to. A query above n_max matches
  nothing and decrypts to 0.

  Args:
    query: The encrypted index.
    n_max: Largest index the sweep tests.
    server: Evaluation keys matching the query.

  Returns:
    The encrypted Fibonacci number.
  """
  if n_max < 0:
    raise errors.PreconditionError(f'n_max must be non-negative, got {n_max}')
  if query.key_id != server.key_id:
    raise errors.KeyMismatchError(
        f'Query key {query.key_id!r} does not match server key'
        f' {server.key_id!r}'
    )
  width = query.width
  plaintext.warn_if_out_of_range(n_max, width)

  result = encrypted_int.encrypt_constant(0, width, server)
  prev = encrypted_int.encrypt_constant(0, width, server)
  curr = encrypted_int.encrypt_constant(1, width, server)

  for i in range(n_max + 1):
    logging.vlog(1, 'Additions step %d of %d', i, n_max)
    index = encrypted_int.encrypt_constant(i, width, server)
    n_is_i = encrypted_int.equals(query, index, server)
    result = encrypted_int.select(n_is_i, prev, result, server)
    prev, curr = curr, encrypted_int.add(prev, curr, server)

  return result
