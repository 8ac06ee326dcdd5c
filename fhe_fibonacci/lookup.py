"""Per-query Fibonacci evaluation against a prebuilt encrypted table.

A ciphertext cannot be used as an array index, so reading "the entry at the
encrypted index" compares the query with every table index and folds the
matching value into the result with selects.
"""

from concurrent import futures
import itertools

from absl import logging

from fhe_fibonacci import encrypted_int
from fhe_fibonacci import errors
from fhe_fibonacci import lookup_table


def _check_table(
    query: encrypted_int.EncryptedInt,
    table: lookup_table.LookupTable,
    server: encrypted_int.ServerKeys,
) -> None:
  if not table.indices or not table.values:
    raise errors.EmptyTableError('Lookup table has no entries')
  if len(table.indices) != len(table.values):
    raise errors.TableLengthMismatchError(
        f'Table has {len(table.indices)} indices but {len(table.values)}'
        ' values'
    )
  if query.key_id != server.key_id:
    raise errors.KeyMismatchError(
        f'Query key {query.key_id!r} does not match server key'
        f' {server.key_id!r}'
    )
  for entry in itertools.chain(table.indices, table.values):
    if entry.width != query.width:
      raise errors.WidthMismatchError(
          f'Table entry width {entry.width} does not match query width'
          f' {query.width}'
      )
    if entry.key_id != query.key_id:
      raise errors.KeyMismatchError(
          f'Table entry key {entry.key_id!r} does not match query key'
          f' {query.key_id!r}'
      )


def fibonacci_lookup_with_tables(
    query: encrypted_int.EncryptedInt,
    table: lookup_table.LookupTable,
    server: encrypted_int.ServerKeys,
    max_workers: int = 1,
) -> encrypted_int.EncryptedInt:
  """Reads fib(query) out of `table` without learning which entry matched.

  Args:
    query: The encrypted index, expected in 0..table.n_max.
    table: Table from `lookup_table.build_lookup_table`.
    server: Evaluation keys matching the query and the table.
    max_workers: Number of threads used for the independent equality tests.

  Returns:
    The encrypted value whose index equals the query, or an encryption of 0
    if none does.

  Raises:
    errors.PreconditionError: The table is empty or malformed, or its entries
      do not share the query's width and key.
  """
  _check_table(query, table, server)

  def index_matches(index):
    return encrypted_int.equals(query, index, server)

  logging.vlog(1, 'Comparing query with %d table indices', len(table.indices))
  if max_workers > 1:
    with futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
      matches = list(executor.map(index_matches, table.indices))
  else:
    matches = [index_matches(index) for index in table.indices]

  result = encrypted_int.encrypt_constant(0, query.width, server)
  for n_is_i, value in zip(matches, table.values):
    result = encrypted_int.select(n_is_i, value, result, server)
  return result
