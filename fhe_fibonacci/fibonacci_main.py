"""A binary for computing Fibonacci numbers of encrypted indices."""

from collections.abc import Sequence

from absl import app
from absl import flags

from fhe_fibonacci import additions
from fhe_fibonacci import cleartext
from fhe_fibonacci import encrypted_int
from fhe_fibonacci import lookup
from fhe_fibonacci import lookup_table
from fhe_fibonacci import plaintext

_N = flags.DEFINE_multi_integer(
    'n', None, 'Fibonacci index to evaluate; may be repeated.'
)
_STRATEGY = flags.DEFINE_enum(
    'strategy',
    'both',
    ['additions', 'lookup', 'both'],
    'Which evaluation strategy to run.',
)
_N_MAX = flags.DEFINE_integer(
    'n_max', 10, 'Largest index the circuits support.'
)
_WIDTH = flags.DEFINE_integer(
    'width', 16, 'Bit width of every encrypted integer.'
)
_SECURITY = flags.DEFINE_enum(
    'security', 'test', ['test', '128'], 'jaxite parameter set.'
)
_BACKEND = flags.DEFINE_enum(
    'backend',
    'jaxite',
    ['jaxite', 'cleartext'],
    'Gate evaluator; cleartext is for debugging and gives no privacy.',
)
_MAX_WORKERS = flags.DEFINE_integer(
    'max_workers', 1, 'Threads for the lookup equality tests.'
)

flags.mark_flag_as_required('n')


def make_keys(backend: str, security: str):
  if backend == 'cleartext':
    debug_keys = cleartext.CleartextKeys()
    return debug_keys, debug_keys
  # Deferred: importing jaxite initializes jax.
  from fhe_fibonacci import keys  # pylint: disable=g-import-not-at-top

  return keys.setup(security)


def main(argv: Sequence[str]) -> None:
  if len(argv) > 1:
    raise app.UsageError('Too many command-line arguments.')

  n_max = _N_MAX.value
  width = _WIDTH.value
  for n in _N.value:
    if not 0 <= n <= n_max:
      raise app.UsageError(f'--n={n} is outside [0, {n_max}]')

  client, server = make_keys(_BACKEND.value, _SECURITY.value)

  strategies = []
  if _STRATEGY.value in ('additions', 'both'):
    strategies.append(
        ('additions', lambda q: additions.fibonacci_additions(q, n_max, server))
    )
  if _STRATEGY.value in ('lookup', 'both'):
    table = lookup_table.build_lookup_table(n_max, width, server)
    strategies.append((
        'lookup',
        lambda q: lookup.fibonacci_lookup_with_tables(
            q, table, server, max_workers=_MAX_WORKERS.value
        ),
    ))

  for n in _N.value:
    print(f'Encrypting {n}')
    query = encrypted_int.encrypt(n, width, client)
    expected = plaintext.fibonacci_plaintext(n) % (1 << width)
    for name, evaluate in strategies:
      print(f'Running {name} circuit')
      result = encrypted_int.decrypt(evaluate(query), client)
      print(f'{name}: f({n}) = {result} (expected {expected})')


def run() -> None:
  app.run(main)


if __name__ == '__main__':
  run()
