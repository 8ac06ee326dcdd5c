"""Errors raised by the encrypted Fibonacci engines."""


class PreconditionError(ValueError):
  """A call was rejected before any homomorphic gate was evaluated."""


class WidthMismatchError(PreconditionError):
  """Operands were encrypted with different bit widths."""


class KeyMismatchError(PreconditionError):
  """Operands were encrypted under different key sets."""


class EmptyTableError(PreconditionError):
  """A lookup was attempted against a table with no entries."""


class TableLengthMismatchError(PreconditionError):
  """The index and value columns of a lookup table differ in length."""
