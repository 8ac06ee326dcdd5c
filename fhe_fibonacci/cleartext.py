"""A cleartext gate evaluator with the same interface as the jaxite keys.

Bits are plain Python bools, so nothing here is confidential. It runs circuits
instantly and counts every gate it evaluates, which makes it useful for
debugging circuits and for checking that the number of gates a computation
uses does not depend on its inputs.
"""

import collections
import threading
import uuid


class CleartextKeys:
  """Acts as both the client and the server key set.

  Gate counting is thread-safe, so counts stay exact when equality tests run
  on a worker pool.
  """

  def __init__(self, key_id: str | None = None) -> None:
    self.key_id = key_id if key_id is not None else uuid.uuid4().hex
    self.gate_counts = collections.Counter()
    self._lock = threading.Lock()

  @property
  def total_gates(self) -> int:
    with self._lock:
      return sum(self.gate_counts.values())

  def reset_counts(self) -> None:
    with self._lock:
      self.gate_counts.clear()

  def _count(self, gate: str) -> None:
    with self._lock:
      self.gate_counts[gate] += 1

  def encrypt_bit(self, cleartext: bool) -> bool:
    return bool(cleartext)

  def decrypt_bit(self, ciphertext: bool) -> bool:
    return ciphertext

  def constant(self, cleartext: bool) -> bool:
    return bool(cleartext)

  def and_(self, x: bool, y: bool) -> bool:
    self._count('and')
    return x and y

  def or_(self, x: bool, y: bool) -> bool:
    self._count('or')
    return x or y

  def xor_(self, x: bool, y: bool) -> bool:
    self._count('xor')
    return x != y

  def xnor_(self, x: bool, y: bool) -> bool:
    self._count('xnor')
    return x == y

  def cmux_(self, b: bool, x: bool, y: bool) -> bool:
    """Returns x if b else y; same argument order as JaxiteServerKeys.cmux_."""
    self._count('cmux')
    return x if b else y
