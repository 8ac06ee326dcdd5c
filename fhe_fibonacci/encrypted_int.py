"""Fixed-width unsigned integers built from encrypted bits.

An `EncryptedInt` is a little-endian bit slice of boolean ciphertexts. The
circuits below (ripple-carry addition, equality, multiplexing) are evaluated
gate by gate through a server key object, so they never inspect plaintext.
"""

import dataclasses
from typing import Any, Protocol

from fhe_fibonacci import errors


class ServerKeys(Protocol):
  """Gate evaluation interface held by the computing party."""

  key_id: str

  def constant(self, cleartext: bool) -> Any:
    ...

  def and_(self, x: Any, y: Any) -> Any:
    ...

  def or_(self, x: Any, y: Any) -> Any:
    ...

  def xor_(self, x: Any, y: Any) -> Any:
    ...

  def xnor_(self, x: Any, y: Any) -> Any:
    ...

  def cmux_(self, b: Any, x: Any, y: Any) -> Any:
    ...


class ClientKeys(Protocol):
  """Encryption and decryption interface held by the key owner."""

  key_id: str

  def encrypt_bit(self, cleartext: bool) -> Any:
    ...

  def decrypt_bit(self, ciphertext: Any) -> bool:
    ...


@dataclasses.dataclass(frozen=True)
class EncryptedInt:
  """An unsigned integer encrypted bit by bit, least significant bit first."""

  bits: tuple[Any, ...]
  key_id: str

  @property
  def width(self) -> int:
    return len(self.bits)


@dataclasses.dataclass(frozen=True)
class EncryptedBool:
  bit: Any
  key_id: str


def bit_slice_to_int(bit_slice: list[bool]) -> int:
  """Given an list of bits, return a base-10 integer."""
  result = 0
  for i, bit in enumerate(bit_slice):
    result |= int(bit) << i
  return result


def int_to_bit_slice(input_int: int, width: int) -> list[bool]:
  """Given an integer and bit width, return a bitwise representation.

  Bits above `width` are dropped, so the value is reduced modulo 2**width.
  """
  result: list[bool] = [False] * width
  for i in range(width):
    result[i] = ((input_int >> i) & 1) != 0
  return result


def _check_width(width: int) -> None:
  if width < 1:
    raise errors.PreconditionError(f'Width must be positive, got {width}')


def _check_compatible(x: EncryptedInt, y: EncryptedInt) -> None:
  _check_width(x.width)
  if x.width != y.width:
    raise errors.WidthMismatchError(
        f'Operand widths differ: {x.width} != {y.width}'
    )
  if x.key_id != y.key_id:
    raise errors.KeyMismatchError(
        f'Operands were encrypted under different keys: {x.key_id!r} !='
        f' {y.key_id!r}'
    )


def _check_key(key_id: str, keys: Any) -> None:
  if key_id != keys.key_id:
    raise errors.KeyMismatchError(
        f'Ciphertext key {key_id!r} does not match key set {keys.key_id!r}'
    )


def encrypt(value: int, width: int, client: ClientKeys) -> EncryptedInt:
  """Encrypts `value` modulo 2**width under the client key."""
  _check_width(width)
  bits = tuple(
      client.encrypt_bit(b) for b in int_to_bit_slice(value, width)
  )
  return EncryptedInt(bits=bits, key_id=client.key_id)


def decrypt(ciphertext: EncryptedInt, client: ClientKeys) -> int:
  _check_key(ciphertext.key_id, client)
  return bit_slice_to_int([client.decrypt_bit(z) for z in ciphertext.bits])


def encrypt_constant(value: int, width: int, server: ServerKeys) -> EncryptedInt:
  """Encrypts a public value with the evaluation key only.

  The value is known to the computing party, so this leaks nothing; it lets
  the server mix public constants into circuits over client ciphertexts.
  """
  _check_width(width)
  bits = tuple(server.constant(b) for b in int_to_bit_slice(value, width))
  return EncryptedInt(bits=bits, key_id=server.key_id)


def add(x: EncryptedInt, y: EncryptedInt, server: ServerKeys) -> EncryptedInt:
  """Ripple-carry addition modulo 2**width; the final carry is dropped."""
  _check_compatible(x, y)
  _check_key(x.key_id, server)

  out = []
  carry = None
  for i, (a, b) in enumerate(zip(x.bits, y.bits)):
    a_xor_b = server.xor_(a, b)
    if i == 0:
      out.append(a_xor_b)
      if i + 1 < x.width:
        carry = server.and_(a, b)
      continue
    out.append(server.xor_(a_xor_b, carry))
    if i + 1 < x.width:
      carry = server.or_(server.and_(a, b), server.and_(carry, a_xor_b))
  return EncryptedInt(bits=tuple(out), key_id=x.key_id)


def equals(x: EncryptedInt, y: EncryptedInt, server: ServerKeys) -> EncryptedBool:
  """Returns an encryption of `x == y`."""
  _check_compatible(x, y)
  _check_key(x.key_id, server)

  same = [server.xnor_(a, b) for a, b in zip(x.bits, y.bits)]
  result = same[0]
  for bit in same[1:]:
    result = server.and_(result, bit)
  return EncryptedBool(bit=result, key_id=x.key_id)


def select(
    cond: EncryptedBool,
    if_true: EncryptedInt,
    if_false: EncryptedInt,
    server: ServerKeys,
) -> EncryptedInt:
  """Oblivious multiplexer: `if_true if cond else if_false`, bit by bit."""
  _check_compatible(if_true, if_false)
  if cond.key_id != if_true.key_id:
    raise errors.KeyMismatchError(
        f'Condition key {cond.key_id!r} does not match operand key'
        f' {if_true.key_id!r}'
    )
  _check_key(cond.key_id, server)

  bits = tuple(
      server.cmux_(cond.bit, a, b)
      for a, b in zip(if_true.bits, if_false.bits)
  )
  return EncryptedInt(bits=bits, key_id=if_true.key_id)
