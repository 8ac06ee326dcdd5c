"""Key generation and jaxite gate adapters."""

import functools
import uuid

from absl import logging
from jaxite.jaxite_bool import bool_params
from jaxite.jaxite_bool import jaxite_bool
from jaxite.jaxite_lib import random_source
from jaxite.jaxite_lib import types

SECURITY_LEVELS = ('test', '128')


class JaxiteClientKeys:
  """Client-side key material: encrypts inputs and decrypts results."""

  def __init__(
      self,
      cks: jaxite_bool.ClientKeySet,
      lwe_rng: random_source.PseudorandomSource,
      key_id: str,
  ) -> None:
    self.cks = cks
    self.lwe_rng = lwe_rng
    self.key_id = key_id

  def encrypt_bit(self, cleartext: bool) -> types.LweCiphertext:
    return jaxite_bool.encrypt(cleartext, self.cks, self.lwe_rng)

  def decrypt_bit(self, ciphertext: types.LweCiphertext) -> bool:
    return jaxite_bool.decrypt(ciphertext, self.cks)


class JaxiteServerKeys:
  """Evaluation key material handed to the computing party."""

  def __init__(
      self,
      sks: jaxite_bool.ServerKeySet,
      params: jaxite_bool.Parameters,
      key_id: str,
  ) -> None:
    self.sks = sks
    self.params = params
    self.key_id = key_id

  def constant(self, cleartext: bool) -> types.LweCiphertext:
    return jaxite_bool.constant(cleartext, self.params)

  def and_(self, x, y) -> types.LweCiphertext:
    return jaxite_bool.and_(x, y, self.sks, self.params)

  def or_(self, x, y) -> types.LweCiphertext:
    return jaxite_bool.or_(x, y, self.sks, self.params)

  def xor_(self, x, y) -> types.LweCiphertext:
    return jaxite_bool.xor_(x, y, self.sks, self.params)

  def xnor_(self, x, y) -> types.LweCiphertext:
    return jaxite_bool.xnor_(x, y, self.sks, self.params)

  def cmux_(self, b, x, y) -> types.LweCiphertext:
    # jaxite takes the control bit last: cmux_(if_true, if_false, control).
    return jaxite_bool.cmux_(x, y, b, self.sks, self.params)


@functools.cache
def setup(
    security: str = 'test', seed: int = 1
) -> tuple[JaxiteClientKeys, JaxiteServerKeys]:
  """Generates a client/server key pair.

  Args:
    security: 'test' for the fast, insecure parameters jaxite ships for tests,
      or '128' for 128-bit security.
    seed: Seed for the LWE and RLWE randomness. A cryptographically secure seed
      is needed in real applications.

  Returns:
    A (client, server) pair sharing a freshly generated key id.
  """
  if security not in SECURITY_LEVELS:
    raise ValueError(
        f'Unknown security level {security!r}, expected one of'
        f' {SECURITY_LEVELS}'
    )

  logging.info('Generating keys with %s parameters', security)
  if security == 'test':
    boolean_params = bool_params.get_params_for_test()
    lwe_rng = bool_params.get_rng_for_test(seed)
    rlwe_rng = bool_params.get_rng_for_test(seed)
  else:
    boolean_params = bool_params.get_params_for_128_bit_security()
    lwe_rng = bool_params.get_lwe_rng_for_128_bit_security(seed)
    rlwe_rng = bool_params.get_rlwe_rng_for_128_bit_security(seed)
  cks = jaxite_bool.ClientKeySet(boolean_params, lwe_rng, rlwe_rng)
  sks = jaxite_bool.ServerKeySet(cks, boolean_params, lwe_rng, rlwe_rng)

  key_id = uuid.uuid4().hex
  logging.info('Generated key set %s', key_id)
  return (
      JaxiteClientKeys(cks, lwe_rng, key_id),
      JaxiteServerKeys(sks, boolean_params, key_id),
  )
