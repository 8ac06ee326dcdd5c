"""Tests for additions."""

from unittest import mock

from absl.testing import absltest
from absl.testing import parameterized

from fhe_fibonacci import additions
from fhe_fibonacci import cleartext
from fhe_fibonacci import encrypted_int
from fhe_fibonacci import errors
from fhe_fibonacci import plaintext


class FibonacciAdditionsTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.keys = cleartext.CleartextKeys()

  def run_additions(self, n, n_max, width=16):
    query = encrypted_int.encrypt(n, width, self.keys)
    result = additions.fibonacci_additions(query, n_max, self.keys)
    return encrypted_int.decrypt(result, self.keys)

  @parameterized.parameters(*range(21))
  def test_matches_plaintext(self, n):
    self.assertEqual(
        plaintext.fibonacci_plaintext(n), self.run_additions(n, n_max=20)
    )

  @parameterized.parameters((0, 0), (1, 1), (7, 13), (10, 55))
  def test_known_values(self, n, expected):
    self.assertEqual(expected, self.run_additions(n, n_max=10))

  def test_query_equal_to_n_max(self):
    self.assertEqual(55, self.run_additions(10, n_max=10))

  def test_query_above_n_max_falls_back_to_zero(self):
    self.assertEqual(0, self.run_additions(11, n_max=10))

  def test_n_max_zero(self):
    self.assertEqual(0, self.run_additions(0, n_max=0))

  def test_values_wrap_modulo_width(self):
    self.assertEqual(13, self.run_additions(7, n_max=8, width=4))
    self.assertEqual(21 % 16, self.run_additions(8, n_max=8, width=4))

  def test_overflow_logs_warning(self):
    with mock.patch.object(plaintext.logging, 'warning') as warning:
      self.run_additions(3, n_max=8, width=4)
    warning.assert_called_once()

  def test_gate_count_does_not_depend_on_query(self):
    counts = set()
    for n in (0, 5, 10, 11):
      self.keys.reset_counts()
      self.run_additions(n, n_max=10)
      counts.add(tuple(sorted(self.keys.gate_counts.items())))
    self.assertLen(counts, 1)

  def test_each_step_costs_one_add_one_equality_one_select(self):
    width, n_max = 8, 5
    self.run_additions(2, n_max=n_max, width=width)
    steps = n_max + 1
    self.assertEqual(steps * width, self.keys.gate_counts['cmux'])
    self.assertEqual(steps * width, self.keys.gate_counts['xnor'])
    self.assertEqual(
        steps * (5 * width - 6) + steps * (width - 1),
        self.keys.total_gates - 2 * steps * width,
    )

  def test_negative_n_max_is_rejected(self):
    query = encrypted_int.encrypt(0, 8, self.keys)
    with self.assertRaises(errors.PreconditionError):
      additions.fibonacci_additions(query, -1, self.keys)

  def test_query_under_other_key_is_rejected(self):
    query = encrypted_int.encrypt(3, 8, cleartext.CleartextKeys())
    with self.assertRaises(errors.KeyMismatchError):
      additions.fibonacci_additions(query, 5, self.keys)
    self.assertEqual(0, self.keys.total_gates)


if __name__ == '__main__':
  absltest.main()
