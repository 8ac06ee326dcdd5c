"""Tests for plaintext."""

from unittest import mock

from absl.testing import absltest
from absl.testing import parameterized

from fhe_fibonacci import plaintext


class PlaintextTest(parameterized.TestCase):

  @parameterized.parameters((0, 0), (1, 1), (2, 1), (7, 13), (10, 55), (20, 6765))
  def test_fibonacci_plaintext(self, n, expected):
    self.assertEqual(expected, plaintext.fibonacci_plaintext(n))

  def test_fibonacci_sequence(self):
    self.assertEqual(
        [0, 1, 1, 2, 3, 5, 8, 13], list(plaintext.fibonacci_sequence(7))
    )

  def test_fibonacci_sequence_matches_recurrence(self):
    for n, value in enumerate(plaintext.fibonacci_sequence(30)):
      self.assertEqual(plaintext.fibonacci_plaintext(n), value)

  def test_fibonacci_sequence_empty_for_negative(self):
    self.assertEqual([], list(plaintext.fibonacci_sequence(-1)))

  @parameterized.parameters((1, 2), (4, 7), (8, 13), (16, 24), (32, 47))
  def test_max_fibonacci_index(self, width, expected):
    self.assertEqual(expected, plaintext.max_fibonacci_index(width))
    self.assertLess(plaintext.fibonacci_plaintext(expected), 1 << width)
    self.assertGreaterEqual(
        plaintext.fibonacci_plaintext(expected + 1), 1 << width
    )

  @parameterized.parameters((10, 16, False), (25, 16, True), (16, 4, True))
  def test_warn_if_out_of_range(self, n_max, width, warns):
    with mock.patch.object(plaintext.logging, 'warning') as warning:
      plaintext.warn_if_out_of_range(n_max, width)
    self.assertEqual(warns, warning.called)


if __name__ == '__main__':
  absltest.main()
