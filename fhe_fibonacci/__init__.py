"""Oblivious Fibonacci evaluation over TFHE-encrypted integers."""

from fhe_fibonacci.additions import fibonacci_additions
from fhe_fibonacci.lookup import fibonacci_lookup_with_tables
from fhe_fibonacci.lookup_table import build_encrypted_fibs
from fhe_fibonacci.lookup_table import build_encrypted_indices
from fhe_fibonacci.lookup_table import build_lookup_table
from fhe_fibonacci.lookup_table import LookupTable
