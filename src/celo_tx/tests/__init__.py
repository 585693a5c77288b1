"""Tests for `celo_tx`."""
