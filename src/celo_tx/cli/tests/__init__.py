"""Tests for the `celo-tx` command line."""
