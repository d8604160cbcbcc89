"""Tests for configuration validation."""

import logging

import pytest
from pydantic import ValidationError

from config_models import AssemblyConfiguration, SolverSettings
from core.errors import MalformedPatternError, UnknownStickTypeError
from core.models.inventory_entry import InventoryEntry


def test_from_counts(example_configuration):
    assert example_configuration.patterns == [1, 2, 7, 10, 13]
    assert [e.count for e in example_configuration.inventory] == [1, 1, 1, 1, 2]
    assert example_configuration.positions == 6
    example_configuration.validate_puzzle()


def test_out_of_range_stick_is_malformed():
    configuration = AssemblyConfiguration.from_counts({1: 1, 64: 1}, layers=1, base_pattern=0)
    with pytest.raises(MalformedPatternError):
        configuration.validate_puzzle()


def test_base_with_ten_bits_is_malformed():
    configuration = AssemblyConfiguration.from_counts({1: 3}, layers=1, base_pattern=1024)
    with pytest.raises(MalformedPatternError):
        configuration.validate_puzzle()


def test_non_canonical_encoding_is_accepted_by_default():
    configuration = AssemblyConfiguration.from_counts({16: 1, 7: 2}, layers=1, base_pattern=0)
    configuration.validate_puzzle()


def test_require_canonical_rejects_whole_inventory():
    configuration = AssemblyConfiguration.from_counts(
        {7: 2, 16: 1}, layers=1, base_pattern=0, require_canonical=True
    )
    with pytest.raises(UnknownStickTypeError):
        configuration.validate_puzzle()


def test_structural_errors_are_pydantic_errors():
    with pytest.raises(ValidationError):
        AssemblyConfiguration.from_counts({1: 1}, layers=0, base_pattern=0)
    with pytest.raises(ValidationError):
        InventoryEntry(pattern=1, count=-1)
    with pytest.raises(ValidationError):
        AssemblyConfiguration(inventory=[], layers=1, base_pattern=0)
    with pytest.raises(ValidationError):
        SolverSettings(num_workers=0)


def test_warns_about_missing_terminal_sticks(caplog):
    configuration = AssemblyConfiguration.from_counts({13: 3, 1: 1}, layers=1, base_pattern=0)
    with caplog.at_level(logging.WARNING, logger="config_models"):
        configuration.validate_puzzle()
    assert "terminal sticks" in caplog.text
