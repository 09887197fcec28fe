"""tests/unit/test_config.py"""

import dataclasses

import pytest

from uriscan.config import ComplianceRules


class TestComplianceRules:
    """Tests for ComplianceRules class."""

    def test_default(self):
        """Test that the default rules require scheme and host."""
        rules = ComplianceRules.default()

        assert rules == ComplianceRules()
        assert rules.require_scheme is True
        assert rules.require_host is True

    def test_rfc3986(self):
        """Test that the RFC 3986 rules make the host optional."""
        rules = ComplianceRules.rfc3986()

        assert rules.require_scheme is True
        assert rules.require_host is False

    def test_frozen(self):
        """Test that rules can not be modified once built."""
        rules = ComplianceRules()
        with pytest.raises(dataclasses.FrozenInstanceError):
            rules.require_host = False  # type: ignore[misc]
