"""src/uriscan/config.py

Compliance configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComplianceRules:
    """
    Requirements applied by ``URI.is_compliant`` on top of the RFC 3986 grammar.

    Attributes:
        require_scheme: A scheme must be present.
        require_host: A host must be present. RFC 3986 makes the authority
            optional; the default contract is stricter and rejects URIs such
            as ``"mailto:"`` or ``"file:/etc/hosts"``.
    """

    require_scheme: bool = True
    require_host: bool = True

    @classmethod
    def default(cls) -> "ComplianceRules":
        """Rules requiring both a scheme and a host."""
        return cls()

    @classmethod
    def rfc3986(cls) -> "ComplianceRules":
        """Rules following RFC 3986 for absolute URIs: the host is optional."""
        return cls(require_scheme=True, require_host=False)
