"""Kubernetes port name and number rules (IANA service names)."""

import re

_PORT_NAME_CHARSET = re.compile(r"^[-a-z0-9]+$")
_PORT_NAME_ONE_LETTER = re.compile(r".*[a-z].*")

MAX_PORT_NAME_LENGTH = 15


def is_valid_port_name(port: str | None) -> list[str]:
    """Return the reasons ``port`` is not a valid port name; empty when valid."""
    port = port or ""
    errors = []
    if len(port) > MAX_PORT_NAME_LENGTH:
        errors.append(f"must be no more than {MAX_PORT_NAME_LENGTH} characters")
    if not _PORT_NAME_CHARSET.match(port):
        errors.append("must contain only alpha-numeric characters (a-z, 0-9), and hyphens (-)")
    if not _PORT_NAME_ONE_LETTER.match(port):
        errors.append("must contain at least one letter (a-z)")
    if "--" in port:
        errors.append("must not contain consecutive hyphens")
    if port.startswith("-") or port.endswith("-"):
        errors.append("must not begin or end with a hyphen")
    return errors


def is_valid_port_num(port: int | None) -> list[str]:
    if port is None or not 1 <= port <= 65535:
        return ["must be between 1 and 65535, inclusive"]
    return []
