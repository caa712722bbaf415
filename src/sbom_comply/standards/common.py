"""Helpers shared by the built-in standards.

Each ``describe_*`` helper returns a display string, empty when there is
nothing to report, so checks can test the result for truthiness.
"""

from __future__ import annotations

import posixpath
import re
from datetime import datetime

from sbom_comply.models.document import Author, Checksum, Component, ExternalReference, Organization, Swid, Tool

WEAK_HASH_ALGORITHMS = frozenset({"SHA1", "SHA-1", "sha1", "sha-1", "MD5", "md5"})
STRONG_HASH_ALGORITHMS = frozenset({"SHA-512", "SHA256", "SHA-256", "sha256", "sha-256"})
SHA256_ALGORITHMS = frozenset({"SHA256", "SHA-256", "sha256", "sha-256"})

# Placeholder values SPDX uses for unknown fields
SPDX_PLACEHOLDERS = frozenset({"", "NOASSERTION", "NONE"})

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def is_rfc3339(timestamp: str) -> bool:
    """Check that a timestamp is a complete RFC 3339 date-time."""
    match = _RFC3339.match(timestamp or "")
    if not match:
        return False
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    try:
        datetime(year, month, day, hour, minute, min(second, 59))
    except ValueError:
        return False
    return second <= 60


def describe_tools(tools: list[Tool]) -> str:
    """Named tools as ``name-version``."""
    result = []
    for tool in tools:
        if not tool.name:
            continue
        result.append(f"{tool.name}-{tool.version}" if tool.version else tool.name)
    return ", ".join(result)


def describe_authors(authors: list[Author]) -> str:
    """Person authors as ``name (email, phone)``."""
    result = []
    for author in authors:
        if author.type != "person":
            continue

        parts = [author.name] if author.name else []
        contact = [c for c in (author.email, author.phone) if c]
        if contact:
            parts.append("(" + ", ".join(contact) + ")")
        if parts:
            result.append(" ".join(parts))
    return ", ".join(result)


def _name_and_email(name: str, email: str) -> str:
    if name:
        return f"{name}, {email}" if email else name
    return email


def describe_supplier(supplier: Organization | None) -> str:
    """Supplier name, email, url and contacts in one line."""
    if supplier is None:
        return ""

    parts = []
    head = _name_and_email(supplier.name, supplier.email)
    if head:
        parts.append(head)
    if supplier.url:
        parts.append(supplier.url)

    contacts = [c for c in (_name_and_email(c.name, c.email) for c in supplier.contacts) if c]
    if contacts:
        parts.append("(" + ", ".join(contacts) + ")")
    return ", ".join(parts)


def organization_contact(organization: Organization | None) -> str:
    """First reachable contact: email, then url, then a contact's email."""
    if organization is None:
        return ""
    if organization.email:
        return organization.email
    if organization.url:
        return organization.url
    for contact in organization.contacts:
        if contact.email:
            return contact.email
    return ""


def first_author_contact(authors: list[Author]) -> str:
    """Email of the first author that has one, else its name."""
    for author in authors:
        if author.email:
            return author.email
        if author.name:
            return author.name
    return ""


def first_tool_name(tools: list[Tool]) -> str:
    for tool in tools:
        if tool.name:
            return tool.name
    return ""


def join_present(values: list[str]) -> str:
    return ", ".join(v for v in values if v)


def describe_swids(swids: list[Swid]) -> str:
    return ", ".join(f"{s.tag_id}, {s.name}" for s in swids if s.tag_id and s.name)


def describe_unique_ids(component: Component) -> str:
    """The first kind of unique identifier a component carries."""
    for value in (
        join_present(component.purls),
        join_present(component.cpes),
        join_present(component.omnibor_ids),
        join_present(component.swhids),
        describe_swids(component.swids),
    ):
        if value:
            return value
    return ""


def purl_share(references: list[ExternalReference]) -> tuple[str, float]:
    """Share of external references that are purls, as a result and a score.

    Returns:
        ``("purl:(x/y)", x / y * 10)``, or ``("", 0.0)`` without references
    """
    total = len(references)
    if total == 0:
        return "", 0.0
    purls = sum(1 for r in references if r.ref_type.lower() == "purl")
    return f"purl:({purls}/{total})", purls / total * 10.0


def describe_hash_algorithms(checksums: list[Checksum]) -> tuple[str, bool, bool]:
    """Algorithms of non-empty checksums, plus weak/strong algorithm presence."""
    result = ", ".join(c.algorithm for c in checksums if c.content)
    weak = any(c.algorithm in WEAK_HASH_ALGORITHMS for c in checksums)
    strong = any(c.algorithm in STRONG_HASH_ALGORITHMS for c in checksums)
    return result, weak, strong


def sha256_content(checksums: list[Checksum]) -> str:
    """Content of the first SHA-256 checksum."""
    for checksum in checksums:
        if checksum.algorithm in SHA256_ALGORITHMS and checksum.content:
            return checksum.content
    return ""


def is_spdx_placeholder(value: str) -> bool:
    return value.strip() in SPDX_PLACEHOLDERS


def describe_copyright(text: str) -> str:
    if text in ("NOASSERTION", "NONE"):
        return ""
    return text


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def unique_element_id(component: Component) -> str:
    """Short, readable element id for a component.

    "org.jetbrains.kotlin:kotlin-stdlib-jdk7" becomes "org.jetbrain...lib-jdk7"
    and "v0.0.0-20230321023759-10a507213a29" becomes "v0.0.0...213a29".
    """
    name = posixpath.basename(component.name)
    if len(name) > 20:
        name = name[:12] + "..." + name[-8:]

    version = component.version
    if len(version) > 12:
        version = version[:6] + "..." + version[-6:]

    return f"{name}-{version}"
