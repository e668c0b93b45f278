"""Catalog of field types a derive-time generator may accept.

Descriptive only: each tag carries the human-readable type it stands for,
used when reporting that a field has an unsupported type.
"""
from __future__ import annotations

from enum import Enum


class TypeDescriptor(str, Enum):
    STRING = "str"
    BYTES = "bytes"
    BOOLEAN = "bool"
    U16 = "u16"
    U64 = "u64"
    U128 = "u128"
    NUMBER = "float"
    SIGNED_INTEGER = "isize | i8 | i16 | i32 | i64 | i128"
    UNSIGNED_INTEGER = "usize | u8 | u16 | u32 | u64 | u128"
    OPTIONAL_U16 = "u16 | None"
    OPTIONAL_STRING = "str | None"
    IP_ADDR = "ipaddress.IPv4Address | ipaddress.IPv6Address"
    IPV4_ADDR = "ipaddress.IPv4Address"
    IPV6_ADDR = "ipaddress.IPv6Address"
    HOST = "Host"
    PROTOCOL = "Protocol"
    SERDE = "T: JSON-serializable and deserializable"
    VERSION = "Version"
    VERSION_REQ = "VersionReq"
    URL = "Url"
    COLLECTION_LENGTH = "T: collection supporting len()"

    @property
    def description(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def describe_expected(*tags: TypeDescriptor) -> str:
    """Diagnostic listing the accepted types, e.g. for an unsupported field."""
    if not tags:
        raise ValueError("at least one type descriptor is required")
    return "expected one of: " + ", ".join(tag.description for tag in tags)
