"""Stable device identities derived from claim tokens."""

import hashlib
import uuid


def derive_device_uuid(token: str) -> uuid.UUID:
    """
    Derive the name-based (version 3) UUID of a claim token.

    The MD5 digest is taken over the UTF-8 bytes of the token alone, without
    a namespace prefix, so the value matches what the device firmware and
    gateways compute for the same token.
    """
    digest = hashlib.md5(token.encode("utf-8")).digest()
    return uuid.UUID(bytes=digest, version=3)
