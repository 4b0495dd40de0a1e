import hashlib

import rfc8785


def dumps_bytes(document: dict) -> bytes:
    out = rfc8785.dumps(document)
    return out if isinstance(out, (bytes, bytearray)) else out.encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()
