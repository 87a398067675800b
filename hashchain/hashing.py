FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_MASK_32 = 0xFFFFFFFF


def hash_string(key: str) -> int:
    """FNV-1a, 32 bit, over the UTF-8 bytes of the key."""
    hash = FNV_OFFSET_BASIS
    for byte in key.encode("utf-8"):
        hash ^= byte
        hash = (hash * FNV_PRIME) & _MASK_32
    return hash
