from .sources import DEFAULT_CHUNK_SIZE, ByteSource, iter_chunks

__all__ = [
    "ByteSource",
    "DEFAULT_CHUNK_SIZE",
    "iter_chunks",
]
