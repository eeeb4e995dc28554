# src/xml_kit/streams/sources.py

import asyncio
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from typing import BinaryIO, TypeAlias

ByteSource: TypeAlias = BinaryIO | Iterable[bytes] | AsyncIterable[bytes]

DEFAULT_CHUNK_SIZE = 64 * 1024


async def iter_chunks(
    source: ByteSource, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> AsyncIterator[bytes]:
    """Adapt any supported byte source to an async stream of chunks.

    File objects are read in ``chunk_size`` pieces off the event loop.
    Iterables are passed through chunk for chunk.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    if hasattr(source, "read"):
        while True:
            # Use to_thread to avoid blocking event loop with file I/O
            chunk = await asyncio.to_thread(source.read, chunk_size)  # type: ignore[union-attr]
            if not chunk:
                return
            yield chunk
    elif isinstance(source, AsyncIterable):
        async for chunk in source:
            yield chunk
    elif isinstance(source, (bytes, bytearray)):
        raise TypeError("Expected a stream of chunks, got a bytes object")
    else:
        for chunk in source:
            yield chunk
