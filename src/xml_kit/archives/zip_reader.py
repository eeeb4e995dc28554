# src/xml_kit/archives/zip_reader.py

import io
import logging
import posixpath
import zipfile
from collections.abc import AsyncIterator
from dataclasses import dataclass

from stream_unzip import async_stream_unzip

from xml_kit.streams.sources import DEFAULT_CHUNK_SIZE, ByteSource, iter_chunks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZipEntry:
    """A zip member read fully into memory."""

    name: str
    data: bytes


class ZipEntryStream:
    """A zip member read straight off the container stream.

    Entries share one underlying transport, so each one must be either
    iterated to the end or drained before the next entry is available.
    """

    def __init__(self, name: str, chunks: AsyncIterator[bytes]) -> None:
        self.name = name
        self._chunks = chunks
        self._consumed = False

    def __aiter__(self) -> AsyncIterator[bytes]:
        if self._consumed:
            raise RuntimeError(f"Entry '{self.name}' can only be consumed once")
        self._consumed = True
        return self._chunks

    async def drain(self) -> None:
        """Discard whatever is left of the entry's content.

        Safe to call after a partial or complete read.
        """
        self._consumed = True
        skipped = 0
        async for chunk in self._chunks:
            skipped += len(chunk)
        logger.debug("Drained %d bytes of zip entry %s", skipped, self.name)


def read_zip_entries(data: bytes) -> list[ZipEntry]:
    """Read every file in a zip held in memory, in listing order.

    Directory entries are skipped and names are reduced to their base name.
    """
    entries: list[ZipEntry] = []
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            entries.append(
                ZipEntry(
                    name=posixpath.basename(info.filename),
                    data=archive.read(info),
                )
            )

    logger.debug("Read %d entries from zip buffer", len(entries))
    return entries


async def iter_zip_entry_streams(
    source: ByteSource, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> AsyncIterator[ZipEntryStream]:
    """Walk a zip container sequentially without loading it in memory.

    Each yielded entry must be consumed or drained by the caller before
    asking for the next one; the reader raises otherwise.
    """
    chunks = iter_chunks(source, chunk_size)
    async for raw_name, _size, unzipped_chunks in async_stream_unzip(chunks):
        name = posixpath.basename(_decode_name(raw_name))
        logger.debug("Found zip entry %s", name)
        yield ZipEntryStream(name, unzipped_chunks)


def _decode_name(raw_name: bytes) -> str:
    # Names without the UTF-8 flag are CP437 per the zip format
    try:
        return raw_name.decode("utf-8")
    except UnicodeDecodeError:
        return raw_name.decode("cp437")
