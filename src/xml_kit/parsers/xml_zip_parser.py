# src/xml_kit/parsers/xml_zip_parser.py

import logging
import posixpath
from collections.abc import AsyncIterator

from xml_kit.archives.zip_reader import (
    ZipEntryStream,
    iter_zip_entry_streams,
    read_zip_entries,
)
from xml_kit.observability import names
from xml_kit.streams.sources import ByteSource

from .models import ParsedZipEntry, RowStreamEntry
from .xml_parser import XmlParser

logger = logging.getLogger(__name__)


class XmlZipParser(XmlParser):
    """XmlParser for XML files bundled in zip containers.

    Only entries whose extension equals ``config.extension`` (exact case)
    are parsed; everything else is skipped silently.
    """

    def parse_from_zip(
        self, data: bytes, *, validate: bool | None = None
    ) -> list[ParsedZipEntry]:
        """Parse every XML entry of an in-memory zip, in listing order."""
        results: list[ParsedZipEntry] = []

        for entry in read_zip_entries(data):
            if not self._is_xml(entry.name):
                logger.debug("Skipping zip entry %s", entry.name)
                self.metrics_hook.increment(names.ZIP_ENTRIES_SKIPPED_TOTAL)
                continue

            logger.info("Parsing zip entry %s", entry.name)
            results.append(
                ParsedZipEntry(
                    name=entry.name,
                    parsed_data=self.parse(entry.data, validate=validate),
                )
            )
            self.metrics_hook.increment(names.ZIP_ENTRIES_PARSED_TOTAL)

        return results

    async def iter_xml_entries(
        self, source: ByteSource
    ) -> AsyncIterator[ZipEntryStream]:
        """Yield the XML entries of a zip stream, draining all others.

        Each yielded entry must be read to the end before the next one is
        requested.
        """
        entries = iter_zip_entry_streams(source, self.config.chunk_size)
        async for entry in entries:
            if self._is_xml(entry.name):
                yield entry
            else:
                logger.debug("Draining zip entry %s", entry.name)
                self.metrics_hook.increment(names.ZIP_ENTRIES_SKIPPED_TOTAL)
                await entry.drain()

    async def iter_row_streams(
        self,
        source: ByteSource,
        row_tag: str,
        *,
        validate: bool | None = None,
    ) -> AsyncIterator[RowStreamEntry]:
        """Yield a RowStream per XML entry of a zip stream.

        Whatever the caller leaves unread of an entry's RowStream (after a
        parse failure, for instance) is drained before moving on.
        """
        async for entry in self.iter_xml_entries(source):
            logger.info("Streaming <%s> rows from zip entry %s", row_tag, entry.name)
            yield RowStreamEntry(
                name=entry.name,
                stream=self.parse_stream(entry, row_tag, validate=validate),
            )
            await entry.drain()
            self.metrics_hook.increment(names.ZIP_ENTRIES_PARSED_TOTAL)

    def _is_xml(self, name: str) -> bool:
        return posixpath.splitext(name)[1] == self.config.extension
