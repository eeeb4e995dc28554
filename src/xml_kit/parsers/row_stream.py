# src/xml_kit/parsers/row_stream.py

"""Streaming extraction of repeating row elements from an XML byte stream.

Rows are expected to be single self-closing tags (``<ROW a="1" b="2"/>``).
Each chunk is matched against the row tag; complete rows are parsed and
emitted, and whatever didn't match is carried over to the next chunk so a
row split across a chunk boundary is completed later. Text still carried
when the stream ends is discarded.
"""

from __future__ import annotations

import codecs
import inspect
import logging
import re
from collections.abc import AsyncIterator, Awaitable, Callable
from time import monotonic

from xml_kit.observability import names
from xml_kit.observability.base import MetricsHook, NoOpMetricsHook

from .array_policy import DEFAULT_ARRAY_POLICY
from .base import StructuralParser
from .models import EmissionBatch, MalformedDocumentError, ParsedDocument
from .repair import repair_markup

logger = logging.getLogger(__name__)

ROW_CONTAINER_TAG = "DATA"

BatchListener = Callable[[EmissionBatch], Awaitable[None] | None]


def compile_row_pattern(row_tag: str) -> re.Pattern[str]:
    """Pattern for one complete ``<row_tag ...>`` start tag.

    The tag name must end right after ``row_tag`` and quoted attribute
    values may contain ``>``. Case is folded for ASCII letters only, so a
    match always upper-cases to the same key as ``row_tag``.
    """
    if not row_tag:
        raise ValueError("row_tag must not be empty")
    return re.compile(
        rf"<{re.escape(row_tag)}(?=[\s/>])(?:\"[^\"]*\"|'[^']*'|[^'\">])*>",
        re.IGNORECASE | re.ASCII,
    )


class RowStreamExtractor:
    """Per-stream state machine turning byte chunks into EmissionBatches.

    Every call to ``feed`` produces exactly one emission. Not thread-safe;
    one instance per stream.
    """

    def __init__(
        self,
        row_tag: str,
        structural_parser: StructuralParser,
        *,
        validate: bool = False,
        encoding: str = "utf-8",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.row_tag = row_tag
        self._pattern = compile_row_pattern(row_tag)
        self._row_key = row_tag.upper()
        self._structural_parser = structural_parser
        self._validate = validate
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._carry = ""
        self.metrics_hook = metrics_hook

    @property
    def carry(self) -> str:
        return self._carry

    def feed(self, chunk: bytes) -> EmissionBatch:
        window = self._carry + self._decoder.decode(chunk)
        self.metrics_hook.increment(names.XML_STREAM_CHUNKS_TOTAL)

        rows = self._pattern.findall(window)
        if not rows:
            self._carry = window
            logger.debug(
                "No complete <%s> in chunk, carrying %d chars",
                self.row_tag,
                len(window),
            )
            return None

        start = monotonic()
        fragment = repair_markup("\n".join(rows))
        try:
            result = self._structural_parser.parse(
                f"<{ROW_CONTAINER_TAG}>{fragment}</{ROW_CONTAINER_TAG}>",
                array_policy=DEFAULT_ARRAY_POLICY,
                validate=self._validate,
            )
        except MalformedDocumentError:
            self.metrics_hook.increment(names.XML_PARSE_ERRORS_TOTAL)
            raise

        self._carry = self._pattern.sub("", window)

        batch = _as_rows(result[ROW_CONTAINER_TAG][self._row_key])
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.XML_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.XML_STREAM_ROWS_EMITTED, len(batch))
        logger.debug(
            "Extracted %d <%s> rows, carrying %d chars",
            len(batch),
            self.row_tag,
            len(self._carry),
        )
        return batch

    def close(self) -> str:
        """End the stream and return the discarded leftover text."""
        leftover = self._carry
        pending, _ = self._decoder.getstate()
        self._decoder.reset()
        self._carry = ""

        if leftover.strip() or pending:
            logger.warning(
                "Stream ended with %d unmatched chars and %d undecoded bytes "
                "for <%s>, discarding",
                len(leftover),
                len(pending),
                self.row_tag,
            )
            self.metrics_hook.increment(
                names.XML_STREAM_CARRY_DISCARDED, len(leftover) + len(pending)
            )
        return leftover


class RowStream:
    """Ordered, single-pass channel of EmissionBatches for one byte stream.

    Consume it either with ``async for`` or with ``subscribe``. Parse
    failures are raised at the chunk that caused them and end the stream.
    """

    def __init__(
        self,
        chunks: AsyncIterator[bytes],
        extractor: RowStreamExtractor,
    ) -> None:
        self._chunks = chunks
        self._extractor = extractor
        self._consumed = False

    def __aiter__(self) -> AsyncIterator[EmissionBatch]:
        if self._consumed:
            raise RuntimeError("RowStream can only be consumed once")
        self._consumed = True
        return self._emit()

    async def _emit(self) -> AsyncIterator[EmissionBatch]:
        try:
            async for chunk in self._chunks:
                yield self._extractor.feed(chunk)
        finally:
            self._extractor.close()

    async def subscribe(self, listener: BatchListener) -> None:
        """Call ``listener`` once per chunk until the source ends.

        Async listeners are awaited before the next chunk is read.
        """
        async for batch in self:
            if inspect.iscoroutinefunction(listener):
                await listener(batch)
            else:
                result = listener(batch)
                if inspect.isawaitable(result):
                    await result

    async def rows(self) -> AsyncIterator[ParsedDocument]:
        """Flatten the stream into individual rows, skipping empty chunks."""
        async for batch in self:
            if batch:
                for row in batch:
                    yield row


def _as_rows(value: ParsedDocument | list[ParsedDocument]) -> list[ParsedDocument]:
    if isinstance(value, list):
        return value
    return [value]
