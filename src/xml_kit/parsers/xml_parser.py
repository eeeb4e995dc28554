# src/xml_kit/parsers/xml_parser.py

import logging
from time import monotonic

from xml_kit.observability import names
from xml_kit.observability.base import MetricsHook, NoOpMetricsHook
from xml_kit.streams.sources import ByteSource, iter_chunks

from .array_policy import ArrayPolicy
from .base import StructuralParser
from .config import XmlParserConfig
from .models import MalformedDocumentError, ParsedDocument
from .repair import repair_markup
from .row_stream import RowStream, RowStreamExtractor
from .structural import XmltodictParser

logger = logging.getLogger(__name__)


class XmlParser:
    """
    Tolerant XML-to-dict parser.

    - Tag names are uppercased, attributes are ``$``-prefixed strings
    - Known markup corruption is repaired before parsing
    - Attribute values are normalized (see normalize_attribute_value)
    - ``parse_stream`` extracts rows without loading the whole document

    Example:
        >>> parser = XmlParser()
        >>> parser.parse(b'<data><row id="1"/></data>')
        {'DATA': {'ROW': {'$id': '1'}}}
    """

    def __init__(
        self,
        config: XmlParserConfig = XmlParserConfig(),
        structural_parser: StructuralParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self._structural_parser = structural_parser or XmltodictParser()
        self._array_policy = ArrayPolicy(always_array=config.always_array)
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized %s with always_array=%s, validate=%s",
            type(self).__name__,
            config.always_array,
            config.validate,
        )

    def parse(
        self, data: bytes | str, *, validate: bool | None = None
    ) -> ParsedDocument:
        """Parse a complete XML document.

        Raises:
            MalformedDocumentError: If the repaired document is still not XML.
        """
        start = monotonic()
        text = (
            data.decode(self.config.encoding, errors="replace")
            if isinstance(data, bytes)
            else data
        )

        try:
            result = self._structural_parser.parse(
                repair_markup(text),
                array_policy=self._array_policy,
                validate=self._resolve_validate(validate),
            )
        except MalformedDocumentError:
            self.metrics_hook.increment(names.XML_PARSE_ERRORS_TOTAL)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.XML_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.XML_DOCUMENTS_PARSED_TOTAL)
        return result

    def parse_stream(
        self,
        source: ByteSource,
        row_tag: str,
        *,
        validate: bool | None = None,
    ) -> RowStream:
        """Stream rows named ``row_tag`` out of ``source``.

        The returned RowStream yields one EmissionBatch per chunk read from
        the source. Matching of ``row_tag`` ignores case; output keys are
        uppercased.
        """
        extractor = RowStreamExtractor(
            row_tag,
            self._structural_parser,
            validate=self._resolve_validate(validate),
            encoding=self.config.encoding,
            metrics_hook=self.metrics_hook,
        )
        logger.debug("Opening row stream for <%s>", row_tag)
        return RowStream(iter_chunks(source, self.config.chunk_size), extractor)

    def _resolve_validate(self, validate: bool | None) -> bool:
        return self.config.validate if validate is None else validate
