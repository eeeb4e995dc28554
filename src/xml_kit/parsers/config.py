# src/xml_kit/parsers/config.py

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XmlParserConfig:
    """Configuration for XML parsers.

    Immutable. Explicit. No magic defaults from environment.
    """

    always_array: bool = False  # Full-document parsing only
    validate: bool = False
    extension: str = ".xml"  # Compared case-sensitively
    encoding: str = "utf-8"
    chunk_size: int = 64 * 1024  # Read size for file sources


class XmlParserSettings(BaseModel):
    """On-disk shape of XmlParserConfig."""

    always_array: bool = False
    validate_xml: bool = Field(default=False, alias="validate")
    extension: str = ".xml"
    encoding: str = "utf-8"
    chunk_size: int = Field(default=64 * 1024, gt=0)

    class Config:
        extra = "forbid"
        populate_by_name = True

    def to_config(self) -> XmlParserConfig:
        return XmlParserConfig(
            always_array=self.always_array,
            validate=self.validate_xml,
            extension=self.extension,
            encoding=self.encoding,
            chunk_size=self.chunk_size,
        )


def load_config(path: str | Path) -> XmlParserConfig:
    """Load parser configuration from a YAML file.

    Raises:
        pydantic.ValidationError: On unknown keys or invalid values.
    """
    logger.info("Loading parser config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return XmlParserSettings(**data).to_config()
