"""Zip container reading for xml-kit.

Two modes:
- buffer: ``read_zip_entries`` reads a whole archive held in memory
- stream: ``iter_zip_entry_streams`` walks an archive entry by entry
  straight off a byte stream
"""

from .zip_reader import ZipEntry, ZipEntryStream, iter_zip_entry_streams, read_zip_entries

__all__ = [
    "ZipEntry",
    "ZipEntryStream",
    "iter_zip_entry_streams",
    "read_zip_entries",
]
