"""
Delimited-text record parser for the lab data files.

Turns CSV-like text into an ordered list of field mappings keyed by the
header row. Quoted fields may contain commas, and doubled quotes inside a
field collapse to a single quote.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from labsite.models.types import FieldMapping


# Line breaks between records
LINE_BREAK = re.compile(r"\r\n|\n")

# A comma is a delimiter only when an even number of quotes follows it
# up to the end of the line.
QUOTE_AWARE_COMMA = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')

# One enclosing quote on either end of a value
ENCLOSING_QUOTE = re.compile(r'^"|"$')

BYTE_ORDER_MARK = "\ufeff"


@dataclass
class ParserConfig:
    """Configuration for record parsing."""
    delimiter_pattern: Pattern[str] = QUOTE_AWARE_COMMA
    line_pattern: Pattern[str] = LINE_BREAK
    # Value used for header columns missing from a row
    missing_value: str = ""


class RecordParser:
    """
    Parser for header-plus-rows delimited text.

    The parser never raises on malformed rows: short rows are padded with
    empty strings and surplus values are dropped.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse(self, text: str) -> List[FieldMapping]:
        """
        Parse delimited text into field mappings.

        Args:
            text: Raw text, header line first

        Returns:
            One mapping per non-blank data line, in file order. Empty when the
            text has no data lines.
        """
        lines = self._split_lines(text)
        if len(lines) < 2:
            return []

        headers = [self._clean_header(h) for h in self.split_line(lines[0])]

        records = []
        for line in lines[1:]:
            if not line.strip():
                continue
            values = [self.clean_value(v) for v in self.split_line(line)]
            records.append(self._build_record(headers, values))
        return records

    def split_line(self, line: str) -> List[str]:
        """Split a line on commas that are not inside quotes."""
        return self.config.delimiter_pattern.split(line)

    @staticmethod
    def clean_value(value: str) -> str:
        """Trim a raw value, drop its enclosing quotes and unescape quotes."""
        if not value:
            return ""
        value = ENCLOSING_QUOTE.sub("", value.strip())
        return value.replace('""', '"')

    def _split_lines(self, text: str) -> List[str]:
        text = text.strip().lstrip(BYTE_ORDER_MARK).strip()
        if not text:
            return []
        return self.config.line_pattern.split(text)

    @staticmethod
    def _clean_header(header: str) -> str:
        return ENCLOSING_QUOTE.sub("", header.strip())

    def _build_record(self, headers: List[str], values: List[str]) -> FieldMapping:
        record: FieldMapping = {}
        for index, header in enumerate(headers):
            if index < len(values):
                record[header] = values[index]
            else:
                record[header] = self.config.missing_value
        return record


_default_parser = RecordParser()


def parse_records(text: str) -> List[FieldMapping]:
    """Parse delimited text with the default parser configuration."""
    return _default_parser.parse(text)
