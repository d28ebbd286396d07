# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""Tests for the header and directory dumps."""

from pdnconv.pdn_parser import PDNParser
from pdnconv.value_formatter import format_field, format_header, format_entry, get_metadata

from conftest import build_pdn, BYTE


def test_format_field():
    assert format_field("PDNImageHeader", "order", 0x4D4D) == "PDNImageHeader.order: 19789 (0x4D4D)"
    assert format_field("Custom", "size", 0) == "Custom.size: 0 (0x0)"


def test_format_header(uniform_pdn):
    lines = format_header(PDNParser(file_data=uniform_pdn).parse().header)

    assert lines[0] == "PDNImageHeader.order: 19789 (0x4D4D)"
    assert "PDNImageHeader.baseIFDOffset: 28 (0x1C)" in lines
    assert len(lines) == 9


def test_format_entry_marks_unhandled():
    image = PDNParser(file_data=build_pdn(extra_entries=[(0x9000, BYTE, 5, 0)])).parse()

    assert format_entry(image.entries[0]) == "IFD: ImageWidth (tag 256, SHORT, count 1, 262144 (0x40000))"
    assert format_entry(image.entries[-1]).endswith(" Unhandled type: BYTE")


def test_get_metadata(uniform_pdn):
    metadata = get_metadata(PDNParser(file_data=uniform_pdn).parse())

    assert metadata["PDN:CCDHeight"] == 4
    assert metadata["PDN:ImageHeight"] == 8
