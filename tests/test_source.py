"""Tests for reading and header-checking the source CSV."""

import pytest

from adimport.errors import (
    EmptySourceError,
    HeaderMismatchError,
    SourceDecodeError,
    SourceNotFoundError,
)
from adimport.ingestion.source import EXPECTED_HEADER, parse_header, read_source_lines

HEADER = ",".join(EXPECTED_HEADER)


class TestParseHeader:
    def test_trims_names(self):
        assert parse_header(" campaign_id , date,impressions ") == [
            "campaign_id",
            "date",
            "impressions",
        ]


class TestReadSourceLines:
    def test_returns_data_lines(self, write_csv):
        csv_file = write_csv(f"{HEADER}\nC1,2024-01-01,100,10,5.50,2\n")
        assert read_source_lines(csv_file) == ["C1,2024-01-01,100,10,5.50,2"]

    def test_windows_line_endings(self, write_csv):
        csv_file = write_csv(
            f"{HEADER}\r\nC1,2024-01-01,100,10,5.50,2\r\nC2,2024-01-02,200,20,3.25,1\r\n"
        )
        assert read_source_lines(csv_file) == [
            "C1,2024-01-01,100,10,5.50,2",
            "C2,2024-01-02,200,20,3.25,1",
        ]

    def test_surrounding_whitespace_trimmed(self, write_csv):
        csv_file = write_csv(f"\n\n  {HEADER}\nC1,2024-01-01,100,10,5.50,2\n\n\n")
        assert read_source_lines(csv_file) == ["C1,2024-01-01,100,10,5.50,2"]

    def test_header_fields_trimmed(self, write_csv):
        csv_file = write_csv(
            "campaign_id , date , impressions , clicks , spend , conversions\n"
            "C1,2024-01-01,100,10,5.50,2"
        )
        assert len(read_source_lines(csv_file)) == 1

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.csv"
        with pytest.raises(SourceNotFoundError, match="CSV file not found") as exc_info:
            read_source_lines(missing)
        assert exc_info.value.path == missing

    def test_header_only(self, write_csv):
        csv_file = write_csv(f"{HEADER}\n")
        with pytest.raises(EmptySourceError, match="no data rows"):
            read_source_lines(csv_file)

    def test_empty_file(self, write_csv):
        csv_file = write_csv("")
        with pytest.raises(EmptySourceError):
            read_source_lines(csv_file)

    @pytest.mark.parametrize(
        "header",
        [
            "date,campaign_id,impressions,clicks,spend,conversions",
            "campaign_id,date,impressions,clicks,spend",
            "campaign_id,date,impressions,clicks,spend,conversions,revenue",
            "Campaign_ID,date,impressions,clicks,spend,conversions",
        ],
    )
    def test_header_mismatch(self, write_csv, header):
        csv_file = write_csv(f"{header}\nC1,2024-01-01,100,10,5.50,2\n")
        with pytest.raises(HeaderMismatchError, match="Unexpected CSV header") as exc_info:
            read_source_lines(csv_file)
        assert exc_info.value.header == header.split(",")
        assert exc_info.value.expected == EXPECTED_HEADER

    def test_invalid_utf8(self, tmp_path):
        csv_file = tmp_path / "latin1.csv"
        csv_file.write_bytes(HEADER.encode() + b"\nC\xff1,2024-01-01,100,10,5.50,2\n")
        with pytest.raises(SourceDecodeError, match="not valid UTF-8") as exc_info:
            read_source_lines(csv_file)
        assert exc_info.value.path == csv_file
