import logging

import pytest

from metar_decoder.exceptions import DecoderIOError, FormatError
from metar_decoder.extraction import (
    ItemKind,
    describe_query_line,
    extract_records,
    extract_sections,
)


def records(items):
    return [item.text for item in items if item.kind is ItemKind.RECORD]


class TestExtractSections:

    def test_sectioned_blob(self, sectioned_blob):
        items = list(extract_sections(sectioned_blob.splitlines()))

        kinds = [item.kind for item in items]
        assert kinds[:3] == [ItemKind.QUERY_META, ItemKind.QUERY_META, ItemKind.LOCATION]
        assert items[0].text == "The weather information has been downloaded at: 25-04-2020 14:25."
        assert items[1].text == "The weather information ranges from 25-04-2020 12:00 to 25-04-2020 14:00 UTC."
        assert items[2].text == "LZKZ, Kosice (Slovakia)"

        assert records(items) == [
            "202004251200 METAR LZKZ 251200Z AUTO 33012G25KT 290V360 9999 FEW045 14/05 Q1003 NOSIG=",
            "202004251230 METAR LZKZ 251230Z NIL=",
            "202004251300 SPECI LZKZ 251300Z 34014KT 4000 -SHRA BKN030CB 12/07 Q1002=",
            "202004251330 METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=",
        ]

    def test_no_reports_stops_extraction(self, no_reports_blob):
        items = list(extract_sections(no_reports_blob.splitlines()))

        assert items[-1].kind is ItemKind.NO_REPORTS
        assert items[-1].text == "No METAR/SPECI reports for XXXX in the selected interval"
        assert records(items) == []

    def test_only_first_location_line_is_kept(self, sectioned_blob):
        items = list(extract_sections(sectioned_blob.splitlines()))
        assert [item.kind for item in items].count(ItemKind.LOCATION) == 1

    def test_partial_record_at_end_is_dropped(self):
        lines = [
            "#####", "# Query made at 04/25/2020 14:25:11 UTC", "#####",
            "#####", "# LZKZ", "#####",
            "#####", "# METAR/SPECI from LZKZ", "#####",
            "202004251330 METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=",
            "202004251400 METAR LZKZ 251400Z 34015KT",
        ]
        assert len(records(extract_sections(lines))) == 1

    def test_content_before_first_section_is_a_format_error(self):
        lines = ["# stray header", "#####", "# Query made at 04/25/2020 14:25:11 UTC", "#####"]
        with pytest.raises(FormatError):
            list(extract_sections(lines))

    def test_content_in_a_fifth_section_is_a_format_error(self):
        lines = [
            "###", "# Query made at 04/25/2020 14:25:11 UTC", "###",
            "###", "# LZKZ", "###",
            "###", "# METAR/SPECI from LZKZ", "###",
            "202004251330 METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=",
            "###", "# End of data", "###",
            "###", "# Unexpected", "###",
        ]
        items = extract_sections(lines)
        assert next(items).kind is ItemKind.QUERY_META
        with pytest.raises(FormatError, match="section 5"):
            list(items)

    def test_body_section_titles_are_skipped(self, sectioned_blob, caplog):
        with caplog.at_level(logging.DEBUG, logger="metar_decoder.extraction.sections"):
            items = list(extract_sections(sectioned_blob.splitlines()))

        assert not any("METAR/SPECI from" in text for text in records(items))
        assert "Skipping section title 'METAR/SPECI from LZKZ'" in caplog.text

    def test_trailer_is_ignored(self):
        lines = [
            "###", "# Query made at 04/25/2020 14:25:11 UTC", "###",
            "###", "# LZKZ", "###",
            "###", "# METAR/SPECI from LZKZ", "###",
            "202004251330 METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=",
            "###", "# End of data", "202004251400 METAR LZKZ 251400Z 34015KT CAVOK 13/06 Q1002=", "###",
        ]
        items = list(extract_sections(lines))
        assert len(records(items)) == 1

    def test_read_errors_become_decoder_io_errors(self):
        def failing_lines():
            yield "#####"
            raise OSError("disk gone")

        with pytest.raises(DecoderIOError):
            list(extract_sections(failing_lines()))

    def test_is_lazy(self):
        consumed = []

        def lines():
            for line in ["#####", "# Query made at 04/25/2020 14:25:11 UTC", "#####", "#####", "# LZKZ"]:
                consumed.append(line)
                yield line

        items = extract_sections(lines())
        first = next(items)
        assert first.kind is ItemKind.QUERY_META
        assert len(consumed) == 2


class TestExtractRecords:

    def test_flat_blob_newest_first(self, flat_blob):
        assert records(extract_records(flat_blob)) == [
            "LZKZ,2020,04,25,13,30,METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=",
            "LZKZ,2020,04,25,13,00,METAR LZKZ 251300Z 34014KT 9999 FEW040 12/06 Q1002 NOSIG=",
        ]

    def test_sectioned_blob_keeps_file_order(self, sectioned_blob):
        texts = records(extract_records(sectioned_blob))
        assert texts[0].startswith("202004251200")
        assert texts[-1].startswith("202004251330")

    def test_empty_blob(self):
        assert list(extract_records("")) == []


def test_describe_query_line_passes_other_lines_through():
    assert describe_query_line("WMO index: 11968") == "WMO index: 11968"
