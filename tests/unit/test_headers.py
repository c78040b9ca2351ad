from __future__ import annotations

import pytest

from roster_ingest.models.canonical import DEFAULT_HEADER_LABELS, CanonicalField
from roster_ingest.models.ingest_result import DocumentFormat
from roster_ingest.parsing.headers import (
    HEADER_RULES,
    HEADER_SCAN_LIMIT,
    normalize_header_name,
    resolve_grid_headers,
    resolve_headers,
)

PROGRAMME = CanonicalField.PROGRAMME_NAME.value
ROBE = CanonicalField.ROBE_EMAIL.value
FOLDER = CanonicalField.FOLDER_EMAIL.value
TEACHER = CanonicalField.ACCOMPANYING_TEACHER.value
IN_CHARGE = CanonicalField.FOLDER_IN_CHARGE.value


class TestNormalizeHeaderName:
    @pytest.mark.parametrize(
        "label,expected",
        [
            ("Programme Name", PROGRAMME),
            ("Course", PROGRAMME),
            ("Class Wise/Section Wise", PROGRAMME),
            ("Robe Email", ROBE),
            ("Teacher Email", ROBE),
            ("Accompanying Faculty", ROBE),
            ("Folder Email", FOLDER),
            ("In Charge Email", FOLDER),
            ("Teacher Name", TEACHER),
            ("Folder Name", IN_CHARGE),
            ("Name of person in charge", IN_CHARGE),
            ("Teacher", TEACHER),
            ("Name", TEACHER),
        ],
    )
    def test_rule_table(self, label, expected):
        assert normalize_header_name(label) == expected

    def test_first_rule_wins(self):
        # matches both the programme and the robe-email rule
        assert normalize_header_name("Programme Teacher Email") == PROGRAMME

    def test_unmapped_label_is_trimmed_only(self):
        assert normalize_header_name("  Remarks  ") == "Remarks"
        assert normalize_header_name("Sl. No") == "Sl. No"

    @pytest.mark.parametrize("field", list(CanonicalField))
    def test_canonical_labels_are_fixed_points(self, field):
        assert normalize_header_name(field.value) == field.value
        assert normalize_header_name(normalize_header_name(field.value.upper())) == field.value

    def test_rules_are_individually_testable(self):
        names = [name for name, _predicate, _target in HEADER_RULES]
        assert names[0] == "programme"
        _name, predicate, target = HEADER_RULES[0]
        assert predicate("course code") is True
        assert target is CanonicalField.PROGRAMME_NAME


class TestResolveHeaders:
    def test_simple_format_uses_first_line(self):
        lines = ["Programme Name,Robe Email ID", "BCA,a@x.com"]
        res = resolve_headers(lines, DocumentFormat.SIMPLE)
        assert res.header_row_index == 0
        assert res.no_header is False
        assert len(res.rows) == 1
        row = res.rows[0]
        assert row.index == 0
        assert row.line_number == 2
        assert row.fields == {PROGRAMME: "BCA", ROBE: "a@x.com"}

    def test_complex_format_skips_title_rows(self):
        lines = ["Convocation Duty Roster 2024", "Sl. No,Programme,Email", "1,BCA,a@x.com"]
        res = resolve_headers(lines, DocumentFormat.COMPLEX)
        assert res.header_row_index == 1
        assert res.labels == ["Sl. No", "Programme", "Email"]
        assert res.normalized == ["Sl. No", PROGRAMME, "Email"]
        assert res.rows[0].fields == {"Sl. No": "1", PROGRAMME: "BCA", "Email": "a@x.com"}
        assert res.rows[0].line_number == 3

    def test_no_header_mode_synthesizes_default_labels(self):
        res = resolve_headers(["BCA 101A,x@y.com"], DocumentFormat.COMPLEX)
        assert res.no_header is True
        assert res.header_row_index is None
        assert res.labels == list(DEFAULT_HEADER_LABELS)
        assert res.rows[0].values == ("BCA 101A", "x@y.com")
        assert res.rows[0].fields == {}

    def test_header_beyond_scan_limit_is_not_found(self):
        lines = [f"row {i} data" for i in range(HEADER_SCAN_LIMIT)]
        lines.append("Programme Name,Robe Email ID")
        res = resolve_headers(lines, DocumentFormat.COMPLEX)
        assert res.no_header is True
        assert len(res.rows) == HEADER_SCAN_LIMIT + 1

    def test_first_non_empty_value_wins_for_shared_key(self):
        lines = ["Programme,Course,Robe Email", ",BCA,a@x.com", "MCA,BCA,b@x.com"]
        res = resolve_headers(lines, DocumentFormat.COMPLEX)
        assert res.normalized == [PROGRAMME, PROGRAMME, ROBE]
        assert res.rows[0].fields[PROGRAMME] == "BCA"
        assert res.rows[1].fields[PROGRAMME] == "MCA"

    def test_short_row_only_maps_present_values(self):
        lines = ["Programme Name,Robe Email ID,Folder Email ID", "BCA"]
        res = resolve_headers(lines, DocumentFormat.SIMPLE)
        assert res.rows[0].fields == {PROGRAMME: "BCA"}

    def test_blank_header_cells_are_not_keys(self):
        lines = ["Programme Name,,Robe Email ID", "BCA,junk,a@x.com"]
        res = resolve_headers(lines, DocumentFormat.SIMPLE)
        assert "" not in res.rows[0].fields
        assert res.rows[0].fields == {PROGRAMME: "BCA", ROBE: "a@x.com"}


def test_grid_first_row_is_header():
    grid = [["Programme Name", "Robe Email ID"], ["BCA", "a@x.com"]]
    res = resolve_grid_headers(grid)
    assert res.header_row_index == 0
    assert res.rows[0].fields == {PROGRAMME: "BCA", ROBE: "a@x.com"}
    assert res.rows[0].line_number == 2
