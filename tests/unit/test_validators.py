from __future__ import annotations

import pytest

from roster_ingest.parsing.validators import (
    EmptyDocumentError,
    IngestError,
    NoColumnsError,
    validate_data_rows,
    validate_document,
    validate_header,
)


def test_empty_document_rejected():
    with pytest.raises(EmptyDocumentError):
        validate_document([])


def test_document_with_lines_accepted():
    validate_document(["a"])


def test_header_of_blank_labels_rejected():
    with pytest.raises(NoColumnsError):
        validate_header(["", "  ", ""])


def test_header_with_only_unmapped_labels_accepted():
    validate_header(["Sl. No", "Remarks", ""])


def test_header_with_one_canonical_label_accepted():
    validate_header(["Sl. No", "Programme Name"])


def test_no_data_rows_rejected():
    with pytest.raises(EmptyDocumentError) as exc:
        validate_data_rows([])
    assert "No data" in str(exc.value)


def test_errors_share_base_class_and_types():
    assert issubclass(EmptyDocumentError, IngestError)
    assert issubclass(NoColumnsError, IngestError)
    assert EmptyDocumentError.error_type == "EMPTY_DOCUMENT"
    assert NoColumnsError.error_type == "NO_COLUMNS"
