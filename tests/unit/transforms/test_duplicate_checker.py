"""Unit tests for the duplicate code and text checker."""

from __future__ import annotations

from core.types import DuplicateReport
from transforms.duplicate_checker import (
    DuplicateChecker,
    build_duplicate_checker,
    extract_code_token,
    extract_first_quoted,
    find_duplicates,
    normalize_compare_text,
)


def test_find_duplicates_reports_each_value_once() -> None:
    """Repeated values should be reported once, in order of repetition."""
    duplicates = find_duplicates(["A", "B", "B", "A", "A", "C"])

    assert duplicates == ["B", "A"]


def test_find_duplicates_membership_ignores_order() -> None:
    """Reordering input should not change which values are duplicates."""
    forward = find_duplicates(["x", "y", "x", "z", "y"])
    backward = find_duplicates(["y", "z", "x", "y", "x"])

    assert set(forward) == set(backward) == {"x", "y"}


def test_extract_code_token_reads_first_token_only() -> None:
    """Only the first _N token on a line should be read."""
    assert extract_code_token('\t_4 "Other" (_5 other text [1..])') == "_4"


def test_extract_first_quoted_reads_one_region() -> None:
    """Only the first quoted region should be read from a line."""
    assert extract_first_quoted('\t_1 "Say ""hi"""') == "Say "


def test_normalize_compare_text_strips_space_and_uppercases() -> None:
    """Comparison text should drop all whitespace and be upper-cased."""
    assert normalize_compare_text(" Light \t blue ") == "LIGHTBLUE"


def test_scan_flags_duplicate_normalized_text() -> None:
    """Texts differing only by case and spacing should be duplicates."""
    checker = build_duplicate_checker("code")

    report = checker.scan('\t_1 "Apple",\n\t_2 "Banana",\n\t_3 " apple"')

    assert report == DuplicateReport(duplicate_identifiers=(), duplicate_texts=("APPLE",))


def test_scan_flags_duplicate_codes() -> None:
    """Repeated _N codes should be reported."""
    checker = build_duplicate_checker("code")

    report = checker.scan('\t_1 "Red",\n\t_1 "Green"')

    assert report.duplicate_identifiers == ("_1",)


def test_scan_ignores_other_text_suffix_code() -> None:
    """The other-text suffix repeats the code but must not count twice."""
    checker = build_duplicate_checker("code")

    report = checker.scan('\t_1 "Red",\n\t_2 "Other, specify" (_2 other text [1..])')

    assert report.has_duplicates is False


def test_scan_preserves_first_quoted_quirk() -> None:
    """Texts sharing a prefix before an escaped quote collide."""
    checker = build_duplicate_checker("code")

    report = checker.scan('\t_1 "Say ""hi""",\n\t_2 "Say ""bye"""')

    assert report.duplicate_texts == ("SAY",)


def test_check_appends_comment_lines_for_codes_and_texts() -> None:
    """Comment style should append code then text diagnostics."""
    checker = build_duplicate_checker("code", "comment")
    text = '\t_1 "Red",\n\t_1 "red"'

    annotated, _ = checker.check(text)

    assert annotated == (
        text
        + "\n' ❌ ERROR Duplicate Code: _1"
        + "\n' ❌ ERROR Duplicate Text: RED"
    )


def test_check_appends_note_lines_for_labels() -> None:
    """Label fields with note style should read label attributes and bodies."""
    checker = build_duplicate_checker("label", "note")
    text = (
        '<value label="a">Apple</value>\n'
        '<value label="b">Banana</value>\n'
        '<value label="a"> apple </value>\n'
    )

    annotated, report = checker.check(text)

    assert report.duplicate_identifiers == ("a",) and annotated.endswith(
        "</value>\n<note>❌ ERROR Duplicate Label: a</note>\n"
        "<note>❌ ERROR Duplicate Text: APPLE</note>"
    )


def test_check_leaves_unique_text_untouched() -> None:
    """Text without duplicates should be returned unchanged."""
    checker = build_duplicate_checker()
    text = '\t_1 "Red",\n\t_2 "Green"'

    annotated, report = checker.check(text)

    assert annotated == text and not report.has_duplicates


def test_custom_extractors_are_supported() -> None:
    """Checker should accept arbitrary field extractors."""
    checker = DuplicateChecker(
        identifier_extractor=lambda line: line.split("=")[0],
        text_extractor=lambda line: None,
        identifier_label="Key",
    )

    annotated, _ = checker.check("a=1\nb=2\na=3")

    assert annotated.endswith("' ❌ ERROR Duplicate Key: a")


def test_extract_code_token_ignores_non_ascii_digits() -> None:
    """Only ASCII digit runs form a code token."""
    assert extract_code_token('\t_١ "Red" _2') == "_2"
