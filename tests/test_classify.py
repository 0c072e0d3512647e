"""Tests for the low/normal/high status classifier."""

import pytest
from lab_summary.pipeline.classify import classify_status


@pytest.mark.parametrize(
    "fragment, result_text, expected",
    [
        (" Iron\n📊 **Results**: 40 µg/dL", "40 µg/dL slightly low", "low"),
        (" Iron\n📊 **Results**: 40 µg/dL", "40 µg/dL LOW", "low"),
        (" LDL\n📊 **Results**: 190 mg/dL", "190 mg/dL slightly high", "high"),
        (" LDL\n📊 **Results**: 190 mg/dL", "190 mg/dL High", "high"),
        (" TSH (low)\n📊 **Results**: 0.2", "0.2", "low"),
        (" TSH (HIGH)\n📊 **Results**: 6.1", "6.1", "high"),
        (" Sodium\n📊 **Results**: 140 mmol/L", "140 mmol/L right in range", "normal"),
    ],
)
def test_status_cues(english, fragment, result_text, expected):
    assert classify_status(fragment, result_text, english) == expected


def test_low_annotation_beats_high_result(english):
    """Low is checked before high."""
    fragment = " Iron (low)\n📊 **Results**: high-ish reading"
    assert classify_status(fragment, "high-ish reading", english) == "low"


def test_low_result_beats_high_annotation(english):
    fragment = " Iron (high)\n📊 **Results**: slightly low"
    assert classify_status(fragment, "slightly low", english) == "low"


def test_bare_substring_counts(english):
    """Any substring match counts, even inside another word."""
    assert classify_status(" X", "highlighted in the report", english) == "high"
    assert classify_status(" X", "below threshold", english) == "low"


def test_fragment_prose_ignored_when_results_present(english):
    fragment = " Glucose\n🧠 **Why this test matters**: high sugar is bad\n📊 **Results**: 90"
    assert classify_status(fragment, "90", english, has_results=True) == "normal"


def test_fragment_prose_used_without_results(english):
    fragment = " Glucose\n🧠 **Why this test matters**: your level looks high"
    assert classify_status(fragment, "", english, has_results=False) == "high"


def test_no_results_and_no_cues_is_normal(english):
    fragment = " Glucose\n🧠 **Why this test matters**: energy"
    assert classify_status(fragment, "", english, has_results=False) == "normal"


@pytest.mark.parametrize(
    "result_text, expected",
    [
        ("10 g/dL थोड़ा कम", "low"),
        ("180 mg/dL सामान्य से अधिक", "high"),
        ("180 mg/dL ज़्यादा", "high"),
        ("5.2 slightly high", "high"),
        ("95 mg/dL सामान्य", "normal"),
    ],
)
def test_hindi_cues(hindi, result_text, expected):
    assert classify_status(" टेस्ट", result_text, hindi) == expected


def test_hindi_annotation(hindi):
    assert classify_status(" शुगर (कम)", "180 अधिक", hindi) == "low"
