"""Shared pytest fixtures for lab_summary tests."""

import pytest
from pathlib import Path
from lab_summary.schemas.config import PipelineConfig
from lab_summary.grammar.vocabulary import ENGLISH, HINDI

ENGLISH_SUMMARY = """# 🩸 Your Lab Report, Decoded

## 🧪 **Test**: Hemoglobin (aka "Hb")
🧠 **Why this test matters**: carries oxygen around your body
📊 **Results**: 10 g/dL — slightly low
🩺 **Tiny Tip**: eat iron-rich food
🎯 **Verdict & Vibes**: needs attention

## 🧪 **Test**: Fasting Glucose
🧠 **Why this test matters**: shows how your body handles sugar
📊 **Results**: 128 mg/dL — above the normal range
🩺 **Tiny Tip**: swap soda for water
🎯 **Verdict & Vibes**: keep an eye on it (high)

## 🧪 **Test**: Vitamin D (aka "Sunshine Vitamin")
🧠 **Why this test matters**: keeps bones strong
📊 **Results**: 35 ng/mL — right in range
🩺 **Tiny Tip**: a short walk outside helps
🎯 **Verdict & Vibes**: all good

👉 "Stay hydrated and keep smiling"
"""

HINDI_SUMMARY = """## 🧪 **टेस्ट**: हीमोग्लोबिन (उर्फ़ "Hb")
🧠 **यह टेस्ट क्यों ज़रूरी है**: शरीर में ऑक्सीजन पहुँचाता है
📊 **परिणाम**: 10 g/dL — थोड़ा कम
🩺 **छोटी सलाह**: आयरन वाला खाना खाएँ
🎯 **फ़ैसला और वाइब्स**: ध्यान देने की ज़रूरत

## 🧪 **टेस्ट**: शुगर
📊 **परिणाम**: 180 mg/dL — सामान्य से अधिक

## 🧪 **टेस्ट**: थायरॉइड
🧠 **यह टेस्ट क्यों ज़रूरी है**: ऊर्जा नियंत्रित करता है

👉 "खूब पानी पिएँ"
"""


@pytest.fixture
def english_summary() -> str:
    """Three-test English narrative with a preamble and a final tip."""
    return ENGLISH_SUMMARY


@pytest.fixture
def hindi_summary() -> str:
    """Three-test Hindi narrative; the last test has no results line."""
    return HINDI_SUMMARY


@pytest.fixture
def english():
    return ENGLISH


@pytest.fixture
def hindi():
    return HINDI


@pytest.fixture
def config() -> PipelineConfig:
    """Default PipelineConfig (English)."""
    return PipelineConfig()


@pytest.fixture
def english_summary_path(tmp_path) -> str:
    """English narrative written to a temporary .md file."""
    path = tmp_path / "report_en.md"
    path.write_text(ENGLISH_SUMMARY, encoding="utf-8")
    return str(path)


@pytest.fixture
def hindi_summary_path(tmp_path) -> str:
    path = tmp_path / "report_hi.md"
    path.write_text(HINDI_SUMMARY, encoding="utf-8")
    return str(path)
