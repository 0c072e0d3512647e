"""Tests for the 4-stage file-driven runner."""

import pytest
from lab_summary import parse_summary
from lab_summary.pipeline.runner import run_pipeline, run_text
from lab_summary.schemas.config import PipelineConfig


def test_pipeline_success(config, english_summary_path, english_summary):
    """Reading and parsing a file gives the same summary as the pure parser."""
    result = run_pipeline(english_summary_path, config)
    assert result.success is True
    assert result.error is None
    assert result.language == "en"
    assert result.summary == parse_summary(english_summary)


def test_pipeline_has_four_stages(config, english_summary_path):
    result = run_pipeline(english_summary_path, config)
    stage_names = [s.stage_name for s in result.stages]
    assert stage_names == ["split", "extract", "classify", "assemble"]


def test_pipeline_stages_have_reasoning(config, english_summary_path):
    result = run_pipeline(english_summary_path, config)
    for stage in result.stages:
        assert stage.reasoning, f"Stage {stage.stage_name} has empty reasoning"
        assert stage.timing_seconds >= 0


def test_stage_outputs(config, english_summary_path):
    result = run_pipeline(english_summary_path, config)
    split, extract, classify, assemble = result.stages
    assert split.output["section_count"] == 3
    assert extract.output["missing_results"] == 0
    assert classify.output["counts"] == {"low": 1, "normal": 1, "high": 1}
    assert assemble.output["test_count"] == 3
    assert assemble.output["sparse"] is False


def test_hindi_pipeline(hindi_summary_path):
    result = run_pipeline(hindi_summary_path, PipelineConfig(language="hi"))
    assert result.success is True
    assert result.language == "hi"
    assert len(result.summary.tests) == 3
    assert result.stages[1].output["missing_results"] == 1


def test_missing_file_is_a_failure(config, tmp_path):
    """An unreadable source is reported as a failure, not as an empty parse."""
    result = run_pipeline(str(tmp_path / "missing.md"), config)
    assert result.success is False
    assert result.error
    assert result.stages == []
    assert result.summary.tests == []


def test_undecodable_file_is_a_failure(config, tmp_path):
    path = tmp_path / "latin1.md"
    path.write_bytes("## 🧪 **Test**: Café".encode("utf-8")[:-2] + b"\xe9\xff")
    result = run_pipeline(str(path), config)
    assert result.success is False
    assert result.error


def test_sparse_parse_still_succeeds(config, tmp_path):
    path = tmp_path / "sparse.md"
    path.write_text("## 🧪 **Test**: Glucose\n", encoding="utf-8")
    result = run_pipeline(str(path), config)
    assert result.success is True
    assert result.stages[-1].output["sparse"] is True


def test_run_text_matches_parser(config, english_summary):
    result = run_text(english_summary, config)
    assert result.source_path == "<text>"
    assert result.summary == parse_summary(english_summary)


def test_run_text_rejects_non_string(config):
    with pytest.raises(TypeError):
        run_text(None, config)
