"""Tests for the corpus inspection script."""
import sys
import json
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from unittest.mock import patch
import inspect_corpus


@pytest.fixture
def corpus_dir(tmp_path):
    record = {
        "documents": [
            {"name": "a", "pages": [{"content": "x y z"}]},
            {"name": "b", "pages": [{"content": "x y"}]},
        ]
    }
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    (corpus / "first.json").write_text(json.dumps(record), encoding="utf-8")
    return corpus


def test_parse_args_defaults():
    """Test defaults come from the configuration."""
    args = inspect_corpus.parse_args([])

    assert args.path == inspect_corpus.CORPUS_PATH
    assert args.top_k == inspect_corpus.SIMILARITY_TOP_K
    assert args.report is None


@patch('inspect_corpus.setup_logging')
def test_main_writes_report(mock_setup_logging, corpus_dir, tmp_path):
    """Test a directory is inspected and the report written."""
    report_path = tmp_path / "report.json"

    inspect_corpus.main([str(corpus_dir), "--top-k", "1", "--report", str(report_path)])

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["path"] == str(corpus_dir)
    assert len(report["collections"]) == 1

    entry = report["collections"][0]
    assert entry["name"] == "first"
    assert entry["pages"] == 2
    assert len(entry["similar_pairs"]) == 1
    assert entry["similar_pairs"][0]["score"] > 0


@patch('inspect_corpus.setup_logging')
def test_main_single_file(mock_setup_logging, corpus_dir, tmp_path):
    """Test a single collection file can be inspected."""
    report_path = tmp_path / "report.json"

    inspect_corpus.main([str(corpus_dir / "first.json"), "--report", str(report_path)])

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert [c["name"] for c in report["collections"]] == ["first"]


@patch('inspect_corpus.setup_logging')
def test_main_empty_corpus_exits(mock_setup_logging, tmp_path):
    """Test an empty corpus directory exits with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        inspect_corpus.main([str(tmp_path)])

    assert exc_info.value.code == 1


@patch('inspect_corpus.setup_logging')
def test_main_missing_file_exits(mock_setup_logging, tmp_path):
    """Test load failures exit with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        inspect_corpus.main([str(tmp_path / "missing.json")])

    assert exc_info.value.code == 1
