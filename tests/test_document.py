"""Unit tests for Document dictionaries and dictionary distance."""
import sys
import math
import threading
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from unittest.mock import Mock, patch
from models.base import Color
from models.document import Document, NOT_COMPARABLE
from models.page import PageData


def make_document(*texts, name="doc"):
    """Create a document with one page per text."""
    return Document(name=name, pages=[PageData(text=t) for t in texts])


class TestDocument:
    """Test suite for Document structure and parsing."""

    def test_empty_document(self):
        """Test a document without pages."""
        document = Document(name="empty")

        assert document.is_empty()
        assert document.num_pages() == 0
        assert document.pages() == ()
        assert document.name == "empty"
        assert document.color is None
        assert document.selected is False

    def test_from_record(self):
        """Test parsing a document record with pages."""
        document = Document.from_record({
            "name": "Band 1",
            "pages": [
                {"content": "first page", "imgName": "1.jpg"},
                {"content": "second page", "imgName": "2.jpg"},
            ]
        })

        assert document.name == "Band 1"
        assert not document.is_empty()
        assert document.num_pages() == 2
        assert [p.name for p in document.pages()] == ["1.jpg", "2.jpg"]

    def test_from_malformed_record(self):
        """Test malformed name and pages degrade to an empty document."""
        document = Document.from_record({"name": 3, "pages": {"content": "x"}})

        assert document.name == ""
        assert document.is_empty()

    def test_color_picked_by_page_count(self):
        """Test the color picker is called with the number of pages."""
        pick_color = Mock(side_effect=lambda index: Color(index, 0, 0))

        document = Document.from_record({"pages": [{}, {}, {}]}, pick_color=pick_color)

        pick_color.assert_called_once_with(3)
        assert document.color == Color(3, 0, 0)

    def test_equal_page_counts_share_color(self):
        """Test documents with the same number of pages get the same color."""
        pick_color = Mock(side_effect=lambda index: Color(index * 10, 0, 0))

        first = Document.from_record({"name": "a", "pages": [{}, {}]}, pick_color=pick_color)
        second = Document.from_record({"name": "b", "pages": [{}, {}]}, pick_color=pick_color)
        third = Document.from_record({"name": "c", "pages": [{}]}, pick_color=pick_color)

        assert first.color == second.color
        assert first.color != third.color

    def test_without_color_picker(self):
        """Test documents parsed without a picker have no color."""
        assert Document.from_record({"pages": [{}]}).color is None

    def test_name_is_read_only(self):
        """Test name cannot be reassigned while color and selection can."""
        document = make_document("a")

        with pytest.raises(AttributeError):
            document.name = "other"

        document.selected = True
        document.color = Color(1, 2, 3)
        assert document.selected is True
        assert document.color == Color(1, 2, 3)


class TestDictionary:
    """Test suite for Document.dictionary."""

    def test_word_counts(self):
        """Test counts of whitespace-delimited tokens over all pages."""
        document = make_document("a b", "b c")
        assert dict(document.dictionary()) == {"a": 1, "b": 2, "c": 1}

    def test_pages_are_space_joined(self):
        """Test words at page boundaries are not merged."""
        document = make_document("end", "start")
        assert dict(document.dictionary()) == {"end": 1, "start": 1}

    def test_whitespace_runs(self):
        """Test tabs, newlines and repeated spaces split words without empty tokens."""
        document = make_document("  a\tb\n\nc  ", "", "a")
        assert dict(document.dictionary()) == {"a": 2, "b": 1, "c": 1}

    def test_case_sensitive(self):
        """Test counting is case-sensitive without normalization."""
        document = make_document("Word word WORD word.")
        assert dict(document.dictionary()) == {"Word": 1, "word": 1, "WORD": 1, "word.": 1}

    def test_empty_text(self):
        """Test documents without text have an empty dictionary."""
        assert dict(make_document("", "   ").dictionary()) == {}
        assert dict(Document().dictionary()) == {}

    def test_idempotent(self):
        """Test repeated calls return the same cached mapping."""
        document = make_document("a b", "b c")

        first = document.dictionary()
        second = document.dictionary()

        assert first is second
        assert dict(first) == dict(second)

    def test_built_once(self):
        """Test the dictionary is only created on first access."""
        original = Document._create_dictionary
        document = make_document("a b")

        with patch.object(Document, "_create_dictionary", autospec=True, side_effect=original) as spy:
            assert spy.call_count == 0
            document.dictionary()
            document.dictionary()
            document.dictionary_distance(document)

        assert spy.call_count == 1

    def test_read_only(self):
        """Test callers cannot modify the cached dictionary."""
        document = make_document("a")

        with pytest.raises(TypeError):
            document.dictionary()["a"] = 10

    def test_concurrent_first_access(self):
        """Test concurrent first access builds the dictionary once."""
        original = Document._create_dictionary
        document = make_document(*["alpha beta gamma"] * 50)
        results = []

        with patch.object(Document, "_create_dictionary", autospec=True, side_effect=original) as spy:
            threads = [threading.Thread(target=lambda: results.append(document.dictionary())) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        assert spy.call_count == 1
        assert all(r is results[0] for r in results)
        assert results[0]["alpha"] == 50


class TestDictionaryDistance:
    """Test suite for Document.dictionary_distance."""

    def test_self_distance(self):
        """Test the distance to itself is sum_ab / (2 * sqrt(sum_a_sq))."""
        document = make_document("a b", "b c")  # {a:1, b:2, c:1}

        # sum_ab = sum_a_sq = 6
        expected = 6 / (2 * math.sqrt(6))
        assert document.dictionary_distance(document) == pytest.approx(expected)
        assert document.dictionary_distance(document) > 0

    def test_disjoint_vocabularies(self):
        """Test documents without shared words score 0 in both directions."""
        first = make_document("x y")
        second = make_document("z")

        assert first.dictionary_distance(second) == 0
        assert second.dictionary_distance(first) == 0

    def test_asymmetric_overlap(self):
        """Test overlapping vocabularies give different positive scores per direction."""
        first = make_document("a b", "b c")  # {a:1, b:2, c:1}
        second = make_document("b b b d")    # {b:3, d:1}

        forward = first.dictionary_distance(second)
        backward = second.dictionary_distance(first)

        # forward visits a, b, c: sum_ab = 6, sum_a_sq = 6, sum_b_sq = 9
        assert forward == pytest.approx(6 / (math.sqrt(6) + 3))
        # backward visits b, d: sum_ab = 6, sum_a_sq = 10, sum_b_sq = 4
        assert backward == pytest.approx(6 / (math.sqrt(10) + 2))
        assert forward > 0
        assert backward > 0
        assert forward != pytest.approx(backward)

    def test_denominator_is_sum_of_norms(self):
        """Test identical single-word documents score 1/2, not cosine 1."""
        first = make_document("w")
        second = make_document("w")

        assert first.dictionary_distance(second) == pytest.approx(0.5)

    def test_empty_dictionary_not_comparable(self):
        """Test -1 is returned when either dictionary is empty."""
        empty = make_document("", "  ")
        full = make_document("a b")

        assert NOT_COMPARABLE == -1
        assert empty.dictionary_distance(full) == -1
        assert full.dictionary_distance(empty) == -1
        assert empty.dictionary_distance(empty) == -1
        assert Document().dictionary_distance(full) == -1

    def test_builds_other_dictionary(self):
        """Test the other document's dictionary is built as a side effect."""
        first = make_document("a")
        second = make_document("a a")

        first.dictionary_distance(second)

        assert second._dictionary is not None
        assert dict(second.dictionary()) == {"a": 2}
