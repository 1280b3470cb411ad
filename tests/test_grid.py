"""
Test suite for word sanitization and grid generation.

Covers:
- Sanitization (accents, case, non-letters, idempotence)
- Placement validity and intersection agreement
- Noise fill, dropped words and the no-words failure
- Plain-text rendering
"""

import random
import string

import pytest
from src.puzzle import (
    GeneratedGrid,
    PlacementRecord,
    PuzzleGenerationError,
    build_puzzle,
    compute_path,
    generate_grid,
    render_grid,
    sanitize_word,
    sanitize_words,
)


WORDS = ["GATO", "CACHORRO", "COELHO", "LEÃO", "ONÇA", "PATO", "ZEBRA", "URSO"]


class TestSanitize:
    """Test cases for word sanitization."""

    def test_strips_accents(self):
        assert sanitize_word("LEÃO") == "LEAO"
        assert sanitize_word("onça") == "ONCA"
        assert sanitize_word("Picolé") == "PICOLE"

    def test_removes_non_letters(self):
        assert sanitize_word("beija-flor") == "BEIJAFLOR"
        assert sanitize_word("costa rica") == "COSTARICA"
        assert sanitize_word("R2D2") == "RD"

    def test_idempotent(self):
        """Sanitizing a sanitized word returns it unchanged."""
        for word in ["GATO", "CACHORRO", "LEAO", "A"]:
            assert sanitize_word(word) == word
            assert sanitize_word(sanitize_word(word)) == sanitize_word(word)

    def test_sanitize_words_filters_length_and_duplicates(self):
        words = sanitize_words(["gato", "GATO", "x", "hipopotamo", "leão"], max_length=8)
        assert words == ["GATO", "LEAO"]


class TestPlacement:
    """Test cases for word placement."""

    @pytest.mark.parametrize("seed", range(10))
    def test_placements_read_back(self, seed):
        """Letters along each placement equal the placed word."""
        result = generate_grid(WORDS, 10, rng=random.Random(seed))

        assert len(result.placements) == len(result.placed_words)
        for placement in result.placements:
            assert result.read(placement.path) == placement.word
            assert len(placement.path) == len(placement.word)

    @pytest.mark.parametrize("seed", range(10))
    def test_intersections_agree(self, seed):
        """Two placements sharing a cell agree on its letter."""
        result = generate_grid(WORDS + ["ELEFANTE", "TARTARUGA"], 9, rng=random.Random(seed))

        letters = {}
        for placement in result.placements:
            for cell, letter in zip(placement.path, placement.word):
                if cell in letters:
                    assert letters[cell] == letter
                letters[cell] = letter

    def test_directions_are_straight(self):
        """Each placement moves by -1, 0 or 1 per step in each axis."""
        result = generate_grid(WORDS, 10, rng=random.Random(3))
        for placement in result.placements:
            d_r = placement.end[0] - placement.start[0]
            d_c = placement.end[1] - placement.start[1]
            span = len(placement.word) - 1
            assert abs(d_r) in (0, span)
            assert abs(d_c) in (0, span)
            assert d_r >= 0  # right, down, down-right or down-left only

    def test_noise_fill_complete(self):
        """Every cell holds exactly one uppercase A-Z letter."""
        result = generate_grid(WORDS, 12, rng=random.Random(5))

        assert len(result.grid) == 12
        for row in result.grid:
            assert len(row) == 12
            for letter in row:
                assert len(letter) == 1
                assert letter in string.ascii_uppercase

    def test_words_are_sanitized(self):
        result = generate_grid(["leão", "Onça"], 10, rng=random.Random(1))
        assert sorted(result.placed_words) == ["LEAO", "ONCA"]

    def test_longest_first(self):
        """Placed words come out longest first."""
        result = generate_grid(["GATO", "CACHORRO", "PATO", "ZEBRA"], 10, rng=random.Random(2))
        lengths = [len(w) for w in result.placed_words]
        assert lengths == sorted(lengths, reverse=True)

    def test_word_longer_than_grid_dropped(self):
        """A 12-letter word never lands on a 10x10 grid."""
        result = generate_grid(["RINOCERONTES", "GATO"], 10, rng=random.Random(0))

        assert "RINOCERONTES" not in result.placed_words
        assert "RINOCERONTES" in result.dropped_words
        assert result.placed_words == ["GATO"]

    def test_short_words_dropped(self):
        result = generate_grid(["A", "", "GATO"], 10, rng=random.Random(0))
        assert result.placed_words == ["GATO"]

    def test_unplaceable_word_dropped(self):
        """With no room left, later words are silently dropped."""
        result = generate_grid(["AB", "CD", "EF"], 2, rng=random.Random(0), max_attempts=100)

        assert 1 <= len(result.placed_words) <= 2
        assert len(result.placed_words) + len(result.dropped_words) == 3

    def test_seeded_generation_is_reproducible(self):
        a = generate_grid(WORDS, 10, rng=random.Random(42))
        b = generate_grid(WORDS, 10, rng=random.Random(42))
        assert a.grid == b.grid
        assert a.placements == b.placements

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            generate_grid(WORDS, 0)


class TestBuildPuzzle:
    """Test cases for build_puzzle."""

    def test_returns_grid(self):
        result = build_puzzle(["GATO", "CACHORRO"], 10, rng=random.Random(0))
        assert isinstance(result, GeneratedGrid)
        assert sorted(result.placed_words) == ["CACHORRO", "GATO"]

    def test_no_words_placed_raises(self):
        """All words longer than the grid is a generation failure."""
        with pytest.raises(PuzzleGenerationError) as exc_info:
            build_puzzle(["HIPOPOTAMO", "RINOCERONTE"], 5)
        assert exc_info.value.size == 5


class TestModels:
    """Test cases for placement models."""

    def test_compute_path_diagonal(self):
        assert compute_path((0, 3), (3, 0)) == [(0, 3), (1, 2), (2, 1), (3, 0)]

    def test_compute_path_single_cell(self):
        assert compute_path((2, 2), (2, 2)) == [(2, 2)]

    def test_placement_record_rejects_lowercase(self):
        with pytest.raises(Exception):  # Pydantic validation error
            PlacementRecord(word="gato", start=(0, 0), end=(0, 3))

    def test_placement_for(self):
        result = build_puzzle(["GATO"], 6, rng=random.Random(0))
        assert result.placement_for("GATO").word == "GATO"
        assert result.placement_for("PATO") is None


class TestRender:
    """Test cases for render_grid."""

    def test_render_rows_and_header(self):
        text = render_grid([["A", "B"], ["C", "D"]])
        lines = text.split("\n")
        assert len(lines) == 3
        assert "A" in lines[1] and "B" in lines[1]
        assert lines[2].startswith("1")

    def test_render_marks(self):
        text = render_grid([["A", "B"], ["C", "D"]], {(0, 0): "*"})
        assert "*A*" in text

    def test_render_empty(self):
        assert render_grid([]) == ""
