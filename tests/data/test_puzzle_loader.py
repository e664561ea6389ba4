import json
from pathlib import Path
from unittest.mock import patch

import pytest
from skyline.core.exceptions import PuzzleFileError
from skyline.data.loader import load_puzzles


class TestLoadPuzzles:
    @pytest.fixture
    def puzzle_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "puzzles.json"
        path.write_text(json.dumps([
            {"id": "a", "clues": [2, 1, 1, 2, 2, 1, 1, 2], "solution": [[1, 2], [2, 1]]},
            {"id": "b", "clues": [1, 2, 2, 1, 1, 2, 2, 1]},
        ]))
        return path

    def test_loads_records(self, puzzle_file: Path) -> None:
        records = load_puzzles(puzzle_file)
        assert [r.id for r in records] == ["a", "b"]
        assert records[0].solution == [[1, 2], [2, 1]]
        assert records[1].solution is None
        assert records[1].to_spec().top == (1, 2)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_puzzles(tmp_path / "nope.json")

    def test_default_path_from_settings(self, puzzle_file: Path) -> None:
        with patch("skyline.data.loader.settings") as mock_settings:
            mock_settings.PUZZLE_PATH = puzzle_file
            assert len(load_puzzles()) == 2

    @pytest.mark.parametrize("content", ["not json", '[{"id": "a"}]', '{"id": "a", "clues": []}'])
    def test_malformed_file(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "bad.json"
        path.write_text(content)
        with pytest.raises(PuzzleFileError):
            load_puzzles(path)
