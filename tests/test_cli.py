"""
Tests for the command line driver.
"""

import json

import pytest

from main import load_problem, load_problem_from_json, main, parse_annular_text, parse_plain_pd

HOPF_ANNULAR = """
2 3
1 2 3 4
3 4 1 2
2 2 3
2 1 2
2 3 4
"""


class TestParsing:
    def test_plain_pd(self):
        diagram = parse_plain_pd("1 5 2 4\n3 1 4 6\n5 3 6 2\n")
        assert diagram.size() == 3
        assert diagram.crossings[1] == (3, 1, 4, 6)

    def test_plain_pd_incomplete_crossing(self):
        with pytest.raises(ValueError):
            parse_plain_pd("1 2 3 4 5")

    def test_annular_text(self):
        diagram, faces, grading = parse_annular_text(HOPF_ANNULAR)
        assert diagram.to_pd_code() == [[1, 2, 3, 4], [3, 4, 1, 2]]
        assert faces.special == (2, 3)
        assert len(faces) == 3
        assert grading is None

    def test_annular_text_with_grading(self):
        text = HOPF_ANNULAR.replace("2 3\n", "2 3 -2\n", 1)
        _, _, grading = parse_annular_text(text, with_grading=True)
        assert grading == -2

    def test_annular_text_ends_early(self):
        with pytest.raises(ValueError, match="ended early"):
            parse_annular_text("2 3\n1 2 3 4\n3 4 1 2\n2 2 3\n")

    def test_annular_text_trailing_tokens(self):
        with pytest.raises(ValueError, match="trailing"):
            parse_annular_text(HOPF_ANNULAR + " 7")

    def test_json(self, tmp_path):
        path = tmp_path / "hopf.json"
        path.write_text(json.dumps({
            "crossings": [[1, 2, 3, 4], [3, 4, 1, 2]],
            "faces": [[2, 3], [1, 2], [3, 4]],
            "grading": 0,
        }))
        diagram, faces, grading = load_problem_from_json(str(path))
        assert diagram.size() == 2
        assert faces.special == (2, 3)
        assert grading == 0

    def test_json_without_faces(self, tmp_path):
        path = tmp_path / "trefoil.json"
        path.write_text(json.dumps({"crossings": [[1, 5, 2, 4], [3, 1, 4, 6], [5, 3, 6, 2]]}))
        _, faces, grading = load_problem(str(path), annular=False, grading_from_file=False)
        assert faces is None
        assert grading is None


class TestMapsCommand:
    def test_plain_to_json(self, tmp_path):
        src = tmp_path / "trefoil.txt"
        src.write_text("1 5 2 4 3 1 4 6 5 3 6 2")
        out = tmp_path / "maps.json"
        assert main(["maps", "--input", str(src), "--output", str(out)]) == 0

        data = json.loads(out.read_text())
        assert data["variant"] == "regular"
        assert data["dimensions"] == [4, 6, 12, 8]
        assert len(data["maps"]) == 3

    def test_reduced(self, tmp_path, capsys):
        src = tmp_path / "trefoil.txt"
        src.write_text("1 5 2 4 3 1 4 6 5 3 6 2")
        assert main(["maps", "--input", str(src), "--reduced"]) == 0
        assert "[2, 3, 6, 4]" in capsys.readouterr().out

    def test_annular_grading(self, tmp_path):
        src = tmp_path / "hopf.txt"
        src.write_text(HOPF_ANNULAR)
        out = tmp_path / "maps.json"
        code = main(["maps", "-i", str(src), "--annular", "--grading", "0", "-o", str(out)])
        assert code == 0
        data = json.loads(out.read_text())
        assert data["variant"] == "annular[0]"
        assert data["dimensions"] == [4, 4, 2]

    def test_bad_diagram_does_not_stop_batch(self, tmp_path, capsys):
        good = tmp_path / "hopf.txt"
        good.write_text("1 2 3 4 3 4 1 2")
        bad = tmp_path / "relabelled.txt"
        bad.write_text("5 6 7 8 7 8 5 6")
        # label 1 is missing from the second diagram
        assert main(["maps", "--input", str(bad), str(good), "--reduced"]) == 1
        out = capsys.readouterr().out
        assert out.count("Error:") == 1
        assert "Variant: reduced" in out

    def test_missing_file(self, tmp_path):
        assert main(["maps", "--input", str(tmp_path / "nope.txt")]) == 1


class TestOtherCommands:
    def test_demo_all(self):
        assert main(["demo", "--example", "all"]) == 0

    def test_info(self, capsys):
        assert main(["info"]) == 0
        assert "khcube v" in capsys.readouterr().out

    def test_no_command(self):
        assert main([]) == 0
