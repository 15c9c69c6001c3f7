"""Tests for the CLI module."""

from click.testing import CliRunner

from fuzzbridge.cli import cli


class TestCli:
    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help(self):
        result = self.runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("normalize", "distance", "score", "editops", "opcodes", "apply", "extract"):
            assert command in result.output

    def test_normalize(self):
        result = self.runner.invoke(cli, ["normalize", "  Éxâmple!  ", "--asciify"])
        assert result.exit_code == 0
        assert result.output == "example!\n"

    def test_normalize_no_processor(self):
        result = self.runner.invoke(cli, ["normalize", "  ÀB ", "--no-processor"])
        assert result.exit_code == 0
        assert result.output == "  ÀB \n"

    def test_distance(self):
        result = self.runner.invoke(cli, ["distance", "kitten", "sitting"])
        assert result.exit_code == 0
        assert "Metric: levenshtein" in result.output
        assert "Normalized similarity" in result.output

    def test_distance_unknown_metric(self):
        result = self.runner.invoke(cli, ["distance", "a", "b", "--metric", "soundex"])
        assert result.exit_code == 1
        assert "Unknown metric" in result.output

    def test_score(self):
        result = self.runner.invoke(cli, ["score", "new york", "new york", "-s", "ratio"])
        assert result.exit_code == 0
        assert "Ratio: 100.00" in result.output

    def test_score_unknown_scorer(self):
        result = self.runner.invoke(cli, ["score", "a", "b", "-s", "nope"])
        assert result.exit_code == 1
        assert "Unknown scorer" in result.output

    def test_editops(self):
        result = self.runner.invoke(cli, ["editops", "kitten", "sitting"])
        assert result.exit_code == 0
        assert "3 edit operations" in result.output
        assert "replace" in result.output
        assert "insert" in result.output

    def test_editops_unsupported_metric(self):
        result = self.runner.invoke(cli, ["editops", "a", "b", "-m", "jaro"])
        assert result.exit_code == 1
        assert "does not provide" in result.output

    def test_opcodes(self):
        result = self.runner.invoke(cli, ["opcodes", "abc", "ab"])
        assert result.exit_code == 0
        assert "1 opcodes" in result.output
        assert "delete" in result.output

    def test_apply_opcodes(self):
        result = self.runner.invoke(cli, ["apply", "kitten", "sitting"])
        assert result.exit_code == 0
        assert "Apply opcodes" in result.output
        assert "Round trip: OK" in result.output

    def test_apply_editops_cells(self):
        result = self.runner.invoke(cli, ["apply", "flaw", "lawn", "--mode", "editops",
                                          "--metric", "indel", "--cells"])
        assert result.exit_code == 0
        assert "Round trip: OK" in result.output
        assert "l | a | w | n" in result.output

    def test_extract_top(self):
        result = self.runner.invoke(cli, [
            "extract", "fuzzy wuzzy", "wuzzy fuzzy", "fuzzy wuzzy was a bear", "yellow submarine",
            "--limit", "2",
        ])
        assert result.exit_code == 0
        assert "Found 2 matches" in result.output
        assert "wuzzy fuzzy" in result.output

    def test_extract_best(self):
        result = self.runner.invoke(cli, ["extract", "new york", "New York", "Newark", "--best"])
        assert result.exit_code == 0
        assert "Found 1 matches" in result.output
        assert "100.0" in result.output

    def test_extract_all_no_match(self):
        result = self.runner.invoke(cli, ["extract", "zzzz", "abc", "def", "--all", "-s", "ratio"])
        assert result.exit_code == 0
        assert "Found 0 matches" in result.output

    def test_extract_from_csv(self, cities_csv):
        result = self.runner.invoke(cli, [
            "extract", "zurich", "--file", cities_csv, "--column", "city", "--asciify", "--best",
        ])
        assert result.exit_code == 0
        assert "among 6 candidates" in result.output
        assert "Zürich" in result.output

    def test_extract_csv_requires_column(self, cities_csv):
        result = self.runner.invoke(cli, ["extract", "zurich", "--file", cities_csv])
        assert result.exit_code == 1
        assert "--column is required" in result.output

    def test_extract_csv_missing_column(self, cities_csv):
        result = self.runner.invoke(cli, ["extract", "zurich", "-f", cities_csv, "-c", "town"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_extract_unknown_scorer(self):
        result = self.runner.invoke(cli, ["extract", "a", "a", "b", "-s", "nope"])
        assert result.exit_code == 1
        assert "Unknown scorer" in result.output

    def test_verbose_flag(self):
        result = self.runner.invoke(cli, ["-v", "normalize", "ABC"])
        assert result.exit_code == 0
        assert "abc" in result.output

    def test_bad_log_level_does_not_break_commands(self, monkeypatch):
        monkeypatch.setenv("FUZZBRIDGE_LOG_LEVEL", "verbose")
        result = self.runner.invoke(cli, ["normalize", "ABC"])
        assert result.exit_code == 0
        assert "abc" in result.output
