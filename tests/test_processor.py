"""
End-to-end tests for the processing pipeline.
"""

import json

from q3log import parse_log
from q3log.processing.processor import LogProcessor


class TestParseLog:
    """Test the one-call parse_log entry point."""

    def test_empty_input_has_no_data(self):
        summary = parse_log("")

        assert not summary.has_data
        assert summary.standard is None
        assert summary.by_kill_method is None

    def test_content_without_games(self):
        """Parsed content with nothing in it differs from no content."""
        summary = parse_log(" 20:34 ClientConnect: 2\n")

        assert summary.has_data
        assert summary.standard == ()
        assert summary.by_kill_method == ()

    def test_sample_log(self, sample_log_text):
        summary = parse_log(sample_log_text)

        standard = [json.loads(block) for block in summary.standard]
        by_method = [json.loads(block) for block in summary.by_kill_method]

        assert standard[0] == {"game_1": {"total_kills": 0, "players": [], "kills": {}}}
        assert standard[1] == {
            "game_2": {
                "total_kills": 5,
                "players": ["Isgalamido", "Mocinha"],
                "kills": {"Isgalamido": -3},
            }
        }
        assert standard[2]["game_3"]["kills"] == {"Isgalamido": 1, "Zeh": 1}
        assert by_method[1] == {
            "game-2": {"kills_by_means": {"MOD_TRIGGER_HURT": 2, "MOD_ROCKET_SPLASH": 3}}
        }

    def test_parse_is_repeatable(self, sample_log_text):
        assert parse_log(sample_log_text) == parse_log(sample_log_text)


class TestLogProcessor:
    """Test LogProcessor results."""

    def test_process_text(self, sample_log_text):
        result = LogProcessor().process_text(sample_log_text)

        assert len(result.games) == 3
        assert result.total_kills == 7
        assert result.stats["kill_lines"] == 7
        assert result.stats["total_games"] == 3
        assert result.skipped_lines == []
        assert result.processing_time >= 0
        assert result.source is None

    def test_process_text_records_skipped_lines(self):
        result = LogProcessor().process_text("1:00 Kill: 2 3 7: Zeh fragged Mocinha by MOD_ROCKET")

        assert result.games == []
        assert len(result.skipped_lines) == 1
        assert result.summary.standard == ()

    def test_process_file(self, sample_log_file):
        result = LogProcessor().process_file(sample_log_file)

        assert result.source == sample_log_file
        assert result.summary.game_count == 3

    def test_process_empty_file(self, tmp_path):
        log_path = tmp_path / "empty.log"
        log_path.write_text("")

        result = LogProcessor().process_file(log_path)

        assert not result.summary.has_data

    def test_process_files_keeps_order(self, tmp_path, sample_log_text):
        paths = []
        for i in range(4):
            path = tmp_path / f"games_{i}.log"
            # Each file holds one more game than the last
            path.write_text("\n".join([sample_log_text] + ["  0:00 ------"] * i))
            paths.append(path)

        results = LogProcessor(max_workers=3).process_files(paths)

        assert [r.source for r in results] == paths
        assert [len(r.games) for r in results] == [3, 4, 5, 6]

    def test_process_files_skips_missing(self, tmp_path, sample_log_file):
        results = LogProcessor(max_workers=2).process_files([sample_log_file, tmp_path / "missing.log"])

        assert len(results) == 1
        assert results[0].source == sample_log_file

    def test_default_worker_count(self):
        assert LogProcessor().max_workers >= 1
