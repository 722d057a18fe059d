"""
Integration tests for the command line interface
"""

import json

import pytest
from click.testing import CliRunner

from logmine.__main__ import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestClusterCommand:
    """Test the cluster command end to end"""

    def test_reads_stdin_and_prints_text(self, runner):
        result = runner.invoke(cli, ['cluster'], input="a b c\na b d\na x c\n")

        assert result.exit_code == 0
        assert result.output.strip().splitlines() == ["3 a * *"]

    def test_reads_input_file(self, runner, test_data_dir):
        log_file = test_data_dir / "Apache_full.log"

        result = runner.invoke(cli, ['cluster', '-i', str(log_file), '-d', '0.6'])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert sum(int(line.split(' ', 1)[0]) for line in lines) == 300

    def test_min_members_and_wildcard_marker(self, runner):
        result = runner.invoke(
            cli, ['cluster', '-m', '2', '--wildcard', '---'],
            input="hello 1 y 3\nhello 1 x 3\nabc m n q\n",
        )

        assert result.exit_code == 0
        assert result.output.strip() == "2 hello 1 --- 3"

    def test_custom_delimiters(self, runner, test_data_dir):
        log_file = test_data_dir / "HealthApp_full.log"

        result = runner.invoke(cli, ['cluster', '-i', str(log_file), '--delimiters', '|', '--format', 'json'])

        assert result.exit_code == 0
        clusters = json.loads(result.output)
        assert sum(c['count'] for c in clusters) == 150
        assert all(len(c['tokens']) == 4 for c in clusters)

    def test_json_output(self, runner):
        result = runner.invoke(cli, ['cluster', '--format', 'json'], input="a b\na c\n")

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {'id': 0, 'count': 2, 'pattern': 'a *', 'tokens': ['a', '*'], 'wildcards': [1], 'sample': 'a b'},
        ]

    def test_table_output(self, runner):
        result = runner.invoke(cli, ['cluster', '--format', 'table'], input="a b\na c\n")

        assert result.exit_code == 0
        assert "1 clusters" in result.output
        assert "a *" in result.output

    def test_sharded_run(self, runner):
        result = runner.invoke(
            cli, ['cluster', '--shards', '3', '--shard-by', 'first_token'],
            input="a b c\na b d\nx y\nx z\n",
        )

        assert result.exit_code == 0
        assert sorted(result.output.strip().splitlines()) == ["2 a b *", "2 x *"]

    def test_json_marks_wildcards_apart_from_literal_marker_tokens(self, runner):
        result = runner.invoke(cli, ['cluster', '--format', 'json'], input="* b\n* c\n")

        assert result.exit_code == 0
        cluster = json.loads(result.output)[0]
        assert cluster['tokens'] == ['*', '*']
        assert cluster['wildcards'] == [1]

    @pytest.mark.parametrize("option", ['--shards', '--workers'])
    @pytest.mark.parametrize("value", ['0', '-2'])
    def test_rejects_non_positive_shard_settings(self, runner, option, value):
        result = runner.invoke(cli, ['cluster', option, value], input="a b\n")

        assert result.exit_code == 2
        assert option in result.output

    def test_workers_without_shards_runs_sharded(self, runner):
        result = runner.invoke(cli, ['cluster', '--workers', '2'], input="a b c\na b d\nx y\n")

        assert result.exit_code == 0
        assert result.output.strip().splitlines() == ["2 a b *", "1 x y"]

    def test_missing_input_file(self, runner, tmp_path):
        result = runner.invoke(cli, ['cluster', '-i', str(tmp_path / "missing.log")])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_invalid_max_distance(self, runner):
        result = runner.invoke(cli, ['cluster', '-d', '1.5'], input="a\n")

        assert result.exit_code == 2
        assert "max_distance" in result.output

    def test_empty_input(self, runner):
        result = runner.invoke(cli, ['cluster'], input="")

        assert result.exit_code == 0
        assert result.output == ""

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert "1.0.0" in result.output
