import pytest
from typer.testing import CliRunner

from xord.scripts.sort_values import app


@pytest.fixture
def runner():
    return CliRunner()


class TestSortCommand:
    def test_it_sorts_values_from_stdin(self, runner, make_order_file):
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["sort", "--order-file", str(order_file)], input="c\na\nb\na\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["b", "a", "a", "c"]

    def test_it_sorts_values_from_a_file(self, runner, make_order_file):
        order_file = make_order_file(["low", "medium", "high"])
        values_file = make_order_file(["high", "low", "", "medium"], name="values.txt")
        result = runner.invoke(app, ["sort", "--order-file", str(order_file), "--values-file", str(values_file), "--reverse"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["high", "medium", "low"]

    def test_it_fails_on_unknown_values(self, runner, make_order_file):
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["sort", "--order-file", str(order_file)], input="a\nx\n")
        assert result.exit_code == 1
        assert "'x'" in result.output

    @pytest.mark.parametrize("unknowns,expected", [("first", ["x", "b", "a"]), ("last", ["b", "a", "x"]), ("LAST", ["b", "a", "x"])])
    def test_it_places_unknown_values_on_request(self, unknowns, expected, runner, make_order_file):
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["sort", "--order-file", str(order_file), "--unknowns", unknowns], input="a\nx\nb\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == expected

    def test_it_reads_defaults_from_an_env_file(self, runner, make_order_file, tmp_path):
        order_file = make_order_file(["b", "a", "c"])
        env_file = tmp_path / ".env"
        env_file.write_text("XORD_UNKNOWNS=first\n", encoding="utf-8")
        result = runner.invoke(app, ["sort", "--order-file", str(order_file), "--env-file", str(env_file)], input="a\nx\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["x", "a"]

    def test_it_prefers_options_over_the_environment(self, runner, make_order_file, monkeypatch):
        monkeypatch.setenv("XORD_UNKNOWNS", "first")
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["sort", "--order-file", str(order_file), "--unknowns", "last"], input="a\nx\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["a", "x"]

    def test_it_fails_on_invalid_configuration(self, runner, make_order_file, monkeypatch):
        monkeypatch.setenv("XORD_UNKNOWNS", "middle")
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["sort", "--order-file", str(order_file)], input="a\n")
        assert result.exit_code == 1

    def test_it_fails_on_duplicate_order_entries(self, runner, make_order_file):
        order_file = make_order_file(["b", "a", "b"])
        result = runner.invoke(app, ["sort", "--order-file", str(order_file)], input="a\n")
        assert result.exit_code == 1
        assert "Duplicate value 'b'" in result.output


class TestCompareCommand:
    @pytest.mark.parametrize("left,right,expected", [("a", "b", "1"), ("b", "c", "-1"), ("a", "a", "0")])
    def test_it_prints_the_sign_of_the_comparison(self, left, right, expected, runner, make_order_file):
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["compare", left, right, "--order-file", str(order_file)])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_it_fails_on_unknown_values(self, runner, make_order_file):
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["compare", "x", "a", "--order-file", str(order_file)])
        assert result.exit_code == 1
        assert "'x'" in result.output

    def test_it_compares_unknown_values_on_request(self, runner, make_order_file):
        order_file = make_order_file(["b", "a", "c"])
        result = runner.invoke(app, ["compare", "x", "a", "--order-file", str(order_file), "--unknowns", "first"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-1"
