"""Tests for the command line entry point."""
import pytest
from unittest.mock import patch, MagicMock

from click.testing import CliRunner
from main import cli
from calculator.errors import MissingPriceError
from fakes import SHA256


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def clients():
    nicehash, whattomine = MagicMock(), MagicMock()
    with patch("apis.build_clients", return_value=(nicehash, whattomine)):
        yield nicehash, whattomine


def invoke(runner, args, tmp_path):
    # an empty arguments file keeps the working directory's arguments.txt out of the run
    empty = tmp_path / "arguments.txt"
    empty.write_text("")
    return runner.invoke(cli, ["--arguments-file", str(empty)] + args)


def test_cli_help(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "NiceHash Profitability Calculator" in result.output
    assert "--min" in result.output
    assert "--sleep-time" in result.output


def test_cli_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_terms_and_options_reach_calculator(runner, clients, tmp_path):
    with patch("calculator.ProfitCalculator") as calc_cls:
        result = invoke(runner, ["scrypt", "-DOGE", "--min", "--sleep-time", "0", "--no-header"], tmp_path)
    assert result.exit_code == 0, result.output
    options = calc_cls.call_args.args[0]
    assert options.coins == ["scrypt", "-DOGE"]
    assert options.use_minimum_prices is True
    assert options.sleep_time == 0
    assert options.show_header is False
    calc_cls.return_value.start.assert_called_once()
    nicehash, whattomine = clients
    nicehash.close.assert_called_once()
    whattomine.close.assert_called_once()


def test_arguments_file_terms_follow_command_line(runner, clients, tmp_path):
    args_file = tmp_path / "args.txt"
    args_file.write_text("# pick coins\nsha256\n-BCH\n")
    with patch("calculator.ProfitCalculator") as calc_cls:
        result = runner.invoke(cli, ["--arguments-file", str(args_file), "--no-header", "LTC"])
    assert result.exit_code == 0, result.output
    assert calc_cls.call_args.args[0].coins == ["LTC", "sha256", "-BCH"]


def test_header_shown_by_default(runner, clients, tmp_path):
    with patch("calculator.ProfitCalculator"):
        result = invoke(runner, [], tmp_path)
    assert "estimates" in result.output


def test_json_output_skips_header(runner, clients, tmp_path):
    with patch("calculator.ProfitCalculator") as calc_cls:
        result = invoke(runner, ["--json"], tmp_path)
    assert "estimates" not in result.output
    assert calc_cls.call_args.args[0].use_json_output is True


def test_user_agent_applied(runner, clients, tmp_path):
    with patch("calculator.ProfitCalculator"):
        invoke(runner, ["--no-header", "--user-agent", "me/1.0"], tmp_path)
    clients[1].set_user_agent.assert_called_once_with("me/1.0")


def test_upstream_failure_exits_nonzero(runner, clients, tmp_path):
    with patch("calculator.ProfitCalculator") as calc_cls:
        calc_cls.return_value.start.side_effect = MissingPriceError(SHA256, 1)
        result = invoke(runner, ["--no-header"], tmp_path)
    assert result.exit_code == 1
    assert "No global price for SHA256" in result.output
    clients[0].close.assert_called_once()


def test_end_to_end_with_fake_apis(runner, tmp_path, catalog):
    from fakes import FakeNiceHash, FakeWhatToMine
    whattomine = FakeWhatToMine(catalog, {"BTC": 0.0012, "BCH": 0.0009})
    nicehash = FakeNiceHash(global_prices=[0.5, 0.001])
    whattomine.close = nicehash.close = lambda: None
    whattomine.set_user_agent = lambda ua: None
    with patch("apis.build_clients", return_value=(nicehash, whattomine)):
        result = invoke(runner, ["--no-header", "--no-cache", "--sleep-time", "0", "sha256"], tmp_path)
    assert result.exit_code == 0, result.output
    assert "Bitcoin (BTC)" in result.output
    assert "BitcoinCash (BCH)" in result.output
    assert "Litecoin" not in result.output
    assert whattomine.populated == 0


def test_options_in_arguments_file(runner, clients, tmp_path):
    args_file = tmp_path / "args.txt"
    args_file.write_text("--min\n--no-header\nscrypt\n")
    with patch("calculator.ProfitCalculator") as calc_cls:
        result = runner.invoke(cli, ["--arguments-file", str(args_file)])
    assert result.exit_code == 0, result.output
    options = calc_cls.call_args.args[0]
    assert options.use_minimum_prices is True
    assert options.show_header is False
    assert options.coins == ["scrypt"]
    assert options.unrecognized == []
    assert "Unrecognized option" not in result.output


def test_command_line_value_wins_over_arguments_file(runner, clients, tmp_path):
    args_file = tmp_path / "args.txt"
    args_file.write_text("--sleep-time\n5\n--user-agent\nfile/1.0\n-DOGE\n")
    with patch("calculator.ProfitCalculator") as calc_cls:
        result = runner.invoke(cli, ["--arguments-file", str(args_file), "--no-header",
                                     "--sleep-time", "0", "LTC"])
    assert result.exit_code == 0, result.output
    options = calc_cls.call_args.args[0]
    assert options.sleep_time == 0
    assert options.user_agent == "file/1.0"
    assert options.coins == ["LTC", "-DOGE"]


def test_unknown_option_in_arguments_file_warns(runner, clients, tmp_path):
    args_file = tmp_path / "args.txt"
    args_file.write_text("--frobnicate\n")
    with patch("calculator.ProfitCalculator") as calc_cls:
        result = runner.invoke(cli, ["--arguments-file", str(args_file), "--no-header"])
    assert result.exit_code == 0, result.output
    assert calc_cls.call_args.args[0].unrecognized == ["--frobnicate"]


def test_numeric_log_level_env_does_not_crash(runner, clients, tmp_path):
    with patch("calculator.ProfitCalculator"):
        result = runner.invoke(
            cli, ["--arguments-file", str(tmp_path / "none.txt"), "--no-header"],
            env={"HASHCALC_LOG_LEVEL": "10"},
        )
    assert result.exit_code == 0, result.output


def test_invalid_sleep_time_env_is_a_usage_error(runner, clients, tmp_path):
    result = runner.invoke(
        cli, ["--arguments-file", str(tmp_path / "none.txt"), "--no-header"],
        env={"HASHCALC_SLEEP_TIME": "soon"},
    )
    assert result.exit_code == 1
    assert "HASHCALC_SLEEP_TIME" in result.output
