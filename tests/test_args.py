"""Unit tests for command-line argument parsing."""

from __future__ import annotations

from rockerize.cli.args import collect_flag_values, parse_args, parse_ports


def test_empty_tokens_show_help() -> None:
    assert parse_args([]).show_help


def test_help_flag_anywhere_shows_help() -> None:
    outcome = parse_args(["--exposed-ports", "80", "--help"])
    assert outcome.show_help
    assert outcome.request is None


def test_unrecognized_tokens_yield_defaults() -> None:
    request = parse_args(["foo", "bar", "--unknown"]).request

    assert request.build_only is False
    assert request.exposed_ports == ()
    assert request.add_files == ()
    assert request.verbose is False


def test_ports_then_files() -> None:
    request = parse_args(["--exposed-ports", "80", "443", "--add-files", "a.txt"]).request

    assert request.exposed_ports == (80, 443)
    assert request.add_files == ("a.txt",)


def test_files_then_ports() -> None:
    request = parse_args(["--add-files", "a.txt", "--exposed-ports", "80"]).request

    assert request.add_files == ("a.txt",)
    assert request.exposed_ports == (80,)


def test_non_numeric_ports_are_skipped() -> None:
    assert parse_ports(["--exposed-ports", "80", "notanumber", "443"]) == [80, 443]
    assert parse_ports(["--exposed-ports", "8_0", "1.5", " 22 "]) == [22]


def test_ports_outside_32_bit_range_are_skipped() -> None:
    tokens = ["--exposed-ports", "80", "99999999999", "2147483647", "2147483648", "-2147483648", "-2147483649"]
    assert parse_ports(tokens) == [80, 2147483647, -2147483648]


def test_build_only_and_verbose_flags() -> None:
    request = parse_args(["--exposed-ports", "8080", "--build-only", "--verbose"]).request

    assert request.build_only is True
    assert request.verbose is True
    assert request.exposed_ports == (8080,)


def test_adjacent_flags_yield_empty_first_run() -> None:
    request = parse_args(["--exposed-ports", "--add-files", "x.json"]).request

    assert request.exposed_ports == ()
    assert request.add_files == ("x.json",)


def test_trailing_flag_has_no_values() -> None:
    assert collect_flag_values(["--build-only", "--add-files"], "--add-files") == []


def test_only_first_flag_occurrence_is_used() -> None:
    tokens = ["--add-files", "a", "--build-only", "--add-files", "b"]
    assert collect_flag_values(tokens, "--add-files") == ["a"]


def test_file_values_are_trimmed_and_not_validated() -> None:
    assert collect_flag_values(["--add-files", " logo.jpg ", "missing/index.html"], "--add-files") == [
        "logo.jpg",
        "missing/index.html",
    ]
