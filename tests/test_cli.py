import pytest

from reverser.tools import cli


EXPECTED_COMMANDS = ["combine-automata", "compare-chars", "compare-lengths",
                     "complement-automaton", "export-quintuple", "revert-alphabet",
                     "revert-string", "run", "run-automaton",
                     "validate-automaton"]


def test_collect_commands():
    script_dict = cli.collect_commands()
    assert sorted(script_dict.keys()) == EXPECTED_COMMANDS
    assert script_dict["run"] is script_dict["revert-alphabet"]


def test_list_commands(capsys):
    assert cli.main(["reverser"]) == 0
    captured = capsys.readouterr()
    assert captured.out.split() == EXPECTED_COMMANDS


def test_unknown_command():
    with pytest.raises(KeyError):
        cli.main(["reverser", "no-such-command"])


def test_run_command(tmp_path):
    infile = tmp_path / "input.txt"
    infile.write_text("abc 3\n", encoding="utf-8")
    outfile = tmp_path / "output.txt"
    retval = cli.main(["reverser", "revert-alphabet",
                       "-v", "0",
                       "--log={}".format(tmp_path / "output.log"),
                       "--stdin={}".format(infile),
                       "--stdout={}".format(outfile)])
    assert retval == 0
    assert outfile.read_text(encoding="utf-8").endswith("Alfabeto invertido: cba\n")


def test_failing_command_is_reported(tmp_path, capsys):
    with pytest.raises(ValueError):
        cli.main(["reverser", "compare-lengths",
                  "-v", "0",
                  "--log={}".format(tmp_path / "output.log"),
                  "--stdout={}".format(tmp_path / "output.txt")])
    captured = capsys.readouterr()
    assert "When running 'compare-lengths'" in captured.out
