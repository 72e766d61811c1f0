import sys

from tarkit.execute import run


def test_run_returns_success_code():
    assert run(sys.executable, "-c", "pass") == 0


def test_run_returns_program_exit_code():
    assert run(sys.executable, "-c", "import sys; sys.exit(3)") == 3


def test_run_missing_program_fails(tmp_path):
    missing = tmp_path / "no-such-program"
    assert run(missing) == 1


def test_run_passes_arguments_in_order(tmp_path):
    target = tmp_path / "out.txt"
    script = "import sys; open(sys.argv[1], 'w').write(' '.join(sys.argv[2:]))"
    assert run(sys.executable, "-c", script, target, "alpha", "beta") == 0
    assert target.read_text() == "alpha beta"


def test_run_discards_output(capfd):
    code = run(sys.executable, "-c", "print('visible'); import sys; print('err', file=sys.stderr)")
    captured = capfd.readouterr()
    assert code == 0
    assert captured.out == ""
    assert captured.err == ""


def test_run_gives_no_input(tmp_path):
    target = tmp_path / "stdin.txt"
    script = "import sys; open(sys.argv[1], 'w').write(repr(sys.stdin.read()))"
    assert run(sys.executable, "-c", script, target) == 0
    assert target.read_text() == repr("")


def test_run_killed_program_fails():
    script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    assert run(sys.executable, "-c", script) == 1