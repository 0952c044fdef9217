import io
import sys

from unixplay.process import CommandProcessor
from unixplay.smsh import DFL_PROMPT, run_shell


class Recorder:
    def __init__(self, status=0):
        self.calls = []
        self.status = status

    def __call__(self, args):
        self.calls.append(list(args))
        return self.status


def test_runs_each_line_and_prompts():
    rec = Recorder()
    out = io.StringIO()
    stream = io.StringIO("ls -l\n\n  \necho a  b\n")
    run_shell(stream, out, CommandProcessor(runner=rec), "$ ")
    assert rec.calls == [["ls", "-l"], ["echo", "a", "b"]]
    assert out.getvalue() == "$ " * 5


def test_default_prompt():
    out = io.StringIO()
    run_shell(io.StringIO(""), out, CommandProcessor(runner=Recorder()))
    assert out.getvalue() == DFL_PROMPT


def test_returns_last_status():
    rec = Recorder(status=512)
    result = run_shell(io.StringIO("cmd\n"), io.StringIO(), CommandProcessor(runner=rec))
    assert result == 512


def test_control_flow_through_shell():
    rec = Recorder()
    script = "if check\nthen run\nfi\n"
    run_shell(io.StringIO(script), io.StringIO(), CommandProcessor(runner=rec))
    assert rec.calls == [["check"], ["run"]]


def test_real_command():
    script = f"{sys.executable} -c pass\n"
    assert run_shell(io.StringIO(script), io.StringIO()) == 0