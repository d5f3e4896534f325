import io

from bftape.brainfuck import BrainfuckInterpreter
from bftape.brainfuck_debugger import BrainfuckDebugger


def test_debugger_matches_interpreter_output():
    program = "++[>+++<-]>.,."
    expected = BrainfuckInterpreter().run(program, "z")
    log = io.StringIO()
    assert BrainfuckDebugger(log=log).debug_run(program, "z") == expected


def test_debugger_shows_each_step():
    log = io.StringIO()
    debugger = BrainfuckDebugger(show_memory_range=4, log=log)
    assert debugger.debug_run(",+.", "A") == b"B"

    text = log.getvalue()
    assert "INITIAL:" in text
    assert "AFTER STEP 3:" in text
    assert "Read input[0] = 65" in text
    assert "[EOF]" in text
    assert "Program:  ,+.[END]" in text
    assert "FINAL RESULT:" in text


def test_debugger_reports_eof_read():
    log = io.StringIO()
    BrainfuckDebugger(log=log).debug_run(",")
    assert "Read input: EOF" in log.getvalue()


def test_debugger_describes_loops():
    log = io.StringIO()
    BrainfuckDebugger(log=log).debug_run("+[-]")
    text = log.getvalue()
    assert "enter loop" in text
    assert "exit loop" in text


def test_debugger_collects_output_alongside_sink():
    sink = io.BytesIO()
    debugger = BrainfuckDebugger(output=sink, log=io.StringIO())
    assert debugger.debug_run("++.") == b"\x02"
    assert sink.getvalue() == b"\x02"
