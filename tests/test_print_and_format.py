from io import StringIO

from minilisp.interpreter import Interpreter
from minilisp.runtime_context import get_output, redirect_output, set_output
from minilisp.types.nil import Nil


def test_print_writes_every_element_and_returns_nil(interp, capsys):
    ret = interp.eval("(print 1 a)")
    out = capsys.readouterr().out
    assert out == "print1a"
    assert ret is Nil


def test_print_does_not_evaluate_its_arguments(interp, capsys):
    interp.eval("(set! x 5)")
    interp.eval("(print x (+ 1 2) ())")
    assert capsys.readouterr().out == "printx(+ 1 2 )()"


def test_interpreter_output_stream():
    buf = StringIO()
    interp = Interpreter(output=buf)
    interp.eval("(print hello)")
    interp.eval("(print (1 2))")
    assert buf.getvalue() == "printhelloprint(1 2 )"


def test_redirect_output_restores_previous_stream():
    outer, inner = StringIO(), StringIO()
    set_output(outer)
    with redirect_output(inner):
        assert get_output() is inner
    assert get_output() is outer
