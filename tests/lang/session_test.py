from contextlib import redirect_stdout
import io
import os
import tempfile
import unittest

from debruijn.lang.error import ErrorHandler, GenericException
from debruijn.lang.numerical import cnumber
from debruijn.lang.session import Session
from debruijn.lang.shell import Shell
from debruijn.pure.lexical import EmptyExpression, InvalidCharacter, parse
from debruijn.pure.reduction import Order


SUCC_ONE = "(λλλ2(321))(λλ21)"


def write_file(contents):
    """Writes contents to a temporary .lc file and returns its path."""
    file = tempfile.NamedTemporaryFile("w", suffix=".lc", delete=False, encoding="utf-8")
    with file:
        file.write(contents)
    return file.name


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.paths = []

    def tearDown(self):
        for path in self.paths:
            os.remove(path)

    def session(self, contents, **kwargs):
        path = write_file(contents)
        self.paths.append(path)
        return Session(ErrorHandler(), path, cmd_line=False, **kwargs)

    def test_preprocess_line(self):
        cases = {
            ("λ1 ;; identity", False): ("λ1", False),
            ("λ1(  ", False): ("λ1(", True),
            (";; only a comment", False): ("", False),
            ("(λ1)(λ1)\n", False): ("(λ1)(λ1)", False),
        }
        for (line, add_to_prev), expected in cases.items():
            self.assertEqual(expected, Session.preprocess_line(line, 1, add_to_prev), line)

    def test_preprocess_file_lines(self):
        exprs = []
        add_to_prev = False
        for line_num, line in enumerate(["λ1", "", "(λλ2", "   (λ1)) ;; K I", "12"]):
            __, add_to_prev = Session.preprocess_line(line, line_num + 1, add_to_prev, exprs)

        self.assertEqual([("λ1", 1), ("(λλ2 (λ1))", 3), ("12", 5)], exprs)

    def test_run(self):
        sess = self.session(f";; successor\n{SUCC_ONE}\n\n(λλλ2(321))(\n  λλ21) ;; continued\nλ1\n")
        self.assertEqual([2, 4, 6], list(sess.to_exec))

        sess.run()
        self.assertEqual([cnumber(2), cnumber(2), parse("λ1")], sess.results)
        self.assertEqual({}, sess.to_exec)

        self.assertEqual(parse("λ1"), sess.pop())
        self.assertEqual(2, len(sess.results))

    def test_order_and_limit(self):
        sess = self.session("λ(λ1)1\n", order=Order.CBN)
        sess.run()
        self.assertEqual([parse("λ(λ1)1")], sess.results)

        sess = self.session("(λ1)((λ1)(λ1))\n", limit=1)
        with redirect_stdout(io.StringIO()):
            sess.run()
        self.assertEqual([parse("(λ1)(λ1)")], sess.results)

    def test_display(self):
        sess = self.session("λ1\n", use_ascii=True)
        self.assertEqual("\\\\\\2(321)", sess.display(parse("λλλ2(321)")))
        self.assertEqual("λλλ2(321)", self.session("λ1\n").display(parse("λλλ2(321)")))

    def test_errors(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit):
                with ErrorHandler() as error_handler:
                    Session(error_handler, os.path.join(tempfile.gettempdir(), "does-not-exist.lc"), cmd_line=False)

        self.assertRaises(GenericException, Session, ErrorHandler(), Session.SH_FILE, False)

        path = write_file("λ1\nλ@\n")
        self.paths.append(path)
        with self.assertRaises(InvalidCharacter):
            Session(ErrorHandler(), path, cmd_line=False)

    def test_add(self):
        sess = Session(ErrorHandler(), Session.SH_FILE, cmd_line=True)
        self.assertFalse(sess.error_handler.fatal)

        self.assertRaises(ValueError, sess.add, "", 1)
        self.assertRaises(ValueError, sess.add, "  ", 1)
        self.assertRaises(EmptyExpression, sess.add, "λ()", 1)
        self.assertEqual({"<in>": ("λ()", 1)}, sess.error_handler.traceback)

        sess.add(SUCC_ONE, 2)
        self.assertEqual({2: (SUCC_ONE, parse(SUCC_ONE))}, sess.to_exec)


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.shell = Shell(Session(ErrorHandler(), Session.SH_FILE, cmd_line=True))

    def onecmd(self, line):
        output = io.StringIO()
        with redirect_stdout(output):
            stop = self.shell.onecmd(line)
        return stop, output.getvalue()

    def test_default(self):
        __, output = self.onecmd(SUCC_ONE)
        self.assertEqual("λλ2(21)\n", output)

    def test_continuation(self):
        __, output = self.onecmd("(λλλ2(321))(")
        self.assertEqual("", output)
        self.assertEqual(Shell.secondary_prompt, self.shell.prompt)

        __, output = self.onecmd("λλ21)")
        self.assertEqual("λλ2(21)\n", output)
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)

    def test_errors_are_not_fatal(self):
        __, output = self.onecmd("λ@")
        self.assertIn("error: ", output)

        __, output = self.onecmd("λ1")
        self.assertEqual("λ1\n", output)

    def test_comment(self):
        __, output = self.onecmd(";; nothing to see here")
        self.assertEqual("", output)

    def test_order(self):
        self.assertEqual((None, "nor\n"), self.onecmd("order"))
        self.assertEqual((None, "cbn\n"), self.onecmd("order cbn"))
        self.assertEqual(Order.CBN, self.shell.sess.order)

        __, output = self.onecmd("λ(λ1)1")
        self.assertEqual("λ(λ1)1\n", output)

        __, output = self.onecmd("order xyz")
        self.assertIn("error: ", output)
        self.assertEqual(Order.CBN, self.shell.sess.order)

    def test_limit(self):
        self.assertEqual((None, "0\n"), self.onecmd("limit"))
        self.assertEqual((None, "1\n"), self.onecmd("limit 1"))

        __, output = self.onecmd("(λ1)((λ1)(λ1))")
        self.assertIn("warning: ", output)
        self.assertTrue(output.endswith("(λ1)(λ1)\n"))

        for arg in ("-1", "x"):
            __, output = self.onecmd("limit " + arg)
            self.assertIn("error: ", output)
        self.assertEqual(1, self.shell.sess.limit)

    def test_exit(self):
        stop, __ = self.onecmd("exit")
        self.assertTrue(stop)

        stop, output = self.onecmd("EOF")
        self.assertTrue(stop)
        self.assertEqual("\n", output)


if __name__ == '__main__':
    unittest.main()
