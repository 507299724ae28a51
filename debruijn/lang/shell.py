"""Interactive mode for the debruijn interpreter, built on cmd. Anything that isn't a shell command is read as a
λ-term, reduced and printed.
"""

import cmd

from debruijn.lang.error import GenericException
from debruijn.pure.reduction import Order


class Shell(cmd.Cmd):
    """De Bruijn lambda calculus interpreter shell."""
    intro = "De Bruijn lambda calculus interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # shown while a term has unclosed parentheses
    _tmp_prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._pending = ""  # text of a term spanning several lines
        self.line_num = 0

    def _continue(self, line):
        """Joins line to any pending text. Returns the complete term, or None if it still has unclosed parentheses."""
        self.line_num += 1
        line, incomplete = self.sess.preprocess_line(self._pending + line, self.line_num, self._pending)

        self._pending = line if incomplete else ""
        self.prompt = self.secondary_prompt if incomplete else self._tmp_prompt
        return None if incomplete else line

    def _evaluate(self, expr):
        try:
            self.sess.add(expr, self.line_num)
        except ValueError:
            return  # blank or comment-only line

        self.sess.run()
        if self.sess.results:
            print(self.sess.display(self.sess.pop()))

    def default(self, line):
        """Reduces and prints a λ-term, possibly spread over several lines."""
        with self.sess.error_handler:  # cmd.Cmd would otherwise stop on the first exception
            expr = self._continue(line)
            if expr is not None:
                self._evaluate(expr)

    def do_order(self, arg):
        """order [nor|cbn|app|cbv]: shows or sets the evaluation order."""
        with self.sess.error_handler:
            if arg:
                try:
                    self.sess.order = Order(arg.strip().lower())
                except ValueError:
                    choices = ", ".join(order.value for order in Order)
                    raise GenericException("unknown evaluation order '{}' (expected one of " + choices + ")", arg,
                                           diagnosis=False)
            print(self.sess.order.value)

    def do_limit(self, arg):
        """limit [n]: shows or sets the maximum number of reduction steps (0 means no limit)."""
        with self.sess.error_handler:
            if arg:
                if not arg.strip().isdigit():
                    raise GenericException("expected non-negative step limit, got '{}'", arg, diagnosis=False)
                self.sess.limit = int(arg)
            print(self.sess.limit)

    def do_help(self, arg):
        """Prints a short intro instead of per-command docs."""
        print("Welcome to the debruijn interpreter!\n\n"
              "Variables have no names here: a variable is a single hex digit counting the λs \n"
              "between it and the λ that binds it (1 = nearest). λ can also be typed as \\.\n\n"
              "Try it out by typing '(λλλ2(321))(λλ21)'. This applies the successor function \n"
              "to the Church numeral 1, giving 'λλ2(21)' (the Church numeral 2) as the result.\n\n"
              "'order' and 'limit' show or change how terms are reduced; 'exit' quits.")

    def emptyline(self):
        return ""  # cmd.Cmd repeats the last command by default

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

    def do_EOF(self, arg):
        print()
        return True
