"""Session control for debruijn. Parses and reduces λ-terms, either read from a file (one term per line) or typed into
the interactive shell. Every line of a file is parsed up front, so syntax errors are reported before anything is
reduced.
"""

from debruijn.lang.error import GenericException
from debruijn.pure.lexical import parse
from debruijn.pure.reduction import Order, Reducer


class Session:
    """Governs a debruijn session: which terms are waiting to be reduced and the results of reducing them."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";;"

    def __init__(self, error_handler, path, cmd_line, order=Order.NOR, limit=Reducer.DEFAULT_LIMIT, use_ascii=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.order = order
        self.limit = limit
        self.use_ascii = use_ascii  # whether or not to display λ as \

        self.to_exec = {}  # dict of line num: (expr, λ-term) to reduce
        self.results = []

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r", encoding="utf-8") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr, line_num in exprs:
                self.add(expr, line_num)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of a file's (expr, line_num)s), but the returned add_to_prev will indicate whether a line continuation is
        necessary (more "(" than ")"). Returns updated value of line and add_to_prev.
        """
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]  # get rid of comments

        line = line.rstrip()
        if exprs is not None:
            if add_to_prev and exprs:
                prev, prev_line_num = exprs.pop()
                line = f"{prev} {line.strip()}"
                exprs.append((line, prev_line_num))  # continued exprs are reported at the line they started on
            elif line and not line.isspace():
                exprs.append((line, line_num))

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Parses expr and adds it to the current session. Beta-reduction is lazy and is delayed until run is
        called.
        """
        if not expr or expr.isspace():
            raise ValueError("expr cannot be empty")

        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised
        self.to_exec[line_num] = (expr, parse(expr))
        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Reduces every λ-term added since the last run, in order. Results are appended to self.results."""
        for line_num, (expr, term) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, expr, line_num)

            try:
                reducer = Reducer(term, self.order, self.limit)
                self.results.append(reducer.beta_reduce(self.error_handler))
            finally:
                del self.to_exec[line_num]

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Removes and returns the most recent result."""
        return self.results.pop()

    def display(self, term):
        """Canonical form of term, with λ written as \\ in ascii mode."""
        if self.use_ascii:
            return str(term).replace("λ", "\\")
        return str(term)
