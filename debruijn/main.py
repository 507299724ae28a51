"""Parses and reduces De Bruijn λ-terms from a file (one per line), or runs in command-line mode. Also uses error
handling context manager. Installed as the debruijn executable script.
"""

import argparse

from debruijn.lang.error import ErrorHandler
from debruijn.lang.session import Session
from debruijn.lang.shell import Shell
from debruijn.pure.reduction import Order, Reducer


def get_parser():
    parser = argparse.ArgumentParser(prog="debruijn", description="De Bruijn index lambda calculus interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-o", "--order", choices=[order.value for order in Order], default=Order.NOR.value,
                        help="evaluation order (default: %(default)s)")
    parser.add_argument("-l", "--limit", type=int, default=Reducer.DEFAULT_LIMIT,
                        help="maximum number of reduction steps per term, 0 for no limit (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="print every reduction step")
    parser.add_argument("-a", "--ascii", action="store_true", help="print λ as \\")
    return parser


def main(argv=None):
    """Runs debruijn interpreter. Called from debruijn executable script."""
    with ErrorHandler() as error_handler:
        args = get_parser().parse_args(argv)
        error_handler.verbose = args.verbose

        options = {"order": Order(args.order), "limit": args.limit, "use_ascii": args.ascii}

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, **options)
            sess.run()

            for result in sess.results:
                print(sess.display(result))

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, **options)).cmdloop()


if __name__ == "__main__":
    main()
