"""Runs lamred on a file of λ-terms or in command-line mode. Also uses the error handling context manager. Called from
the lamred console script.
"""

import argparse

from lamred.lang.error import ErrorHandler
from lamred.lang.session import Session
from lamred.lang.shell import Shell


def main(argv=None):
    """Runs lamred interpreter. Called from lamred console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lamred", description="normal-order lambda calculus evaluator")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        args = parser.parse_args(argv)

        if args.file is not None:
            Session(error_handler, args.file).run_file()

        else:
            error_handler.fatal = False
            Shell(Session(error_handler)).cmdloop()


if __name__ == "__main__":
    main()
