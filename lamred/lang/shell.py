"""Handles interactive/command-line mode for lamred. Uses cmd as backend (and readline for history, if available)."""

import cmd

from lamred.lang.session import Session
from lamred.pure.parser import parse


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: normal order\nType '?' or 'help' for more information."
    prompt = "λ> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0
        self._empty = False  # whether the previous line was empty

    def precmd(self, line):
        """Translates escapes before the line is dispatched."""
        line = Session.preprocess_line(line)
        if line.strip():
            self._empty = False
        return line

    def default(self, line):
        """Evaluates an arbitrary λ-term or binding."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.error_handler.register_line(self.sess.path, line, self.line_num)

            print(f" - {line} - ", file=self.stdout)
            result = self.sess.interpret(line)
            if result.success:
                print(result.value + "\n", file=self.stdout)
            else:
                self.sess.error_handler.throw(result.error)

            self.sess.error_handler.remove_line(self.sess.path)

    def do_tree(self, arg):
        """Prints the syntax tree of a λ-term without reducing it."""
        with self.sess.error_handler:
            print(parse(arg).display(), file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lamred interpreter!\n\n"
              "Type a λ-term to reduce it to normal form, one β-reduction per trace line. \n"
              "Variables are single characters and '\\' can be typed instead of 'λ', so \n"
              "'(\\x y.x) a b' reduces to 'a'. 'let K = \\x y.x' labels the result with 'K'.\n"
              "'tree TERM' prints the syntax tree of TERM. Terms without a normal form reduce \n"
              "forever: press Ctrl-C to stop. Two empty lines in a row exit.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line. A second empty line in a row exits."""
        if self._empty:
            return True
        self._empty = True
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
