import io
import unittest
from contextlib import redirect_stdout

from lamred.lang.error import ErrorHandler
from lamred.lang.session import Session
from lamred.lang.shell import Shell


def new_shell(lines):
    out = io.StringIO()
    sess = Session(ErrorHandler(fatal=False), Session.SH_FILE, out)
    shell = Shell(sess, stdin=io.StringIO(lines), stdout=out)
    shell.use_rawinput = False
    return shell, out


class ShellTestCase(unittest.TestCase):

    def test_cmdloop(self):
        shell, out = new_shell("(\\x.x) y\nlet K = \\x y.x\n\n\nnever reached\n")
        shell.cmdloop()

        output = out.getvalue()
        self.assertIn(" - (λx.x) y - \n↪ β-reduce: x <- y\ndone.\ny\n", output)
        self.assertIn(" - let K = λx y.x - \ndone.\n<K> λx.λy.x\n", output)
        self.assertNotIn("never reached", output)
        self.assertEqual(["K"], [binding.name for binding in shell.sess.bindings])

    def test_single_empty_line(self):
        shell, out = new_shell("x\n\ny\n")
        shell.cmdloop()
        self.assertIn(" - y - ", out.getvalue())

    def test_eof(self):
        shell, out = new_shell("λx.x")
        self.assertTrue(shell.onecmd("EOF"))
        self.assertTrue(shell.onecmd("exit"))

    def test_emptyline(self):
        shell, __ = new_shell("")
        self.assertFalse(shell.emptyline())
        self.assertTrue(shell.emptyline())

        shell.precmd("x")
        self.assertFalse(shell.emptyline())

    def test_precmd(self):
        shell, __ = new_shell("")
        self.assertEqual("λ;.; ;;", shell.precmd("\\;.; ;;  "))

    def test_error(self):
        shell, out = new_shell("(x\nx\n")
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            shell.cmdloop()

        self.assertIn("expected closing parenthesis", stdout.getvalue())
        self.assertIn(" - x - \ndone.\nx\n", out.getvalue())

    def test_tree(self):
        shell, out = new_shell("")
        shell.onecmd("tree f a")
        self.assertIn("Application(expr='(f a)', nodes=[\n    Variable(expr='f'),", out.getvalue())

    def test_help(self):
        shell, out = new_shell("")
        shell.onecmd("help")
        self.assertIn("Welcome to the lamred interpreter!", out.getvalue())


if __name__ == '__main__':
    unittest.main()
