"""Session control for lamred. Keeps the named bindings of an interactive or file session and turns raw input lines into
evaluations.

Input lines can be either:

```
<binding> ::= "let " <name> "=" <λ-term>   ; reduced right away, result labelled "<name> <normal form>"
<expr>    ::= <λ-term>                     ; reduced right away
```

Bindings only label output: names are never substituted into later terms. A backslash is accepted in place of "λ".
"""

from dataclasses import dataclass

from lamred.interpreter import Result, evaluate
from lamred.lang.error import GenericException, LambdaSyntaxError


@dataclass(frozen=True)
class Binding:
    name: str
    expr: str


class Session:
    """Governs a lamred session, with control over its bindings."""
    SH_FILE = "<in>"  # command-line interpreter filename
    ESCAPE = "\\"     # typed in place of λ
    BINDING = "let "

    def __init__(self, error_handler, path=SH_FILE, stream=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path        # used for error messages
        self.stream = stream    # where reduction traces and results go (stdout if None)
        self.bindings = []      # list of Bindings, in order of definition

    @staticmethod
    def preprocess_line(line):
        """Strips trailing whitespace from line and replaces every escape with λ. Nothing else is touched: any other
        character may be a variable.
        """
        return line.rstrip().replace(Session.ESCAPE, "λ")

    def lookup(self, name):
        """Returns the most recent Binding called name, or None."""
        for binding in reversed(self.bindings):
            if binding.name == name:
                return binding
        return None

    def bind(self, line):
        """Evaluates a 'let' line. The binding is dropped again if its term does not evaluate."""
        stripped = line.strip()
        if "=" not in stripped:
            msg = "'{}' is not a valid binding, expected 'let NAME = λ-TERM'"
            return Result.failure(LambdaSyntaxError(msg, line))

        name, expr = stripped[len(Session.BINDING):].split("=", 1)
        name = "-".join(name.split())
        if not name:
            msg = "'{}' binds an empty name"
            return Result.failure(LambdaSyntaxError(msg, line))

        if self.lookup(name) is not None:
            start = line.index(name) if name in line else 0
            self.error_handler.warn("'{}' rebinds '{}'", (line, name), start=start, end=start + len(name))

        binding = Binding(name, expr)
        self.bindings.append(binding)

        result = evaluate(binding.expr, self.stream)
        if not result.success:
            self.bindings.pop()
            return result
        return Result(f"<{binding.name}> {result.value}", True)

    def interpret(self, line):
        """Interprets a single preprocessed line and returns its Result."""
        if line.lstrip().startswith(Session.BINDING):
            return self.bind(line)
        return evaluate(line, self.stream)

    def run(self, lines):
        """Interprets lines (e.g. an open file) in order, printing results and throwing errors. Returns the Results."""
        results = []
        for line_num, line in enumerate(lines, start=1):
            line = Session.preprocess_line(line)
            if not line.strip():
                continue

            self.error_handler.register_line(self.path, line, line_num)  # in case error is thrown
            result = self.interpret(line)
            results.append(result)

            if result.success:
                print(result.value, file=self.stream)
            else:
                self.error_handler.throw(result.error)
            self.error_handler.remove_line(self.path)

        return results

    def run_file(self):
        """Runs every line of the file at self.path."""
        try:
            with open(self.path, "r", encoding="utf-8") as file:
                lines = file.readlines()
        except OSError:
            raise GenericException("'{}' could not be opened", self.path, diagnosis=False)
        return self.run(lines)
