# yalox

A small tree-walking interpreter for a subset of the Lox scripting language.
It scans source text into tokens, parses them into a syntax tree and
evaluates the tree.

## Installation

    pip install .

Add the `test` extra to install pytest as well:

    pip install ".[test]"

## Command line

To run a script file:

    yalox script.lox

With no arguments, `yalox` starts an interactive prompt (`> `). Each line you
type is run on its own. End the input (Ctrl+D, or Ctrl+Z on Windows) to leave
the prompt.

The command is verbose. For every piece of source it runs, it writes:

- `Source: "..."` with the source text,
- `Ast: ...` with the parsed statements,
- the output of the program's `print` statements,
- `Res: Ok`, or `Res: Err(...)` if a runtime error stopped the program.

When it finishes it writes `Interpreter executed successfully`.

Exit status:

- 0 when the run finishes, including runs that ended with a runtime error
  (the error is shown in the `Res:` line);
- 1 when more than one argument is given (a usage line is printed);
- 65 when the script cannot be read or fails to parse.

At the prompt, a line that fails to parse is reported on standard error as
`Runtime error: ...` and the prompt continues.

## The language

- Number, string, `true`, `false` and `nil` literals. All numbers are
  floating point; whole numbers are printed without a fractional part
  (`print 3;` shows `3`), and `nil` is printed as `<NIL>`.
- Arithmetic `+ - * /` on numbers. Division by zero gives `inf`, `-inf` or
  `NaN`. `+` on two strings gives the left-hand string unchanged.
- Comparison `< <= > >=` on numbers, and equality `== !=` on any values;
  values of different kinds are never equal.
- Unary `-` on numbers. Unary `!` accepts only `true`, `false` or `nil`:
  it returns a boolean operand unchanged and turns `nil` into `true`.
- `and` and `or`, which skip the right side when the left side decides the
  result and return the deciding operand.
- `var` declarations, assignment, and block scoping with `{ ... }`.
- `if` / `else`, `while` and `for`.
- `break;` leaves the innermost loop; `break N;` leaves `N` nested loops.
- `print` statements.
- `fun name(a, b) { ... }` declares a function. Calling it runs its body with
  the parameters bound; a call always evaluates to `nil`. The wrong number of
  arguments is a runtime error.
- A built-in `clock()` that returns the seconds since the Unix epoch.

Truthiness: `nil` and `false` are false, numbers and functions are true, the
empty string is true and every non-empty string is false.

A runtime error inside a `print` statement is printed in place of the value,
and one inside an expression statement is ignored; elsewhere (a variable
initializer, a condition, a `break` depth) it stops the program.

Example:

    var total = 0;
    for (var i = 0; i < 10; i = i + 1) {
        if (i == 5) break;
        total = total + i;
    }
    print total;

## Library use

    from yalox.cli import run

    run("var n = 2; print n * 21;")

`run(source, out=None)` writes to `out` (standard output by default).
`run_file(path, out=None)` runs a file and `run_prompt(stdin=None, out=None)`
runs the interactive loop on any text streams.

The stages can also be called one at a time:

    from yalox.scanner import scan_tokens
    from yalox.parser import parse
    from yalox.interpreter import Interpreter, stringify

    statements = parse(scan_tokens("print 1 + 2;"))
    Interpreter(statements).interpret()

- `yalox.scanner`: `Scanner`, `scan_tokens`, `Token`, `TokenType`.
- `yalox.parser`: `Parser`, `parse`, and the expression and statement
  dataclasses (`BinaryExpr`, `WhileStmt`, and so on).
- `yalox.environment`: `Environment`, a stack of scopes with `define`,
  `assign`, `get` and a `scope()` context manager.
- `yalox.callables`: `LoxCallable`, `LoxFunction` and the `Clock` built-in.
- `yalox.interpreter`: `Interpreter`, `BreakSignal`, and the helpers
  `is_truthy`, `is_equal` and `stringify`.

Errors are raised as `yalox.errors.LoxError`, which carries `line`, `where`
and `msg` and renders as `[line N] Error <where>: <msg>`.

## Not supported

- No `return` statement and no return values from functions.
- No classes, `this` or `super`; these words are reserved but cannot be used.
- No block comments; only `//` line comments.
- An unterminated string is dropped silently, and an unexpected character is
  reported with a message on standard output and skipped.
- Missing punctuation such as `;`, `)` or `}` is mostly tolerated by the
  parser rather than reported.

## Running the tests

    pytest