# msdscript

A small expression language together with its parser, interpreter and
pretty printer, and a desktop window for trying expressions out.

Programs are built from:

- integer literals such as `42` or `-7` (literals must fit in 32 bits;
  arithmetic is done in 64 bits, with overflow reported as an error) and `+`, `*`
- booleans `_true` / `_false` and equality `==`
- `_let x = <expr> _in <body>`
- `_if <cond> _then <expr> _else <expr>`
- `_fun (x) <body>` and calls `f(arg)`; functions close over their
  environment, and `f()` calls `f` with the argument `0`

`*` binds tighter than `+`, which binds tighter than `==`. Parsing stops at
the first point where no further expression can continue; any text after
that is ignored.

## Installing

```
pip install .
```

The window uses `tkinter`, which must be available in your Python
installation. The parser and interpreter do not need it.

## The desktop window

```
msdscript
```

This opens a window where you type an expression, choose "Interp" or
"Pretty Print", and press Submit. The result appears in the Results pane;
errors in the expression are shown in a message box. Reset clears both panes
and selects "Interp" again.

## Using it from Python

```python
from msdscript.parse import parse_str
from msdscript.env import empty_env

expr = parse_str("_let x = 5 _in x + 1")
print(expr.interp(empty_env()).to_string())   # 6
print(expr.to_string())                       # (_let x=5 _in (x+1))
print(expr.to_pretty_string())
# _let x = 5
# _in x + 1
```

Functions are values:

```python
expr = parse_str("_let f = _fun (x) x * x _in f(7)")
print(expr.interp(empty_env()).to_string())   # 49
```

The modules:

- `msdscript.parse` — `parse_str(text)` and the recursive-descent functions
  it is built from, working over a `Scanner`.
- `msdscript.expr` — the syntax tree (`NumExpr`, `AddExpr`, `MultExpr`,
  `VarExpr`, `LetExpr`, `BoolExpr`, `EqualExpr`, `IfExpr`, `FunExpr`,
  `CallExpr`), each with `interp`, `equals`, `to_string` (fully
  parenthesised) and `to_pretty_string` (indented, minimal parentheses).
- `msdscript.values` — runtime values `NumVal`, `BoolVal` and `FunVal`.
  `FunVal.call(arg)` applies a closure directly.
- `msdscript.env` — `empty_env()`, and `Env.extend(name, value)` to bind
  variables.
- `msdscript.app` — `run(text, mode)` does the same work as the Submit
  button, returning the interpreted result or the pretty-printed form
  depending on the `Mode` (`Mode.INTERP` or `Mode.PRETTY_PRINT`);
  `MainWindow` and `main()` make up the window.

Problems such as free variables, calling a non-function, a non-boolean
condition, arithmetic on booleans or functions, integer overflow and
malformed input raise `msdscript.errors.MSDScriptError`.

## What it does not do

There is no command-line evaluator or interactive prompt: the `msdscript`
command only opens the window. To evaluate expressions without a display,
call `msdscript.app.run` or the parser and interpreter from Python.

## Running the tests

```
pip install .[test]
pytest
```