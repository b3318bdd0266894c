# irpfm

`irpfm` is a small preprocessor for file-manager source files. It reads a file
made of `use` and `link` directives. For each name listed, it produces a
wrapped intermediate file next to the original.

## Directives

```
use: ill_decl, ill_defs;
link: main;
```

- `use: name, ...;` reads `name.h` and writes `name.i`, framed as

  ```
  start_use @name.i @line 0
  <contents of name.h>

  end_use
  ```

- `link: name, ...;` reads `name.ill` and writes `name.p`. It is framed with
  `start_link` / `end_link` in the same way.

When a name is turned into a file name, everything from its last `.` onwards
is replaced by the new extension.

If the source file for a name does not exist, that name is skipped without
complaint. Comments (`// ...` and `/* ... */`) are ignored anywhere in the
input. Tokens outside a `use` or `link` directive are read and ignored.

## Command line

Install the package, then run:

```
irp directives.fm
```

Like a compiler, `irp` is quiet by default. Add `-o` to echo each recognised
token in colour as it is processed:

```
irp -o directives.fm
```

The output files are written in the current working directory.

The command exits with status 1 in these cases:

- no input file is given;
- the input file cannot be opened;
- the input contains a lexical error: an unterminated comment, an unknown
  character, or an identifier of 60 characters or more.

## Library use

```python
from irpfm.lexer import tokenize

for token in tokenize("use: ill_decl, ill_defs;"):
    print(token.kind, token.text)
```

The package has these modules:

- `irpfm.lexer`
  - `Lexer` reads `Token`s from any text stream, one at a time with
    `next_token()`, or by iteration.
  - `reject()` pushes one token back.
  - `tokenize()` returns every token of a string.
- `irpfm.directives`
  - `Processor(lexer, echo, directory)` drives the directive expansion.
    `run()` returns the paths of the files it wrote.
  - `write_use_output` and `write_link_output` wrap a single file.
  - `change_extension` is a helper.
  - `CommentStripper` removes comments line by line.
  - `TokenEcho` prints tokens in colour.
- `irpfm.errors`
  - `IrpError` is the exception raised for lexical errors.
  - `ErrorCode`, `CodedError` and `error_message` cover numbered error
    categories.
- `irpfm.logtypes`
  - The `MainLog` and `SubLog` categories.
  - Their name and validity helpers.
- `irpfm.colors`
  - The `Color` ANSI escapes.
  - `colorize()`.

## What it does not do

Only `use` and `link` are acted on. The lexer recognises other keywords and
markers, such as `replace`, `log` and the `start_*`/`end_*` tokens, but nothing
processes them. The intermediate `.i` and `.p` files are written here and read
by no later compilation stage.

## Tests

```
pip install -e .[test]
pytest
```