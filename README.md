# megashell

A small interactive shell. Each line you type is either a single command
run from an input file into an output file, or a pipeline that reads from
an input file (or a here-document) and writes to an output file.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Usage

Start the shell:

    megashell

It prompts with `megashell>$ ` and reads lines until end of input
(Ctrl-D). Blank lines are ignored.

### Pipelines

A line that starts with `<` is a file-to-file pipeline:

    megashell>$ < infile cat | grep foo | wc -l > outfile

The first command reads `infile`, each following command reads the output
of the one before, and the last command's output goes to `outfile`, which
is created (mode 0644) or truncated. If several input redirections are
given, the last one wins; output redirections other than the final one are
dropped.

A line that starts with `<<` reads a here-document instead of an input
file. Input lines are collected until one that starts with the delimiter,
or until end of input:

    megashell>$ << EOF cat | wc -l > outfile
    > one
    > two
    > EOF

The `> ` prompt is shown only when standard input is a terminal.

### Single commands

Any other line is split into words and run as a single command: the first
word is the input file, the third word is the command, and the last word is
the output file, so a line needs at least four words:

    megashell>$ infile - cat outfile

### Commands and errors

Commands are looked up first as given and then in each directory of
`PATH`. Text in double quotes stays together as one word while the line is
split. Problems such as a missing input file, an unwritable output file, a
missing `PATH` or an unknown command are reported on standard error as
`megashell: ...`, and the shell carries on with the next line. `SIGUSR1`
and `SIGUSR2` are recorded rather than ending the shell.

## What it does not do

- No built-in commands (`cd`, `exit`, `export` and the like), no variable
  expansion, no globbing, no single quotes and no command history.
- Every line needs both an input and an output; there is no plain
  `command` at the prompt, and `>>` does not append.
- In a pipeline each command keeps at most one argument after its name
  (`grep foo`, `wc -l`); further words are dropped.
- Commands are split on spaces when they are run, so quoting only affects
  how the line is parsed, not the arguments a command receives.

## Library

The pieces of the shell can be used from Python:

- `megashell.shell.run_line(line, env, stdin)` runs one line as the shell
  would and returns the exit status of its last command;
  `megashell.shell.main()` is the interactive loop and
  `megashell.shell.install_signals()` sets up the signal handling.
- `megashell.pipex.pipex(args, env, stdin)` runs
  `infile cmd1 ... cmdN outfile` (or `here_doc limiter cmd1 ... cmdN
  outfile`) and returns every command's exit status;
  `megashell.pipex.run_single(args, env)` runs one command.
  `find_path` and `split_paths` resolve commands against `PATH`. Failures
  raise `megashell.pipex.PipexError`, which carries an `exit_code`.
- `megashell.parsing.parse_pipeline` turns a pipeline line into the
  argument list for `pipex`; `check_io` and `check_io_heredoc` drop the
  redundant redirections.
- `megashell.tokenize.string_split` splits a line on a separator while
  keeping double-quoted text together.
- `megashell.linereader.LineReader` reads lines from a file descriptor
  through a fixed-size buffer, via `next_line()` or iteration.
- `megashell.cformat.cformat` formats `%c %s %p %d %i %u %x %X %%`
  conversions; `megashell.cformat.print_format` writes the result to a
  stream and returns its length.
- `megashell.textutil` provides lenient integer parsing (`atoi`, `atol`),
  `itoa`, `split`, `strtrim`, `strnstr` and `substr`.