# liliumtools

A handful of small command-line tools, plus the little library they are
built on:

| Command        | What it does                                                     |
|----------------|------------------------------------------------------------------|
| `minish`       | A minimal interactive shell with a few built-in commands         |
| `lilium-arch`  | Prints the machine architecture (`x86_64`, `aarch64`, ...)       |
| `lilium-uname` | Prints system information selected by flags                      |
| `lilium-true`  | Exits successfully                                               |
| `lilium-false` | Exits unsuccessfully                                             |

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The commands

### minish

```
minish
```

Shows a `# ` prompt and reads one line at a time from standard input. A line
is split into words: whitespace separates words, `\` escapes the next
character, and text in `"..."` or `'...'` stays together. A `;` ends the
word before it and becomes a word of its own. A word that runs to the very
end of the line is taken exactly as written, quotes and backslashes
included.

Leading `KEY=value` words are collected as environment assignments; the
first word without `=` is the command and the rest are its arguments. Lines
with no command are skipped. For every other line the parsed line is echoed
to standard error and the command is run.

The commands the shell knows are:

- `exit`, `return` and `logout`, which print `exit command: <name>` and end
  the shell with an optional numeric status (`exit 3`); a status that is not
  a 32-bit integer is an error;
- `true`, `false` and `arch`, which behave like `lilium-true`,
  `lilium-false` and `lilium-arch`.

Any other command prints `Error spawning <command>: Not Found`, and the
shell goes on to the next line. At end of input the shell prints `exit` and
stops with status 0. Input that is not valid UTF-8 ends the shell with an
error.

### lilium-arch

```
lilium-arch
lilium-arch --help
lilium-arch --version
```

Prints `x86_64`, `i686`, `arm`, `aarch64`, `riscv32` or `riscv64` for the
running machine, and `**UNKNOWN ARCH <machine>**` for a machine it does not
recognise. Any other option prints `<program>: Unknown option <option>` and
the exit status is 1.

### lilium-uname

```
lilium-uname            # same as -s
lilium-uname -a
lilium-uname -snrm
```

Flags can be combined in one word, and each field is printed in the order
the flags were given, separated by spaces:

| Flag | Prints                                                      |
|------|-------------------------------------------------------------|
| `-a` | all of the fields below, in this order                      |
| `-s` | kernel name (always `Lilium`)                               |
| `-n` | node (host) name                                            |
| `-r` | OS name and version, with kernel vendor and version         |
| `-v` | kernel vendor, version and build                            |
| `-m` | machine                                                     |
| `-p` | processor                                                   |
| `-i` | hardware platform                                           |
| `-o` | operating system                                            |

`--version` prints the version and exits. `--help` prints a placeholder
line and exits. An unknown option or a stray argument is reported on
standard error and the exit status is -1.

### lilium-true and lilium-false

```
lilium-true;  echo $?    # 0
lilium-false; echo $?    # 1
```

Both understand `--help` and `--version` (status 0) when they come before
any other argument.

## What it does not do

`minish` does not start other programs. Only the built-in commands listed
above run; `PATH` is not searched, and `KEY=value` assignments are parsed
and echoed but not applied to anything.

## Using it as a library

The pieces the commands are built from can be imported directly.

```python
from liliumtools.shell import split_shell, parse_shell

line = parse_shell(split_shell('FOO=bar echo "hello world" done'))
print(line.env[0].key, line.env[0].val)   # FOO bar
print(line.command, line.args)            # echo ['hello world', 'done']
print(line)                               # FOO=bar echo hello world done
```

```python
from liliumtools.helpers import split_once_owned, get_many

split_once_owned("key=value", "=")        # ('key', 'value'); None if absent
get_many(["a", "b", "c"], [2, 0, 9])      # ['c', 'a', None]
```

`get_many` raises `GetManyError` when an in-range index is asked for twice.

Other modules:

- `liliumtools.errors` — `ErrorKind`, whose string form is a readable
  description of the kind, `kind_from_sys_error`, and `ToolError`, the
  exception the tools raise.
- `liliumtools.bufio` — `BufReader`, a buffered reader over any object with
  `read(size)`, with `fill_buf`, `consume`, `read`, `read_until` and
  `read_line`; a line that is not valid UTF-8 raises `InvalidUtf8Error`.
- `liliumtools.runtime` — `run_main` and `report`, which turn a main
  function's result (None, an int, or an error) into an exit status, and
  `parse_vars` / `lookup_var` for `KEY=value` environment entries.
- `liliumtools.shell` — `split_shell`, `parse_shell`, `exec_line`,
  `ShellLine`, `EnvVar` and `ShellExit`.
- `liliumtools.minish` — `run_shell`, the shell loop over any input and
  output streams.
- `liliumtools.archinfo` — `ArchType`, `ArchInfo`, `current_arch` and
  `arch_name`.
- `liliumtools.truefalse` — `help_version`, `true_main` and `false_main`.
- `liliumtools.uname` — `PrintMode`, `SystemInfo`, `parse_options`,
  `collect_system_info` and `format_report`.