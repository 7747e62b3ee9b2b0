# rokit

A library of building blocks for managing the command-line tools of
Roblox projects. It parses and compares tool identifiers, versioned
specifications and aliases. It looks up well-known tools by their short
names. It can run a managed tool as a child process that can be
interrupted cleanly. It also provides a progress bar, trust prompts and
logging setup for a command-line front end.

## Installing

The package needs Python 3.10 or newer and depends on `semver` and `rich`.
Install it with your usual package installer. The `test` extra pulls in
`pytest` for running the test suite.

## Tool identifiers

`rokit.tool_id.ToolId` identifies a tool by its author and name. The text
form may start with a provider prefix, and `github` (`ArtifactProvider.GITHUB`)
is both the only provider and the default. Whitespace around the author
and the name is trimmed. Comparisons and hashing ignore ASCII case, and
the original spelling is kept for display. Invalid input raises
`ToolIdParseError`, a `ValueError` whose `kind` attribute tells what was
wrong.

```python
from rokit.tool_id import ToolId, ToolIdParseError

tool_id = ToolId.parse("rojo-rbx/rojo")
str(tool_id)                                      # "rojo-rbx/rojo"
ToolId.parse("github:Rojo-Rbx/Rojo") == tool_id   # True

try:
    ToolId.parse("a/b/c")
except ToolIdParseError as error:
    print(error.kind, error)
```

## Tool specifications

`rokit.spec.ToolSpec` pins an identifier to an exact `semver.Version`.

- A version written as `x.y` is completed to `x.y.0`.
- Text that looks like a version requirement, such as `^1.2`, is rejected
  with a note asking for an exact version.
- Errors are raised as `ToolSpecParseError`.

```python
from rokit.spec import ToolSpec

spec = ToolSpec.parse("rojo-rbx/rojo@7.4")
str(spec)                  # "rojo-rbx/rojo@7.4.0"
spec.matches_id(tool_id)   # True
tool_id.into_spec(spec.version) == spec  # True
```

## Aliases

`rokit.alias.ToolAlias` is the name a tool is run by. An alias is rejected
with `ToolAliasParseError` in these cases:

- it is empty;
- it contains whitespace;
- it contains `:`, `/` or `@`;
- it is `rokit` in any case.

Aliases compare without regard to ASCII case.

```python
from rokit.alias import ToolAlias

ToolAlias.parse("Rojo") == ToolAlias.parse("rojo")     # True
ToolAlias.from_id(tool_id) == ToolAlias.parse("rojo")  # True
```

The lower-level helpers live in `rokit.strings` and `rokit.identifiers`:

- `CaseInsensitiveString` is the string type that compares while ignoring case.
- `is_invalid_identifier` checks a single part of an identifier.
- `to_xyz_version` completes a short version string.

## Well-known tools and selectors

Common community tools can be referred to by name alone:

```python
from rokit.known_tools import get_known_tool
from rokit.selectors import alias_of, id_of, parse_alias_or_id_or_spec, parse_id_or_spec

str(get_known_tool("stylua"))  # "JohnnyMorganz/StyLua"

selected = parse_id_or_spec("lune")
str(id_of(selected))           # "lune-org/lune"
str(alias_of(selected))        # "lune"
```

`parse_alias_or_id_or_spec` picks what to parse from the text:

- a specification if the text holds `@`;
- an identifier if it holds `/`;
- an alias otherwise.

## Running tools

`rokit.runner.run_interruptible` starts a program with the given arguments
and returns its exit code.

- If the calling process receives SIGINT, SIGTERM or SIGQUIT, the child is
  killed and the result is 128 plus the signal number. On Windows only
  SIGINT is handled.
- A child that ends without an exit code counts as 1.
- If the program cannot be started, `OSError` is raised.

```python
from rokit.runner import run_interruptible

code = run_interruptible("stylua", ["--check", "src"])
```

## The running process

`rokit.current` caches facts about the running process:

- `current_dir()` returns the working directory.
- `current_exe()` and `current_exe_contents()` return the path and the bytes of the running program.
- `current_exe_name()` returns the name it was started under, without an executable suffix.
- `exe_name_from_arg0` does the suffix handling for a given `arg0`.

`rokit.process.detect_parent()` reports what kind of parent started the
program:

- a `Parent` holding a `Launcher`, when Windows Explorer is detected on Windows;
- a plain `Parent()`, meaning a terminal, when stdout or stderr is a TTY;
- `None` otherwise.

## Files

`rokit.files` provides these helpers:

- `load_from_file(path, parser)` raises `MissingFileError` when the file does not exist.
- `save_to_file`
- `path_exists`
- `write_executable_file` writes the bytes and sets mode 0755 outside Windows.
- `simplify_path` strips Windows verbatim `\\?\` prefixes.

## Progress, prompts and logging

`rokit.progress.CliProgressTracker` draws a transient progress bar on
stderr. It counts tasks, optionally split into subtasks, and finishes with
a message such as `🚀 Done (took 1.23s)`. It can also be used as a context
manager.

`rokit.prompts` asks the user about untrusted tools:

- `prompt_for_trust` asks about a single tool.
- `prompt_for_trust_specs` asks about each distinct tool in a list of specs.

Both raise `TrustPromptError` when stderr is not a terminal, or when the
prompt is left without an answer.

`rokit.logs.init_logging` sends log records to stderr. The `ROKIT_LOG`
environment variable can override the level. It takes directives such as
`debug` or `rokit.runner=trace`. `level_for_verbosity` maps a count of
`-v` flags to a level.

## What this package does not do

This package is a library only. It does not provide:

- a command-line program;
- manifest files or tool storage;
- downloading or installing of tool releases;
- changes to `PATH` or to shell profile files.

Those parts are left to the application that uses these building blocks.