# piaf

The core pieces of a modal, vim-style terminal code editor with an AI
discussion and implementation workflow. The package holds editor state and
produces text, including ANSI-styled lines. You build the terminal front end
around it.

## What is inside

| Module | Purpose |
| --- | --- |
| `piaf.result` | A frozen `Result` dataclass with `map` and `unwrap`, and the helpers `ok`, `fail`, `attempt`, `flat_map` and `lift` |
| `piaf.config` | YAML configuration (`Config`, `PersonaConfig`, `ChatConfig`, `OpenAIConfig`) with `parse_config`, `load_file` and `load`. Errors are raised as `ConfigError` |
| `piaf.buffer` | The editable text `Buffer`: cursor movement, insertion, deletion, line splitting and loading a file |
| `piaf.explorer` | A directory `Explorer` that lists `..` first, then directories, then files. Its `enter()` returns an `EnterResult` |
| `piaf.palette` | A `Palette` that searches commands, file names and file contents by substring (`PaletteKind`, `PaletteItem`, `palette_commands`, `looks_textual`) |
| `piaf.style` | ANSI styling for chat transcripts, explorer listings and the palette popup |
| `piaf.memory` | `AgentMemory`: shared and per-agent notes, saved to `<root>/.piaf/memory.json` |
| `piaf.tasks` | Helpers for the implementation board: splitting a request into tasks and building board, assignment, channel, progress and review lines |
| `piaf.jump` | Jump-mode labels for moving the cursor to visible positions (`JumpTarget`, `visible_jump_targets`, `overlay_jump_labels`, …) |
| `piaf.view` | Chat line wrapping, scrolled chat and explorer windows, command-line parsing and workspace-root lookup |
| `piaf.thinkcursion_style` | Terminal rendering for multi-persona discussions: header, round banner, persona turn, tool call, error and end marker |
| `piaf.thinkcursion_backend` | `ThinkcursionBackend`: browse, read and search tools confined to one workspace, plus an in-memory note store |

## Installation

Add `piaf` to your project's dependencies. It needs Python 3.10 or newer and
PyYAML.

## Examples

### Editing text

```python
from piaf.buffer import Buffer

buf = Buffer(80, 24)
for char in "hello":
    buf.insert_rune(char)
buf.newline()
buf.write(b"world")
print(buf.string_lines())   # ['hello', 'world']
```

`Buffer.write` inserts UTF-8 text at the cursor. It stops at the first
invalid byte and returns the number of bytes consumed.

### Chaining fallible work

```python
from piaf.result import ok, fail, flat_map, lift

print(ok(10).map(lambda value: value * 2).unwrap())     # 20

parsed = flat_map(ok("42"), int)                         # ok(42)
broken = flat_map(ok("x"), int)                          # holds the ValueError
print(broken.is_ok)                                      # False

safe_int = lift(lambda: int("7"))
print(safe_int().unwrap())                               # 7
```

`unwrap()` raises the stored exception when the result failed.

### Jump labels

Each non-empty visible line gives a target at its first column and at every
later non-space column. When there are more targets than letters in the
alphabet, the codes get longer:

```python
from piaf.jump import visible_jump_targets, filter_jump_targets, overlay_jump_labels

lines = ["alpha beta", "gamma delta"]
targets = visible_jump_targets(lines, height=8)
shown = overlay_jump_labels(lines, targets, prefix="")
matches = filter_jump_targets(targets, "g")
```

### Styling a chat transcript

```python
from piaf.style import style_chat_lines
from piaf.view import wrap_chat_lines, chat_window

wrapped = wrap_chat_lines(["You: hello", "System: engaged.", "---"], 60)
for line in style_chat_lines(chat_window(wrapped, height=24, offset=0), 60):
    print(line)
```

### Palette

```python
from piaf.palette import Palette

palette = Palette(root=".")
for char in "chat":
    palette.append(char)
item = palette.selected()      # a PaletteItem, or None when nothing matches
```

### Workflow lines and memory

```python
from piaf.tasks import workflow_board, workflow_developer_tasks, assign_developer
from piaf.memory import AgentMemory

board = workflow_board("add a command palette and integration tests")
tasks = workflow_developer_tasks(board)          # at most two tasks
print(assign_developer(1, tasks[0]))

memory = AgentMemory("")                         # an empty root keeps it in memory only
memory.remember_shared("keep tests focused")
print(memory.recall("focused"))                  # ['Shared: keep tests focused']
```

### Configuration

`load()` reads `~/.piaf/config.yml`. When that file is missing it returns an
empty `Config`. `load_file(path)` and `parse_config(text)` read any other file
or string.

```yaml
ai:
  chat:
    timeoutSeconds: 240
    dumpFile: ~/.piaf/chat.log
  thinkcursion:
    personas:
      architect:
        system: You are a careful software architect.
        model: some-model
        baseURL: http://localhost:11434/v1
```

```python
from piaf.config import load_file

config = load_file("config.yml")
print(config.personas["architect"].base_url)
print(config.chat.timeout_seconds)
```

## What this package does not do

- It has no terminal front end and no command to run. It does not put the
  terminal in raw mode, read keys or draw frames.
- It does not talk to any AI model provider. It has no chat session that runs
  the discussion or implementation pipeline, and no discussion loop. The
  styling, task and memory helpers produce the text such a loop would use.
- It ships no built-in configuration. Without a config file, `load()` returns
  empty settings.
- It sets up no logging of its own.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.