# lumberjack

lumberjack has two parts:

- plain value types for log messages (`lumberjack.fields` and `lumberjack.log`);
- a curses table viewer (`lumberjack.app`). It shows records with the columns Name,
  Address and Email. You move between rows and columns from the keyboard and switch
  between four colour themes (blue, emerald, indigo, red).

## Installation

```
pip install .
```

Use `pip install .[test]` to install the test requirements too.

## Running

```
lumberjack
```

The only option is `--help`. The viewer opens on a terminal that supports curses.

Keys:

| Key           | Action                                             |
|---------------|----------------------------------------------------|
| `j` / Down    | next row (goes back to the first after the last)   |
| `k` / Up      | previous row (goes to the last from the first)     |
| `l` / Right   | next column (stops at the last column)             |
| `h` / Left    | previous column (stops at the first column)        |
| Shift + Right | next colour theme                                  |
| Shift + Left  | previous colour theme                              |
| `q` / Esc     | quit                                               |

The footer shows the text `help <h>`, but no help screen exists: `h` moves to the
previous column.

## Library use

Log data is held in plain dataclasses:

```python
from lumberjack.log import Log, LogMessage

message = LogMessage.from_texts(["16:44:54.572", "Start: Main() Module"])
log = Log.from_rows([["1", "message 1"], ["2", "message 2"]])

for msg in log.messages:
    print([(field.field_info.field_index, field.text) for field in msg.fields])
```

Each `Field` has its `text` and a `FieldInfo`. The `FieldInfo` records the field's
position in the message (`field_index`, counted from 0) and an optional column `name`.

The viewer can also be driven from code. `App` takes a list of `Data` rows
(`name`, `address`, `email`). `App.handle_key(key, shift)` applies one key press, named
as `"j"`, `"down"`, `"esc"` and so on, and returns `False` when the viewer should quit.
`App.run(screen)` runs the loop on a curses screen:

```python
import curses
from lumberjack.app import App, Data

rows = [Data("Ada", "1 Example Street\nExample Town", "ada@example.com")]
curses.wrapper(lambda screen: App(rows).run(screen))
```

`lumberjack.app.constraint_len_calculator(items)` gives the widest display width of the
name, address and email columns of a list of `Data` rows. Wide characters count as two
cells. For an address that spans several lines, the widest line counts.

## What it does not do

lumberjack does not read or parse log files. The `lumberjack` command opens the viewer
with an empty table. The `Log` and `LogMessage` types are not yet shown in the viewer.

## Running the tests

```
pytest
```