# patternkit

A handful of small, self-contained building blocks, each showing one
classic design idea in plain Python:

| Module | What it gives you |
| --- | --- |
| `patternkit.users` | `User`, `Group` and `UserManager`, a registry of users and groups keyed by id. A group refers to its members weakly, and a user refers to its group weakly. `format_user` and `format_group` render them as text. |
| `patternkit.cli` | An interactive shell around `UserManager` (`repl`, `execute`, `help_text`, `main`). |
| `patternkit.typelist` | `TypeList`, an immutable ordered list of types with `get`, `contains`, `index_of`, `append` and `prepend`. `index_of` returns `NPOS` for an absent item. |
| `patternkit.typemap` | `TypeMap`, built from alternating key and value-type arguments, holding one optional value per declared key. |
| `patternkit.mixins` | `LessThanComparable`, which derives `>`, `<=`, `>=`, `==` and `!=` from `<`; `Counted`, which counts live instances; and `Number`, which uses both. |
| `patternkit.log` | `Log`, an event log that keeps the last ten entries (`LogEntry`, with a `LogLevel` of `NORMAL`, `WARNING` or `ERROR`). `Log.instance()` returns a shared log. |
| `patternkit.checkpoints` | `Checkpoint` for a rally route, `CheckpointDirector`, and the builders `TextReportBuilder` and `PenaltyCalculatorBuilder`. |
| `patternkit.adaptive_set` | `AdaptiveSet`, an integer set that keeps its elements in `ArrayBackend` while small and in `HashBackend` once it grows past ten elements. |
| `patternkit.expressions` | `Constant`, `Variable` and `Addition` expression nodes, with constants and variables shared through `ExpressionFactory`. |

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `patternkit-users`

An interactive user and group registry. Type `help` at the `>` prompt to
list the commands:

```
createUser {userId} {username} {email} {age} [groupId]
deleteUser {userId}
allUsers
getUser {userId}
createGroup {groupId}
deleteGroup {groupId}
allGroups
getGroup {groupId}
help
exit
```

A short session:

```
> createGroup 456
Group created successfully
> createUser 123 Alice alice@example.com 25 456
User created successfully
> getGroup 456
Group ID: 456
Users:
  Alice (ID: 123)
-------------------
> exit
```

Ids and ages must be 32-bit integers. A group id that names no group
creates the user without a group. The shell stops at `exit` or at the end
of input.

### `patternkit-log-demo`

Writes eleven sample events to the shared log and prints what the log
kept: the ten most recent entries, each with a timestamp and level.

### `patternkit-checkpoints`

Builds a text report and a total penalty for a sample four-checkpoint
route.

### `patternkit-set-demo`

Adds 1 to 15 to an `AdaptiveSet`, printing its size at each step, then
prints the sizes of its union and intersection with the set {10, 15, 20}.

## Library use

Each module can be imported on its own. For example:

```python
from patternkit.users import UserManager, format_group

manager = UserManager()
manager.create_group(456)
manager.create_user(123, "Alice", "alice@example.com", 25, 456)
print(format_group(manager.get_group(456)))
```

```python
from patternkit.expressions import Addition, ExpressionFactory

factory = ExpressionFactory.instance()
expr = Addition(factory.create_constant(2), factory.create_variable("x"))
print(expr.calculate({"x": 3}))  # 5.0
print(expr)                      # (2 + x)
```

```python
from patternkit.typemap import TypeMap

store = TypeMap(int, int, str, str)
store.add_value(int, 42)
store.get_value(int)      # 42
store.remove_value(int)
store.contains(int)       # False
```

Errors are raised as exceptions:

- `UserManager` raises `AlreadyExistsError` when creating a user or group
  that already exists and `NotFoundError` when a user or group is missing;
  both derive from `UserManagerError`.
- `TypeMap` raises `KeyError` for a key it was not built with, and
  `ValueMissingError` when reading a key that holds no value.
- `Checkpoint` raises `ValueError` for a latitude outside -90..90 or a
  longitude outside -180..180.
- `Variable.calculate` raises `KeyError` when the variable is not in the
  context.

`ExpressionFactory` creates the integral constants from -5 to 256 up
front; other constants and all variables are shared only while something
still refers to them.

## What it does not do

The user and group registry lives in memory only: nothing is saved when
the `patternkit-users` shell exits, and there is no way to load users or
groups from a file.