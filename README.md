# rustlings

Worked solutions to a set of small exercises for learning Rust, written as
plain Python functions and classes, together with two helpers used around
the exercises: coloured status lines and a generator for the
`rust-project.json` file that rust-analyzer reads.

## Requirements

- Python 3.11 or later
- `rich` (installed automatically)
- `rustc` on your `PATH`, only for `RustAnalyzerProject.get_sysroot_src`

## Installation

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Status lines: `rustlings.ui`

```python
from rustlings.ui import warn, success

warn("Compiling of exercises/intro/intro2.rs failed!")
success("Successfully ran exercises/intro/intro1.rs")
```

`warn` prints the message in red after a warning sign, `success` in green
after a check mark. When the environment variable `NO_EMOJI` is set, plain
`!` and `✓` are used in place of emoji.

## rust-analyzer support: `rustlings.project`

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk()        # writes ./rust-project.json
```

- `get_sysroot_src()` asks `rustc` for its sysroot, prints the toolchain it
  found and sets `sysroot_src` to `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root="exercises")` walks every entry below `root` and
  calls `path_to_json` on it.
- `path_to_json(path)` adds a `Crate` when the text after the first dot in
  the path is exactly `rs`. Each crate uses edition `2021`, no dependencies
  and the `test` cfg, so rust-analyzer also works inside test blocks.
- `to_dict()` gives the JSON structure; `write_to_disk(path="rust-project.json")`
  writes it as compact JSON.

## Worked solutions: `rustlings.lessons`

Each module covers a group of topics:

- `basics`: functions, `if`, strings, lists and tuples, primitive types and a
  few small clean-ups (`calculate_price_of_apples`, `bigger`, `foo_if_fizz`,
  `trim_me`, `vec_loop`, `vec_map`, `circle_area`, ...).
- `traits`: `append_bar` for strings and lists, the `Licensed` default
  method with `compare_license_types`, and `some_func` over combined
  capabilities.
- `data`: the `transformer` string machine with `Command` and `Append`,
  messages processed by `MachineState`, records such as `Order` and
  `Package`, fruit baskets, `build_scores_table` and the `Cons` list.
- `ownership`: `ReportCard`, `Wrapper`, `fill_vec`, `maybe_icecream`,
  `drain_optionals`, `describe_point` and `offset_sums`, which sums numbers
  by offset on a thread pool.
- `errors`: `generate_nametag_text`, `total_cost`, `purchase` and
  `parse_pos_nonzero` with `PositiveNonzeroInteger`, `CreationError` and
  `ParsePosNonzeroError`.
- `conversions`: `Person.from_text` (falls back to 30-year-old John),
  `Person.parse` (raises `ParsePersonError`) and `Color.try_from` (raises
  `IntoColorError`).
- `concurrency`: `run_workers`, `count_jobs` with a lock-guarded
  `JobStatus`, and `send_tx` / `receive_all` passing values from a `Queue`
  between threads.

Failures are raised as exceptions; each error class carries a `kind` (or, for
`ParsePosNonzeroError`, the underlying `error`) saying what went wrong.

```python
from rustlings.lessons.conversions import Person, Color

Person.from_text("Mark,20")   # Person(name='Mark', age=20)
Person.from_text("Mark")      # Person(name='John', age=30)
Color.try_from((183, 65, 14)) # Color(red=183, green=65, blue=14)
```

## What this package does not do

There is no command-line program. The package does not read an exercise
list, compile, run or test exercise files, check whether an exercise is
marked as done, show hints, list progress or watch files for changes. It
only provides the helpers and worked solutions described above.