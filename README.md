# clikit

A small toolkit of building blocks for command-line programs. It has no
dependencies outside the standard library.

## Modules

- `clikit.errors` — error wrapping that keeps a stack trace.
  `with_stack_trace(err)` wraps an exception in a `WrappedError` (an
  already wrapped error is returned as is, `None` gives `None`);
  `with_stack_trace_and_prefix(err, message, *args)` does the same and
  prepends a %-formatted message. `unwrap` returns the inner error,
  `print_error_with_stack_trace` renders an error with its trace when it
  has one, and `is_error(actual, expected)` checks whether an error is, or
  wraps, an expected error instance or exception class.
  `ErrorWithExitCode(err, exit_code)` tells the program which exit code to
  use. `recover(on_panic)` is a context manager that suppresses any
  exception raised in its block and passes it, wrapped, to `on_panic`;
  `with_panic_handling(action)` wraps a callable so that whatever it
  raises comes out as a `WrappedError`.
- `clikit.collectionutils` — list and mapping helpers:
  `list_contains_element`, `remove_element_from_list`, `make_copy_of_list`,
  `batch_list_into_groups_of` (returns `None` for a batch size of 0 or
  less), `merge_maps`, `keys` (sorted), `key_value_string_slice`,
  `key_value_string_slice_with_format` (a %-style format, results sorted)
  and `key_value_string_slice_as_map`.
- `clikit.files` — file-system helpers: `file_exists`, `is_dir`,
  `read_file_as_string`, `copy_file`, `write_file_with_same_permissions`,
  `canonical_path`, `canonical_paths`, `grep` and `get_path_relative_to`.
  `grep` takes a compiled pattern or a pattern string and a glob in which
  `**` matches any number of directories. `get_path_relative_to` resolves
  symbolic links first and returns a path with forward slashes. Failures
  are raised as `WrappedError` around the underlying `OSError`.
- `clikit.awserrors` — error types for resource lookups and scaling:
  `MultipleLookupErrors` (with `add_error` and `is_empty`),
  `ResourceLookupError` and `CouldNotMeetASGCapacityError`.
- `clikit.helptext` — help-text layout that wraps long lines while keeping
  indentation and aligning two-column, tab-separated tables:
  `wrapped_help_printer`, `indent_aware_wrap_text`,
  `help_table_aware_determine_indent`, `regexp_split_after`,
  `tab_aware_string_length` and `prefixed_first_flag_name`.
- `clikit.assertions` — `string_flag_required(options, flag_name)` and
  `environment_var_required(var_name)`, both raising `RequiredArgsError`
  when the value is missing or empty.
- `clikit.entrypoint` — a minimal application model: `App`, `Command` and
  `Flag`, plus `new_app`, `run_app`, `get_exit_code` and `log_error`.

## Examples

Grouping and merging:

```python
from clikit.collectionutils import batch_list_into_groups_of, merge_maps

batch_list_into_groups_of([1, 2, 3, 4, 5, 6, 7], 2)
# [[1, 2], [3, 4], [5, 6], [7]]

merge_maps({"key1": "value1"}, {"key1": "replacement", "key2": "value2"})
# {"key1": "replacement", "key2": "value2"}
```

Wrapping help text to a line width while keeping the indent:

```python
from clikit.helptext import indent_aware_wrap_text

indent_aware_wrap_text("You made a time machine out of a Delorean!?", 15, "")
# "You made a time\nmachine out of\na Delorean!?"
```

Choosing an exit code from an error:

```python
from clikit.entrypoint import get_exit_code
from clikit.errors import ErrorWithExitCode

get_exit_code(None)                                          # 0
get_exit_code(ValueError("Broken"))                          # 1
get_exit_code(ErrorWithExitCode(ValueError("Broken"), 127))  # 127
```

A small application:

```python
import sys
from clikit.entrypoint import Command, Flag, new_app, run_app

def greet(options, args):
    print(f"hello {options['name']}")

app = new_app("greeter", "v1.0.0")
app.commands.append(
    Command("greet", usage="Say hello", flags=[Flag("name", default="world")], action=greet)
)
run_app(app, sys.argv)
```

A command's action receives a dict of option values and the list of
remaining arguments. Every application understands `--help`, `--version`
(when a version is set) and a `help [command]` subcommand; help output is
wrapped at `App.help_line_width` (80 by default) and written to
`App.writer`, or standard output. `run_app` runs the application, logs any
error through the `logging` module and exits with the code that
`get_exit_code` picks. When the `GRUNTWORK_DEBUG` environment variable is
set, errors are logged with their stack trace.

## What it does not do

- It does not talk to any cloud service. `clikit.awserrors` provides only
  the error types; there are no functions that look up, scale or otherwise
  manage resources.
- The option parser in `clikit.entrypoint` is deliberately small: string,
  integer and boolean flags, subcommands and help. It has no environment
  variable bindings, no shell completion and no nested subcommands.
- The package installs no command of its own.

## Testing

The test suite uses pytest, installed through the `test` extra:

```
pip install -e ".[test]"
pytest
```