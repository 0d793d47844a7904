# cipherbox

Classical ciphers for lowercase Latin text, with interactive command-line
tools, plus a set of small modules showing everyday patterns: flag parsing,
file handling, threads and queues, signals and file watching.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Ciphers

### Caesar shift (`cipherbox.caesar`)

Every letter `a`–`z` is shifted by a key. Messages hold lowercase letters
only, with no spaces; any other character raises `ValueError`.

```python
from cipherbox import caesar

caesar.encrypt("jesuisvenujaivujaivaincu", 8)   # 'rmacqadmvcriqdcriqdiqvkc'
caesar.decrypt("rmacqadmvcriqdcriqdiqvkc", 8)   # 'jesuisvenujaivujaivaincu'
caesar.shifted_alphabet(1)                      # 'bcdefghijklmnopqrstuvwxyza'
for key, candidate in caesar.brute_force("rmacqadmvcriqdcriqdiqvkc"):
    print(key, candidate)                       # keys 1 to 25
```

Interactive tool (crypt, decrypt, attack by trying every key, or show an
example for every key):

```
cipherbox-caesar
```

### Substitution (`cipherbox.substitution`)

The key is a table mapping each letter to another; `substitution.KEY` is the
built-in table and the default for `encrypt` and `decrypt`. Spaces in the
input are dropped, and characters missing from the table produce nothing.

```python
from cipherbox import substitution

table = {"a": "r", "b": "f", "c": "x"}
substitution.invert_key(table)                  # {'r': 'a', 'f': 'b', 'x': 'c'}
substitution.encrypt("ab c", table)             # 'rfx'
substitution.group_letters("abcdefghij", 5)     # 'abcde fghij '
```

`group_letters` puts a space after every full block; a size below 1 raises
`ValueError`.

Interactive tool, using the built-in table:

```
cipherbox-substitution
```

### Vigenère (`cipherbox.vigenere`)

The key is written under the message, repeated as needed, and each letter is
added to (or subtracted from) the key letter below it, modulo 26. Spaces in
the key are removed by `clean_key`; spaces in the message are kept and still
use up a key letter. Other characters, or a key with no letters, raise
`ValueError`.

```python
from cipherbox import vigenere

vigenere.encrypt("abc", "abc")   # 'ace'
vigenere.decrypt("ace", "abc")   # 'abc'
vigenere.clean_key("a b c")      # 'abc'
```

Interactive tool:

```
cipherbox-vigenere
```

### What the cipher tools do not do

The substitution tool always uses the built-in table; it cannot take a table
of your own. There is no frequency-analysis attack for the substitution or
Vigenère ciphers: only the Caesar tool has an attack, and it simply tries all
25 keys. Uppercase letters, digits and punctuation are not handled.

## Command-line tools

- `cipherbox-flags` – shows its raw arguments, then parses `-word`, `-numb`,
  `-fork` and `-svar` (one or two dashes; parsing stops at the first
  positional argument or `--`). `-h` prints the usage. In code,
  `cipherbox.flags.parse_flags(argv)` returns a `FlagOptions` record.

  ```
  cipherbox-flags -word=opt -numb=7 -fork -svar=flag
  ```

- `cipherbox-subcommand` – takes `foo` (with `-enable` and `-name`) or `bar`
  (with `-level`). `cipherbox.subcommands.parse_subcommand(argv)` returns
  `FooOptions` or `BarOptions` and raises `ValueError` for any other command.

  ```
  cipherbox-subcommand foo -name=demo
  cipherbox-subcommand bar -level=12
  ```

- `cipherbox-watch [PATH]` – logs every write to a file (default `/tmp/foo`)
  until interrupted. In code, `cipherbox.watcher.watch(path, callback)` is a
  context manager that calls `callback(path)` on each write, through a
  `FileModifiedHandler`; a missing path raises `FileNotFoundError`.

- `cipherbox-concurrency [DEMO]` – runs one of the queue-and-thread
  demonstrations (`channel`, `buffer`, `close`, `range`, `goroutine`,
  `goroutine2`, `select`) or all of them. Some of them sleep for several
  seconds.

- `cipherbox-counter [sequential|unlocked|locked] [--delay SECONDS]` – three
  workers each increment a shared `Counter` ten times, with random pauses;
  without the lock, updates are lost.

- `cipherbox-signals` – waits for SIGINT or SIGTERM and reports which arrived.

- `cipherbox-fileops [DEMO]` – runs the file demonstrations (`error`,
  `custom`, `stat`, `read`, `write`) or all of them. `read` reads
  `data.txt` and `write` creates `file1.txt` in the current directory.

## Library modules

- `cipherbox.calculation` – `calc(a, b)` returns the sum and difference;
  `Calculator.add` returns a sum and keeps it in `calculs`.
- `cipherbox.paths` – `go_split`, `trim_prefix`, `cxl_device_path`,
  `domain_bus_device` and `pci_root_path`.
- `cipherbox.concurrency` – `fibonacci`, `fibonacci_via_queue`,
  `stream_until_closed`, `buffered_exchange` (raises `DeadlockError` when
  more values are sent than the buffer holds), `first_ready` and
  `run_interleaved`.
- `cipherbox.counter` – `Counter` and `run_workers`.
- `cipherbox.signals` – `wait_for_signal(signums)`.
- `cipherbox.sequences` – `Slice`, a window over a list that writes through
  to it and moves to its own storage when appends outgrow the list, and the
  `Device` record.
- `cipherbox.maps` – `card_id`, `has_card`, `nested_scores` and the
  `Employee` record.
- `cipherbox.flow` – `defer_trace`, `lifo_trace`, `full_name` and the
  mutable `Box`.
- `cipherbox.basics` – `greeting`, `classify`, `describe_sum`,
  `nested_break_trace`, `count_until` and `powers_of_two`.
- `cipherbox.fileops` – `open_file_name`, `read_text`, `write_text` and
  `path_exists`.