# menagerie

A collection of small, self-contained data structures, algorithms and
command-line tools. Nothing beyond the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

| Module | What it offers |
| --- | --- |
| `menagerie.gcd` | `gcd(n, m)`, the greatest common divisor of two positive integers (raises `ValueError` on zero) |
| `menagerie.gcd_server` | `application`, a WSGI app; `handle_get_form()` and `handle_post_gcd(body)` |
| `menagerie.basic_router` | `BasicRouter`, `Request`, `Response`, `not_found_response()`: map exact URLs to callbacks, with a 404 fallback |
| `menagerie.fifo` | `Queue` (first-in, first-out, built from two stacks; `pop` raises `IndexError` when empty) and `CharQueue` (single characters only) |
| `menagerie.interval` | `Interval`, half-open ranges ordered only when they do not overlap; `compare` returns -1, 0, 1 or `None` |
| `menagerie.ascii` | `Ascii`, bytes checked to be ASCII, and `NotAsciiError`, which carries the rejected bytes in `data` |
| `menagerie.complex` | `Complex`, a complex number over any numeric type with rectangular and polar formatting |
| `menagerie.binary_tree` | `BinaryTree`, `TreeNode`, `make_node`: an unbalanced ordered tree with in-order iteration |
| `menagerie.gap_buffer` | `GapBuffer`, a sequence with cheap insertion and removal at a cursor |
| `menagerie.json_value` | `Json`, `JsonKind` and `json_value`, building JSON value trees from Python data |
| `menagerie.copy_tool` | `copy_to`, `copy_into`, `copy_dir_to`, `dwim_copy`: recursive copies that keep symbolic links as links |
| `menagerie.grep` | `grep(target, lines)`, a generator of the lines that contain a string |
| `menagerie.echo_server` | `make_server(addr)`, `echo_main(addr)` and `EchoHandler`, a threaded TCP echo server |
| `menagerie.http_get` | `http_get(url, out)`, copying a response body to a binary stream |
| `menagerie.fern_sim` | `Terrarium`, `Fern`, `Stem` and friends, a toy simulation of fern growth |

A few examples:

```python
from menagerie.gcd import gcd
gcd(14, 15)                      # 1

from menagerie.fifo import Queue
q = Queue()
q.push("P"); q.push("D")
q.pop()                          # "P"

from menagerie.gap_buffer import GapBuffer
buf = GapBuffer()
buf.insert_iter("Lord of the Rings")
buf.set_position(12)
buf.insert_iter("Onion ")
buf.get_string()                 # "Lord of the Onion Rings"

from menagerie.complex import Complex
z = Complex(0.0, 2.0)
f"{z}"                           # "0 + 2i"
f"{z:#}"                         # "2 ∠ 90°"

from menagerie.json_value import json_value, JsonKind
doc = json_value({"name": "fern", "height": 4})
doc.kind is JsonKind.OBJECT      # True
doc.value["height"].value        # 4.0
```

## Commands

Each command exits with status 1 and a message on standard error when
something goes wrong.

Greatest common divisor of the unsigned numbers given on the command line:

```
menagerie-gcd 42 56
```

A small web page that computes a GCD from a form, served on localhost:3000.
`GET /` shows the form, `POST /gcd` answers it, every other request gets 404:

```
menagerie-gcd-server
```

Copy files and directories, symbolic links included; with two arguments the
source is copied into the destination if that is a directory and onto it
otherwise; with more, the last must be a directory:

```
menagerie-copy SOURCE... DESTINATION
```

Print lines that contain a string, from files or, with no files, from
standard input:

```
menagerie-grep PATTERN FILE...
```

A TCP echo server on 127.0.0.1:17007, one thread per connection:

```
menagerie-echo-server
```

Fetch a URL and write its body to standard output; a status outside 2xx is
reported as an error:

```
menagerie-http-get URL
```

## What the package does not do

- `json_value` builds value trees only; it neither parses JSON text nor
  writes it out.
- `Terrarium.load` only checks that the file exists; it does not read it,
  and always gives a terrarium holding one fiddlehead fern.
  `Terrarium.apply_sunlight` unfurls every stem whatever the duration.
- The echo server and the GCD web page listen on fixed addresses; the
  commands take no options to change them (call `echo_main(addr)` or mount
  `application` in another WSGI server for that).
- Copying symbolic links works only on POSIX systems.