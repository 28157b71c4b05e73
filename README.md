# utilkit

A small set of everyday helpers. It uses only the standard library.

## Modules

- `utilkit.arr`: `contains(items, item)` checks membership. An element matches only if it has the same type as `item` and compares equal to it. So `True` does not match `1`, and `1` does not match `1.0`. An empty or `None` sequence gives `False`.
- `utilkit.binary`: fixed-width encoding and decoding through the `Codec` class.
  - A `Codec` is built for one byte order, `"little"` or `"big"`. `LITTLE_ENDIAN` and `BIG_ENDIAN` are ready-made instances.
  - `Codec.encode(*values)` writes each value one after another:
    - integers use the narrowest width of 1, 2, 4 or 8 bytes that holds them;
    - floats are written as doubles;
    - strings as UTF-8;
    - bytes as they are;
    - anything else as its text form.
  - Encoding stops at the first `None`.
  - `Codec.decode(data, *specs)` reads values back into a tuple. Each spec is a type name (`"int8"` … `"uint64"`, `"bool"`, `"float32"`, `"float64"`) or a byte count. Running out of data raises `DecodeError`.
  - There are per-width `encode_*` and `decode_to_*` methods and `fill_up_size`.
  - The module-level functions `encode`, `encode_by_length`, `decode` and `decode_to_string` use little-endian.
- `utilkit.bits`: converts integers to lists of 0/1 bits and back, and packs bits into bytes. The functions are:
  - `encode_bits`
  - `encode_bits_with_uint`
  - `decode_bits`
  - `decode_bits_to_uint`
  - `encode_bits_to_bytes`
  - `decode_bytes_to_bits`
- `utilkit.conv`: lenient conversion to bool, float64, float32, byte, rune, runes and bytes.
  - Each `to_*` function raises `ConversionError`, a `ValueError`, when a value cannot be converted.
  - Each `try_to_*` function returns a zero value in that case.
  - `to_runes` never fails. A value with no text form gives an empty list.
- `utilkit.linkedlist`: `LinkedList` is a thread-safe doubly linked list of `Node(uuid, value)` entries, keyed by uuid.
  - It has `push_front`, `push_back`, `insert_before`, `insert_after` and `remove`.
  - It has lookup and update by uuid.
  - It has a cursor driven by `set_current`, `poll` and `get_current_and_move_to_next`. `poll` wraps from the tail back to the head.
  - It supports `len()` and iteration.
  - Missing nodes and an exhausted cursor raise `LinkedListError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from utilkit.arr import contains
from utilkit.binary import Codec, encode, decode_to_string
from utilkit.bits import encode_bits, decode_bits, encode_bits_to_bytes, decode_bytes_to_bits
from utilkit.conv import to_bool, try_to_float64, ConversionError
from utilkit.linkedlist import LinkedList, Node

contains(["hello", "world"], "world")        # True

le = Codec("little")
le.encode_int(123456)                        # b'@\xe2\x01\x00'
le.decode_to_int(le.encode_int(123456))      # 123456
le.decode(le.encode(1, 2), "int8", "int8")   # (1, 2)
decode_to_string(encode("hehe haha"))        # 'hehe haha'

bits = encode_bits([], 99, 64)
decode_bits(bits)                            # 99
decode_bytes_to_bits(encode_bits_to_bytes(bits)) == bits   # True

to_bool("true")                              # True
try_to_float64("b")                          # 0.0
try:
    to_bool("hello")
except ConversionError as exc:
    print(exc)

items = LinkedList()
items.push_back(Node("a", 1), Node("b", 2))
items.poll().uuid                            # 'a'
items.poll().uuid                            # 'b'
items.poll().uuid                            # 'a' again: polling wraps around
[node.uuid for node in items]                # ['a', 'b']
```

## What it does not do

This is a library only. It has no command-line tool. It does no caching, no configuration loading and no storage of any kind. Conversions cover only the targets listed above. There is no general integer, string, time or map conversion.