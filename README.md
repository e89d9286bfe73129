# uintlist

A small singly linked list that holds unsigned 32-bit integers. You can
append, prepend and insert at an index. You can find a value, remove by
index and clear the whole list. A cursor can start at any position and walk
forward from there.

## Installation

```
pip install uintlist
```

To run the test suite:

```
pip install "uintlist[test]"
pytest
```

## Usage

```python
from uintlist.linked_list import LinkedList

numbers = LinkedList([1, 2, 3])
numbers.append(4)          # 1 2 3 4
numbers.prepend(0)         # 0 1 2 3 4
numbers.insert(2, 10)      # 0 1 10 2 3 4

len(numbers)               # 6
list(numbers)              # [0, 1, 10, 2, 3, 4]
numbers.find(10)           # 2
numbers.find(99)           # 6 (not present: the length of the list)

numbers.remove(0)          # returns 0; list is now 1 10 2 3 4
numbers.clear()            # empty
```

`LinkedList(items)` builds a list by appending each item in order. Calling
`LinkedList()` gives an empty list.

`insert(index, data)` places `data` at position `index`. Index 0 always
works. Any other index may be at most the current length, so
`insert(len(lst), x)` adds `x` at the end.

`remove(index)` deletes the element at `index` and returns its value.

## Cursors

`cursor(index=0)` returns a `Cursor` on the element at `index`. The cursor
has three attributes:

- `index` is its position.
- `data` is the value at that position.
- `linked_list` is the list it belongs to.

`advance()` moves the cursor one element forward and returns `True`. When
the cursor is already on the last element, `advance()` returns `False` and
the cursor does not move.

```python
from uintlist.linked_list import LinkedList

numbers = LinkedList([5, 6, 7])
cursor = numbers.cursor(1)
cursor.index, cursor.data   # (1, 6)
cursor.advance()            # True -> (2, 7)
cursor.advance()            # False, still at (2, 7)
```

Iterating over a cursor yields the value at its current position and then
every following value. The cursor moves forward as it goes:

```python
list(numbers.cursor(0))     # [5, 6, 7]
```

Cursors are not protected against changes to the list. Do not modify a list
while a cursor on it is in use.

## Values and errors

Only integers from 0 to `UINT_MAX` (2**32 - 1) are stored. `UINT_MAX` is
available from `uintlist.linked_list`.

- A value outside that range raises `ValueError`.
- A value that is not an `int`, including a `bool`, raises `TypeError`.
  This check applies when storing values; `find` does no such check.
- An index that is not an `int` raises `TypeError`.
- A negative index raises `IndexError`.
- An out-of-range index raises `IndexError` for `insert`, `remove` and
  `cursor`. This includes `remove` or `cursor` on an empty list.