# linkedds

A small singly linked list for Python, with operations at the front, at the back and at a given position.

## Installation

```
pip install linkedds
```

## Usage

```python
from linkedds.singly import SinglyLinkedList

items = SinglyLinkedList([1, 4, 2])
print(items)              # (head) 1 -> 4 -> 2 ->
print(len(items))         # 3

items.add_front(0)        # [0, 1, 4, 2]
items.add_back(5)         # [0, 1, 4, 2, 5]
items.add_at(3, 2)        # insert 3 at position 2: [0, 1, 3, 4, 2, 5]

print(items.peek_front()) # 0
print(items.peek_back())  # 5

items.pop_front()         # returns 0
items.pop_back()          # returns 5
items.remove_at(1)        # drops the 3

print(list(items))        # [1, 4, 2]
print(repr(items))        # SinglyLinkedList([1, 4, 2])
print(SinglyLinkedList()) # Empty
```

`SinglyLinkedList` takes any iterable of starting values (or none), supports `len()`,
iteration from head to tail, and `==` against another `SinglyLinkedList`.

### Behaviour at the edges

- `peek_front`, `peek_back`, `pop_front` and `pop_back` return `None` on an empty list.
- `remove_front` and `remove_back` do nothing on an empty list.
- `add_at(data, index)` accepts positions from `0` to `len(list)`. A negative position or
  one past that leaves the list unchanged.
- `remove_at(index)` accepts positions from `0` to `len(list) - 1`. A negative position or
  one past that leaves the list unchanged.
- Two lists are equal when they have the same length and hold equal values in the same
  order. Lists are mutable and therefore not hashable.

## Running the tests

```
pip install -e ".[test]"
pytest
```