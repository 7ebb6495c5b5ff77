# dsdrills

Classic data structures and short programming drills, written as plain,
readable Python. It has no dependencies beyond the standard library.

## What is inside

- `dsdrills.linkedlist`: a `LinkedList` of integers with sorted `insert`,
  `add_at_front`, `add_at_last`, `remove_at`, `last`, indexing, `len()`,
  iteration and `render`. Also the helpers `merge_into` (insert every value
  of one list into another in sorted order), `concatenate` (append one list
  to another) and `merge_sorted` (a new sorted list from two lists).
- `dsdrills.stack`: a `Stack` with `push`, `pop`, `peek`, `reversed` and
  `render`. Iteration runs from the top down.
- `dsdrills.fifo`: a `Queue` with `enqueue`, `dequeue`, `head`, `back`,
  `is_empty`, `remove_negatives` and `render`.
- `dsdrills.doubly`: a `DoublyList` with `add_at_front`, `add_at_rear`,
  `render_from_front` and `render_from_rear`. It supports both `iter()`
  and `reversed()`.
- `dsdrills.exercises`: small drills. It covers `seq_sum`, `rec_func`,
  `find_pythagorean_triplet`, `is_rising`, `matmul2` (2×2 matrices),
  `inner_product`, `orthogonalize` (Gram–Schmidt on two vectors),
  `mexican_wave`, `coin_tosses`, `streaks`, `random_below` and
  `s3_elements`.
- `dsdrills.people`: the dataclasses `Person` (`describe`) and `Birthday`
  (`date_of_birth`). This is a small inheritance example.
- `dsdrills.demo`: `run_demo()` returns the walk-through text of all the
  data structures. `main()` prints it.

Reading an empty structure raises `IndexError`. So does indexing past the
end of a linked list.

## Installation

```
pip install .
```

## Usage

```python
from dsdrills.linkedlist import LinkedList, merge_sorted
from dsdrills.stack import Stack
from dsdrills.fifo import Queue
from dsdrills.exercises import mexican_wave

numbers = LinkedList()
for value in (8, 4, 2, 6, 5):
    numbers.insert(value)        # kept in ascending order
print(list(numbers))             # [2, 4, 5, 6, 8]
print(numbers.render())          # 2 -> 4 -> 5 -> 6 -> 8 -> END ...

print(list(merge_sorted(LinkedList([3, 1]), LinkedList([2]))))  # [1, 2, 3]

stack = Stack([1, 3, 5])
print(stack.peek(), len(stack))  # 5 3

queue = Queue([2, -4, 6, -8])
queue.remove_negatives()
print(list(queue))               # [2, 6]

print(mexican_wave("hi"))        # ['Hi', 'hI']
```

## Demo

To print the walk-through of all the data structures:

```
dsdrills-demo
```

## Tests

```
pip install .[test]
pytest
```