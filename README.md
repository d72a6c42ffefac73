# algolab

Classic algorithms and data structures in plain Python, with no third-party
dependencies: sorting, CPU scheduling, memory allocation, a payroll table,
array exercises, hash tables, expression handling, a binary search tree,
linked structures, graph traversals and the Ulam spiral of primes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.sorting` | `bubble_sort`, `insertion_sort`, `recursive_insertion_sort`, `selection_sort`, `recursive_selection_sort`, `quick_sort`, `hoare_quick_sort`, `quick_sort_chars`, `merge_sort`, `heap_sort`, `insertion_heap_sort`, `make_heap`, `iterative_heap_sort` |
| `algolab.scheduling` | `fcfs`, `round_robin`, `shortest_job_first`, each returning a `ScheduleResult` of `ProcessStats` |
| `algolab.memory` | `first_fit`, `best_fit`, `worst_fit`, `format_allocations` |
| `algolab.payroll` | `Employee`, `payroll_report` |
| `algolab.arrays` | `linear_search`, `find_in_matrix`, `diagonal_sums`, `reverse_number`, `fibonacci_upto`, `lcs_length` |
| `algolab.hashing` | `PrimeHashTable`, `CollisionError`, `is_prime`, `next_prime`, `linear_probe_table`, `WordHashTable`, `Probing`, `SearchResult` |
| `algolab.expressions` | `infix_to_postfix`, `evaluate_digit_postfix`, `evaluate_postfix`, `is_balanced` |
| `algolab.bst` | `BinarySearchTree` |
| `algolab.linked` | `LinkedList`, `DoubleStack`, `StackOverflowError`, `StackUnderflowError` |
| `algolab.graph` | `adjacency_matrix`, `depth_first`, `breadth_first` |
| `algolab.ulam` | `prime_sieve`, `ulam_value`, `ulam_spiral`, `main` |

Some notes on behaviour:

- Every sort takes any iterable and returns a new list; `quick_sort_chars`
  takes and returns a string. `make_heap` returns the items arranged as a
  max-heap.
- `fcfs` takes burst and arrival times; `round_robin` takes burst times (all
  processes arrive at time zero) and a positive quantum; `shortest_job_first`
  takes `(pid, arrival, burst)` triples and lists its result ordered by
  arrival. `ScheduleResult` offers `average_waiting()`,
  `average_turnaround()` and `format_table()`; each `ProcessStats` has a
  `completion` property.
- The fit functions return, per request, the index of the block used or
  `None`; `format_allocations` renders that as a table.
- `Employee` derives `hra`, `da`, `income_tax`, `gross` and `net_pay` from
  the basic salary; `payroll_report` renders them as a table.
- `PrimeHashTable` raises its capacity to a prime and raises
  `CollisionError` when a key's slot holds a different key; `remove` raises
  `KeyError` for a missing key. `WordHashTable` hashes words by their first
  letter, with `Probing.LINEAR` or `Probing.QUADRATIC`, and `search` returns a
  `SearchResult` holding the slot found and the number of comparisons made.
- `evaluate_digit_postfix` and `evaluate_postfix` truncate division toward
  zero and raise `ValueError` on malformed input.
- `BinarySearchTree` puts equal values on the left, supports `in`, `len()`
  and iteration (ascending), and has `preorder()`, `inorder()`,
  `postorder()`, `minimum()` and `delete()`.
- `DoubleStack` holds two stacks sharing `capacity` slots (5 by default) and
  raises `StackOverflowError` or `StackUnderflowError`.

## Examples

```python
from algolab.sorting import merge_sort
from algolab.scheduling import round_robin
from algolab.expressions import infix_to_postfix, evaluate_digit_postfix
from algolab.bst import BinarySearchTree

merge_sort([34, 7, 12, 90, 51])          # [7, 12, 34, 51, 90]

result = round_robin([10, 5, 8], quantum=2)
print(result.format_table())
print(result.average_waiting())

postfix = infix_to_postfix("(1+2)*3")     # "12+3*"
evaluate_digit_postfix(postfix)          # 9

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
tree.inorder()                           # [20, 40, 50, 70]
```

## Command line

Print the Ulam spiral of primes, first with numbers and then with `#` glyphs:

```
algolab-ulam 9
```

The side length defaults to 9; an even length is reduced by one.

## What it does not do

Apart from `algolab-ulam`, the package has no commands and no interactive
prompts or menus: everything else is a library API that returns values (or,
for the `format_*` and `payroll_report` functions, strings to print).
Nothing is stored between runs.