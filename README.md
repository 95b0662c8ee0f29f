# dsakit

A small library of classic data structures and algorithms in plain Python:
bounded stacks and circular queues, singly and circular linked lists,
polynomials held as term lists, binary search trees, sorting, searching,
inversion counting, expression evaluation and depth-first search.

It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Overview

| Module | What it holds |
| --- | --- |
| `dsakit.stacks` | `Stack` with a fixed capacity, `StackOverflowError`, `StackUnderflowError`, `reverse_string`, `sort_with_stacks` |
| `dsakit.expressions` | `evaluate_postfix`, `evaluate_prefix`, `infix_to_postfix`, `ExpressionError` |
| `dsakit.queues` | `CircularQueue` with a fixed capacity, `QueueFullError`, `QueueEmptyError` |
| `dsakit.searching` | `binary_search`, `linear_search` |
| `dsakit.inversions` | `count_inversions`, `count_inversions_brute_force` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsakit.linked_list` | `LinkedList` with 1-based positional insert and delete |
| `dsakit.circular_list` | `CircularList` and the `josephus` elimination game |
| `dsakit.polynomial` | `Term` and `Polynomial` with addition and multiplication |
| `dsakit.trees` | `TreeNode`, `BinarySearchTree`, `preorder`, `inorder`, `postorder`, `tree_size` |
| `dsakit.graphs` | `depth_first_search` over an adjacency matrix |

## Examples

### Stacks

```python
from dsakit.stacks import Stack, reverse_string, sort_with_stacks

stack = Stack(5)          # capacity defaults to 100
stack.push(20)
stack.push(30)
stack.push(40)
print(list(stack))        # top first: [40, 30, 20]
print(stack.peek())       # 40
print(stack.pop())        # 40

print(reverse_string("hello"))                 # olleh
print(sort_with_stacks([10, 50, 30, 20, 40]))  # [10, 20, 30, 40, 50]
```

Pushing onto a full stack raises `StackOverflowError`; popping or peeking
at an empty one raises `StackUnderflowError` (a subclass of `IndexError`).
A capacity below 1 raises `ValueError`.

### Expressions

Operands of the evaluators are single decimal digits; the operators are
`+ - * / ^`. Division truncates toward zero. Whitespace is ignored.

```python
from dsakit.expressions import evaluate_postfix, evaluate_prefix, infix_to_postfix

evaluate_postfix("23*4+")     # 10
evaluate_prefix("+*234")      # 10
infix_to_postfix("a+b*c")     # "abc*+"
```

`infix_to_postfix` accepts ASCII letters and digits as operands and ranks
the operators, lowest first, as `- + / * ^`. Malformed input, unmatched
parentheses, division by zero and expressions that do not reduce to a single
value raise `ExpressionError` (a subclass of `ValueError`).

### Circular queue

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(5)  # capacity defaults to 5
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()           # 1
list(queue)               # [2]
```

Enqueueing onto a full queue raises `QueueFullError`; dequeueing from an
empty one raises `QueueEmptyError` (a subclass of `IndexError`).

### Searching, inversions and sorting

```python
from dsakit.searching import binary_search, linear_search
from dsakit.inversions import count_inversions
from dsakit.sorting import quick_sort

binary_search([12, 14, 15, 16, 18, 20], 16)   # True (input must be sorted)
linear_search([23, 45, 12, 67, 34], 5)        # False
count_inversions([7, 12, 13, 14, 15, 11, 9])  # 10
quick_sort([3, 1, 2])                         # [1, 2, 3]
```

Every sort takes any iterable and returns a new ascending list, leaving the
input unchanged.

### Linked lists

```python
from dsakit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.insert(1, 0)       # positions start at 1
items.append(4)
items.reverse()
print(items)             # 4, 3, 2, 1, 0
print(3 in items, len(items))   # True 5
items.delete(1)          # 4
items.pop()              # 0

other = LinkedList([7, 8])
items.merge(other)       # other is left empty
```

`reverse` relinks the nodes; `reverse_values` keeps the nodes and reverses
their values through a stack. Positions out of range raise `IndexError`.

### Circular list and the Josephus problem

```python
from dsakit.circular_list import CircularList, josephus

ring = CircularList([1, 2, 3])
print(ring)              # 1, 2, 3

josephus(["Ann", "Bob", "Cid", "Dee"], 2)
# (['Bob', 'Dee', 'Cid'], 'Ann')
```

`josephus` returns the names in the order they were eliminated and the
survivor. A step below 1 or an empty list of names raises `ValueError`.

### Polynomials

Terms may be given as `Term` objects or `(coefficient, exponent)` pairs.
Addition merges two term lists that are in descending exponent order.

```python
from dsakit.polynomial import Polynomial, Term

p = Polynomial([Term(3, 2), Term(2, 1)])
q = Polynomial([(1, 1), (1, 0)])
print(p + q)                          # 3x^2 + 3x^1 + 1x^0
print((p * q).format("compact"))      # 3x^3+5x^2+2x^1
print(p.format("parenthesised"))      # 3(x^2)+2(x^1)
```

`format` accepts the styles `plain` (the default), `compact` and
`parenthesised`; any other style raises `ValueError`.

### Trees and graphs

```python
from dsakit.trees import BinarySearchTree, TreeNode, preorder, tree_size
from dsakit.graphs import depth_first_search

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
tree.inorder()           # [20, 40, 50, 70]
40 in tree               # True

root = TreeNode(2, TreeNode(3, TreeNode(5)), TreeNode(4))
preorder(root)           # [2, 3, 5, 4]
tree_size(root)          # 4

depth_first_search([[0, 1, 1], [1, 0, 0], [1, 0, 0]], 0)   # [0, 1, 2]
```

`BinarySearchTree` ignores duplicates: `insert` and `delete` return whether
the tree changed.

## What it does not do

This is a library only. It has no command-line program and no interactive
menus; values are passed to the functions and classes directly rather than
read from the terminal.