# algodrills

Classic algorithm exercises written as plain Python functions with no
dependencies beyond the standard library. The modules are grouped by topic:

- `algodrills.numbers`: `trailing_zeroes`, `bitwise_complement`,
  `find_complement`, `is_happy`, `my_pow`, `min_steps`, `num_water_bottles`,
  `difference_of_sum`, and decimal-string arithmetic with `add_strings` and
  `multiply`.
- `algodrills.matrices`: Pascal's triangle (`generate`), `lucky_numbers`,
  `construct_2d_array`, in-place `rotate_matrix` and `set_zeroes`, the spiral
  `generate_matrix`, and `num_magic_squares_inside`.
- `algodrills.arrays`: counting and scanning over lists of integers, such as
  `max_profit`, `max_profit_multiple`, `trap`, `contains_duplicate`,
  `contains_nearby_duplicate`, `majority_element`, `lemonade_change` and
  `average_waiting_time`.
- `algodrills.sequences`: in-place `rotate`, `two_sum`, `three_sum`, binary
  `search`, merge-sorting `sort_array`, `intersect`, `array_rank_transform`,
  `sort_people` and more.
- `algodrills.booking`: `BookingCalendar`, whose `book(start, end)` accepts a
  half-open interval unless it overlaps one already booked; the accepted
  intervals are available as `bookings`.
- `algodrills.strings`: character-level puzzles, such as
  `reverse_parentheses`, `convert` (zigzag), `longest_palindrome`,
  `convert_to_title`, `cells_in_range` and `find_kth_bit`.
- `algodrills.words`: word and letter counting, such as `is_anagram`,
  `can_construct`, `word_pattern`, `uncommon_from_sentences` and
  `count_of_atoms` (which raises `ValueError` on unbalanced brackets).
- `algodrills.linkedlist`: `ListNode` (iterable over its values),
  `build_list`, and operations such as `reverse_k_group`, `merge_nodes`,
  `spiral_matrix`, `modified_list` and `split_list_to_parts`.
- `algodrills.patterns`: `pattern1` to `pattern16`, each returning the pattern
  as a string of newline-terminated rows.
- `algodrills.recursion`: `sum_to`, `count_up` and `printer`, returning their
  results as numbers or lists.
- `algodrills.tree`: `Node`, `build_tree` from pre-order values with `-1` for
  an empty subtree, and `level_order`, which returns the values grouped by
  depth.

## Installation

```
pip install .
```

## Usage

```python
from algodrills.numbers import multiply, trailing_zeroes
from algodrills.strings import convert
from algodrills.booking import BookingCalendar
from algodrills.linkedlist import build_list, reverse_k_group
from algodrills.tree import build_tree, level_order

multiply("123", "456")           # "56088"
trailing_zeroes(150)             # 37
convert("PAYPALISHIRING", 3)     # "PAHNAPLSIIGYIR"

calendar = BookingCalendar()
calendar.book(10, 20)            # True
calendar.book(15, 25)            # False

list(reverse_k_group(build_list([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]

level_order(build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1]))
# [[1], [3, 5], [7, 11, 17]]
```

## Command-line tools

Print the square outline drawn with successive letters (`pattern16`) for a
size N. N may be given as an argument; without one, the command asks for it:

```
algodrills-patterns 5
algodrills-patterns
```

Build a binary tree from pre-order values, with `-1` marking an empty child,
and print it one level per line. The values are taken from the arguments, or
read from standard input when none are given:

```
algodrills-tree 1 3 7 -1 -1 11 -1 -1 5 17 -1 -1 -1
echo "1 3 7 -1 -1 11 -1 -1 5 17 -1 -1 -1" | algodrills-tree
```

## What it does not do

The pattern command prints only the lettered outline; the other patterns are
reached from Python. The tree command reads all its values at once rather than
prompting for each node.

## Running the tests

```
pip install .[test]
pytest
```