# algokit

A collection of small algorithmic routines that each do one job. It covers
searching sorted, rotated and mountain-shaped sequences, in-place list
operations, integer arithmetic puzzles, string transformations and palindrome
checks.

The package is pure Python and has no runtime dependencies. It is a library
only: it has no command-line interface, and every routine is used by importing
it from its module.

## Installation

```
pip install algokit
```

With the test dependencies:

```
pip install "algokit[test]"
```

## Modules

### `algokit.search`

- `find_pivot(nums)`: index of the largest element of a rotated ascending
  sequence. A sequence that is not rotated gives its last index; an empty one
  gives `-1`.
- `binary_search(nums, target, start=0, end=None)`: search the inclusive slice
  `start..end` of an ascending sequence; `-1` if absent.
- `search_rotated(nums, target)`: index of `target` in a rotated ascending
  sequence of distinct values, or `-1`.
- `search_range(nums, target)`: first and last index of `target` in an
  ascending sequence, as a tuple; `(-1, -1)` if it does not occur.
- `search_insert(nums, target)`: index of `target`, or where it would be
  inserted to keep the order.
- `find_peak_element(nums)`: index of an element larger than its neighbours.
  Raises `ValueError` on an empty sequence.
- `missing_number(nums)`: the value of `0..len(nums)` that is not in `nums`.
- `peak_index_in_mountain_array(arr)`: index of the first largest element, or
  `-1` for an empty sequence.

### `algokit.arrays`

Functions described as in-place change the list they are given.

- `remove_element(nums, val)`: moves every value other than `val` to the
  front in order and returns how many there are.
- `plus_one(digits)`: adds one to a number held as a list of decimal digits,
  in place, and returns the list.
- `sort_colors(nums)`: sorts a list of 0s, 1s and 2s in place.
- `merge(nums1, m, nums2, n)`: replaces `nums1` with the sorted merge of
  `nums1[:m]` and `nums2[:n]`.
- `move_zeroes(nums)`: moves zeros to the end in place, keeping the order of
  the other values.
- `find_duplicate(nums)`: the first value seen a second time, or `-1`.
- `reverse_string(chars)`: reverses a list of characters in place.
- `sorted_squares(nums)`: the squares of the values in ascending order.
- `find_middle_index(nums)`: the leftmost index whose left and right sums are
  equal, or `-1`.
- `final_position_of_snake(n, commands)`: follows `UP`/`DOWN`/`LEFT`/`RIGHT`
  commands from cell 0 of an `n x n` grid and returns `row * n + column`.
  Only the first letter of each command matters; unknown commands are ignored.

### `algokit.numbers`

- `divide(dividend, divisor)`: integer division truncating toward zero;
  `divide(-2**31, -1)` is clamped to `2**31 - 1`. Raises `ZeroDivisionError`
  when `divisor` is zero.
- `add_binary(a, b)`: adds two binary strings. The result is at least as long
  as the longer operand. Raises `ValueError` on a digit other than 0 or 1.
- `integer_sqrt(x)`: the floor of the square root. Raises `ValueError` for a
  negative `x`.
- `largest_number(nums)`: arranges non-negative integers so their
  concatenation is as large as possible, returned as a string (`"0"` when all
  are zero). Raises `ValueError` on an empty input.
- `count_primes(n)`: the number of primes strictly less than `n`.
- `count_bits(n)`: the number of set bits of every integer from `0` to `n`.
  Raises `ValueError` for a negative `n`.

### `algokit.strings`

- `str_str(haystack, needle)`: index of the first occurrence of `needle`, or
  `-1`.
- `length_of_last_word(s)`: length of the last space-separated word.
- `is_vowel(ch)`: whether a single character is `a`, `e`, `i`, `o` or `u` in
  either case.
- `reverse_vowels(s)`: reverses the order of the vowels, leaving other
  characters in place.
- `find_min_difference(time_points)`: the smallest gap in minutes between
  `"HH:MM"` times on a 24-hour clock. Raises `ValueError` on an empty input.
- `remove_adjacent_duplicates(s)`: repeatedly removes pairs of equal adjacent
  characters.
- `remove_occurrences(s, part)`: removes occurrences of `part` until none is
  left.
- `decode_message(key, message)`: decodes with the substitution table given by
  the first distinct non-space characters of `key`; spaces are kept. Raises
  `ValueError` on a character the key does not map.
- `possible_string_count(word)`: the number of strings that could have been
  meant if at most one key was held down too long.

### `algokit.palindromes`

- `is_palindrome(s)`: whether `s` reads the same both ways, looking only at
  ASCII letters and digits and ignoring case.
- `count_palindromic_substrings(s)`: the number of palindromic substrings,
  counted by position.
- `is_palindrome_range(s, i, j)`: whether `s[i..j]` (inclusive) is a
  palindrome; an empty range counts as one.
- `valid_palindrome_with_one_deletion(s)`: whether `s` becomes a palindrome
  after deleting at most one character.

## Example

```python
from algokit.search import search_rotated, search_range
from algokit.numbers import divide, largest_number
from algokit.palindromes import is_palindrome

search_rotated([4, 5, 6, 7, 0, 1, 2], 0)          # 4
search_range([5, 7, 7, 8, 8, 10], 8)             # (3, 4)
divide(-2**31, -1)                               # 2147483647
largest_number([3, 30, 34, 5, 9])                # "9534330"
is_palindrome("A man, a plan, a canal: Panama")  # True
```

## Running the tests

```
pytest
```