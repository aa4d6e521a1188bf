# coursekit

coursekit collects small teaching programs. Most of them are built around a
few classic data structures, and the rest are short introductory console
exercises. The package depends only on the standard library.

## Data structures

- `coursekit.stock.Stock` is a frozen record with the fields `name`, `symbol`
  and `price`. Equality, ordering and hashing all use `symbol` alone.
  `str(stock)` gives three lines: the name, the symbol and the price.
  `read_stocks(path)` reads a file of line triples (name, symbol, price) and
  stops when the data runs out or a record is malformed.
- `coursekit.avl_tree.AVLTree` is a self-balancing binary search tree.
  - It supports `insert`, `search`, `height` and `clear`.
  - Equal items go into the right subtree.
  - `search` returns the stored value equal to the item, or `None`.
  - `inorder()`, `preorder()` and `postorder()` yield `(value, balance)`
    pairs. `format_traversal` renders those pairs as text.
- `coursekit.sorted_list.SortedAList` is a growable list. Its capacity starts
  at 10 or more and grows by 10 whenever the list is full.
  - It offers `randomise(rng)`, `selection_sort`, `quick_sort` and `heap_sort`.
  - Each sort takes `descending=False` or `descending=True`.
  - It also has `len()`, iteration, `capacity()`, `is_full()` and
    `is_empty()`.
- `coursekit.huffman` covers Huffman trees built from weighted stocks.
  - `read_weighted_stocks(path)` reads the input file.
  - `build_huffman_tree(stocks, freqs)` builds the tree. At each step it joins
    the two lightest nodes and puts the lightest on the left.
  - `leaf_codes(root)` gives the code for each leaf, and
    `encode_sentence(root)` concatenates all the codes.
  - `decode(root, sentence)` and `format_code_table(root)` handle decoding and
    display.

```python
from coursekit.avl_tree import AVLTree

tree = AVLTree()
for n in (30, 10, 20):
    tree.insert(n)
print(list(tree.inorder()), tree.height())   # [(10, 0), (20, 0), (30, 0)] 2
```

## Exercise helpers

- `coursekit.recipe`: `greeting()`, `recipe_text()` and
  `scaled_ingredients(dozens)`. Scaling works in whole batches of four dozen.
- `coursekit.shipping`: `shipping_cost(weight)` and `total_cost(price, weight)`.
  Both use a weight-tiered shipping rate and a 4.225% sales tax.
- `coursekit.grades`: `weighted_scores`, `final_grade` and `letter_grade`.
  The weights are assignments 15%, tests 50%, exam 30% and participation 5%.
- `coursekit.morra`: `MorraRound` (with `total()` and `outcome()`),
  `play_round(rng)`, `play_series(rng, games)` and `series_winner`.
- `coursekit.pizza.Order`: `add(letter)` returns the item's price and raises
  `ValueError` for letters that are not on the menu. `total` and `len()` give
  the order's total and item count.
- `coursekit.circle.circumference(radius)` raises `ValueError` unless the
  radius is positive.
- `coursekit.arrays`: `echo_sum(numbers)` and `delete_repeats(chars)`. The
  latter returns the remaining items and a record of each removal.

## Commands

| Command | What it does |
|---|---|
| `coursekit-avl [STOCKS] [SAVE]` | Prints the traversals and height of a tree of 10 random integers. Then runs an interactive menu (look up, insert, list stocks) over a tree read from `Stock.txt`. On quitting it writes the listing to `Stock_BF.txt`. |
| `coursekit-sort [STOCKS]` | Loads `Stock.txt` and adds one more stock. Then shuffles the list and sorts it with quick, selection and heap sort in both directions, printing each state. |
| `coursekit-huffman [FILE] [BITS]` | Builds a tree from `HuffmanStocks.txt` and prints each stock's code. Then decodes `BITS`, or the concatenation of all codes when `BITS` is not given. |
| `coursekit-recipe [hello\|recipe\|scale] [DOZENS]` | Prints the greeting, prints the recipe, or scales the ingredients. When `DOZENS` is missing, the number of dozens is asked for on standard input. |
| `coursekit-shipping [PRICE WEIGHT]` | Prints the total cost of an item. It prompts for any values that are not given. |
| `coursekit-grades [A T E P] [--simple]` | Prints the weighted scores, the final grade and the letter grade. `--simple` leaves out the letter grade. It prompts when no scores are given. |
| `coursekit-morra [round\|series] [--seed N] [--games N] [--output FILE]` | `round` writes one game's result to `result.txt`. `series` prints every game and writes the summary to `morraSeriesResults.txt`. |
| `coursekit-pizza` | Runs the ordering menu on standard input until `E` is entered. |
| `coursekit-circle [RADIUS]` | Prints the circumference of a circle. It prompts until it gets a positive radius. |
| `coursekit-arrays [echo\|repeats]` | `echo` sums ten numbers and echoes them back. `repeats` deletes repeated characters and shows each step. |

`HuffmanStocks.txt` has the following layout:

1. A count on the first line.
2. For each stock, a name line and a symbol line.
3. After those two lines, the price and the frequency, separated by
   whitespace.

## What it does not do

- The AVL tree has no removal operation.
- The Huffman module builds codes for stock records only. It does not
  compress arbitrary text or files, and it does not save trees or codes.

## Tests

```
pip install -e .[test]
pytest
```