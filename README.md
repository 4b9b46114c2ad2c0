# learnkit

A handful of small, self-contained teaching examples:

- `learnkit.bst` is an unbalanced binary search tree that keeps distinct, ordered values.
- `learnkit.search` holds a linear search and a binary search over sequences.
- `learnkit.http_builder` has two HTTP request builders. One accepts any order of calls. The other checks its state and refuses invalid combinations.

There are no runtime dependencies.

## Binary search tree

```python
from learnkit.bst import BST

tree = BST.from_values([10, 5, 15, 3, 7, 12, 18])
tree.search(7)        # True
20 in tree            # False
tree.insert(20)
tree.height()         # 4
tree.min_value()      # 3, or None for an empty tree
tree.in_order()       # [3, 5, 7, 10, 12, 15, 18, 20]
list(tree)            # the same values, in order
len(tree)             # 8
```

Any mutually comparable values can be stored. Inserting a value that is
already in the tree leaves the tree unchanged, so `len()` counts distinct
values. `height()` counts the nodes on the longest path from the root to a
leaf, and is 0 for an empty tree.

## Searching

```python
from learnkit.search import linear_search, binary_search

linear_search([3, 5, 7], 5)               # 1
linear_search([3, 5, 7], 9)               # -1
binary_search([1, 3, 5, 7, 9, 11], 5)     # 2
binary_search([1, 3, 5, 7, 9, 11], 6)     # -1
```

Both functions return the index of the value, or `-1` when it is absent.
`linear_search` accepts any iterable and returns the index of the first
match. `binary_search` expects a sorted sequence; it halves the range until
two or fewer items remain and then compares those in order.

## HTTP builders

`HttpBuilder` lets you pair any content type with any body. Its
`content_type` and `body` attributes hold what was set, and each method
returns the same builder. For example, a url-encoded content type can be
combined with a JSON body:

```python
from learnkit.http_builder import HttpBuilder

request = HttpBuilder().add_url_content_type().add_json_body({"name": "Max", "age": 43})
request.content_type  # ContentType.URL_ENCODED
request.body          # '{"age":43,"name":"Max"}'
```

JSON bodies are stored as compact JSON text with sorted keys.

`BetterHttpBuilder` allows only consistent sequences: an empty builder, then
a content type, then a body of the matching kind. Each step returns a new
builder; any other step raises `BuilderStateError`.

```python
from learnkit.http_builder import BetterHttpBuilder, UrlEncoded

json_request = BetterHttpBuilder().add_json_content_type().add_json_body({"name": "Max", "age": 43})
url_request = BetterHttpBuilder().add_url_content_type().add_url_body(UrlEncoded("a=1&b=2"))
url_request.body      # 'a=1&b=2'
url_request.complete  # True

BetterHttpBuilder().add_url_content_type().add_json_body({})  # raises BuilderStateError
```

`BetterHttpBuilder` exposes read-only `content_type`, `body` and `complete`
properties. On both builders, `add_url_body` takes a `UrlEncoded` value and
raises `TypeError` for anything else.

`ContentType` names the content types: `URL_ENCODED`, `JSON` and `NOT_SET`.
`bad_http_builder_example()` returns an `HttpBuilder` whose url-encoded
content type contradicts its JSON body; `good_http_builder_example()` returns
the two requests `BetterHttpBuilder` allows, as a pair.

## Commands

```
learnkit-bst [INT ...]
learnkit-search [INT ...]
learnkit-http-builder
```

- `learnkit-bst` builds a tree (from the given integers, or from
  `10 5 15 3 7 12 18`), searches it for 7 and 20, inserts 20, and prints the
  height, the minimum and the in-order traversal.
- `learnkit-search` looks the given integers (by default 5 and 9, then 5 and
  6) up in `[3, 5, 7]` with the linear search and in `[1, 3, 5, 7, 9, 11]`
  with the binary search.
- `learnkit-http-builder` runs both builder examples and shows an invalid
  sequence being rejected.

## What it does not do

The tree is never rebalanced and has no removal. The builders only assemble a
content type and a body; they build no headers or URLs and send nothing over
the network.

## Tests

The tests use pytest and are installed with the `test` extra:

```
pytest
```