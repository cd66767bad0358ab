# pholi

Building blocks for working with a partial higher-order logic, a logic
with three truth values: false (`ff`), true (`tt`) and error (`ee`).

- `pholi.tokenizer`: `Tokenizer` splits the text of a theory file into
  `Symbol` objects. Each symbol has a `kind` (a `TokenKind`), a
  `location` (a `Location`) and, for variables and scan errors, an
  `attribute` holding the matched text. Whitespace and `//` and `/* */`
  comments are skipped; keywords such as `def`, `thm`, `axiom`, `struct`,
  `let` and `in` get their own kinds.
- `pholi.location`: `Location`, a zero-based line and column, printed
  one-based as `line/column`.
- `pholi.uniquenames`: `UniqueNameStack` hands out display names for
  bound variables that differ from every name currently on the stack,
  for example `x`, `x1`, `x2`. `getname` looks a name up by De Bruijn
  index, `restore` pops back to a given size.
- `pholi.indexedstack`: `IndexedStack`, a stack of key/value pairs whose
  `find` returns the most recently pushed pair for a key.
- `pholi.exact`: `Exact`, a resolved name numbered by definition order,
  printed as `$n`.
- `pholi.values`: `PrimType`, `Value` and `preceq`, the information
  order on values.
- `pholi.function`: `Function`, a finite function table over sized
  primitive types. `advance` steps through all possible tables in turn,
  wrapping around to all zeroes.
- `pholi.interpretation`: the lattice operations `top`, `bottom` and
  `merge` for each `Connective`, and `Interpretation`, which holds
  function tables for identifiers and a valuation stack for De Bruijn
  indices.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Tokenizing from the command line

```
pholi-tokenize theory.phl
```

The command prints one token per line for each file given. With no file
argument it reads standard input. It stops at the end of the input or at
the first scan error. It exits with status 1 if a file could not be
opened.

## Library use

```python
from pholi.tokenizer import Tokenizer

for symbol in Tokenizer("def f := ?? x : Obj . x"):
    print(symbol)
```

```python
from pholi.uniquenames import UniqueNameStack

names = UniqueNameStack()
names.extend("x")        # x
names.extend("x")        # x1
print(names.getname(0))  # most recently bound: x1
names.restore(0)
```

```python
from pholi.function import Function
from pholi.values import PrimType, Value

neg = Function([(PrimType.TRUTHVAL, 2)], (PrimType.TRUTHVAL, 2), [1, 0])
print(neg([Value(PrimType.TRUTHVAL, 0)]))  # tt
```

```python
from pholi.interpretation import Connective, merge
from pholi.values import PrimType, Value

ff = Value(PrimType.TRUTHVAL, 0)
ee = Value(PrimType.TRUTHVAL, 2)
print(merge(Connective.KLEENE_AND, ff, ee))  # ff
print(merge(Connective.AND, ff, ee))         # ee
```

## What this package does not do

The package has no parser for theory files, no representation of terms
or types, no type checker and no proof checker. The tokenizer produces
tokens only. An `Interpretation` stores function tables but does not
evaluate formulas; enumerating models and comparing truth values has to
be built on top of `Function.advance`, `merge` and `preceq`.