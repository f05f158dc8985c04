# mixedfrac

Small value types for mixed-number fractions and for points on a plane.

## Install

```
pip install mixedfrac
```

## Fractions

`mixedfrac.fraction.Fraction` holds an integer part, a numerator and a
denominator as the attributes `integer`, `numerator` and `denominator`. It is
built from zero, one, two or three integers:

```python
from mixedfrac.fraction import Fraction, parse_fraction

Fraction()          # 0
Fraction(5)         # 5
Fraction(1, 2)      # 1/2
Fraction(2, 3, 4)   # 2(3/4)
```

A zero denominator is replaced by 1. More than three arguments raise
`TypeError`.

Operations (the other operand may be a `Fraction` or a plain `int`):

- `*` and `/` return a new fraction in proper form; `*=` and `/=` update the
  left operand in place.
- `==`, `<`, `<=`, `>`, `>=` compare values, not representations, so
  `Fraction(1, 2) == Fraction(2, 4)`. Fractions are not hashable.
- `int(f)` gives the whole part, rounded toward zero.
- `f.to_improper()` folds the integer part into the numerator and
  `f.to_proper()` moves whole units back out; both work in place and return `f`.
- `f.inverted()` returns the reciprocal as a new improper fraction.
- `f.increment()` adds one to the integer part in place and returns `f`.
- `str(f)` gives text such as `2(3/4)`, `1/2`, `5` or `0`.

`parse_fraction` reads text such as `5`, `1/2`, `2(3/4)`, `3 4/5`, `3.4/5` or
`3,4/5`. Only the first line and its first 31 characters are read, at most
three numbers are taken, and text with no numbers gives a zero fraction:

```python
str(parse_fraction("2(3/4)"))   # '2(3/4)'
str(parse_fraction("1/2"))      # '1/2'
```

## Points

`mixedfrac.point.Point` is a dataclass with float coordinates `x` and `y`,
both defaulting to 0.

```python
from mixedfrac.point import Point, distance

a = Point(2, 3)
b = Point(7, 8)
a.distance(b)        # 7.0710678...
distance(a, b)       # the same value
a + b                # Point(x=9, y=11)
a.increment()        # adds one to both coordinates in place, returns a
str(Point(2, 3))     # 'X = 2\tY = 3'
```

## Command line

```
mixedfrac "2(3/4)" 1/2
```

Each argument is parsed with `parse_fraction` and printed on its own line.
With no arguments the command prints `2(3/4)`. It does not read from standard
input.