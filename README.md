# proptest

Building blocks for property-based testing in Python. You describe how inputs are generated, state a condition that must hold for them, and evaluate the property. If the condition fails, the failing input is shrunk to a smaller value that still fails.

## Installation

From a checkout of the repository:

```
pip install .
```

The tests use pytest, which the `test` extra installs:

```
pip install ".[test]"
```

## Concepts

- **Generators** are callables that take a `GenParameters` (`proptest.gen_parameters`) and return a `GenResult` (`proptest.gen_result`). A `GenResult` holds the value, a shrinker, labels and an optional sieve. `retrieve()` returns `(value, True)` if the value is present and passes the sieve. Otherwise it returns `(None, False)`.
- **`GenParameters`** has these fields: `min_size`, `max_size`, `max_shrink_count` and `rng`.
  - `default_gen_parameters()` returns sizes 0–100 and a shrink limit of 1000.
  - `min_gen_parameters()` returns all zeros.
  - Both seed a `LockedRandom` from the current time.
  - `with_size(size)` returns a copy with a new `max_size`.
  - `clone_with_seed(seed)` returns a copy whose random source is seeded with `seed`, so results can be reproduced.
- **Shrinkers** map a value to a `Shrink` (`proptest.shrink`), which is a finite, single-pass iterator of smaller candidates.
  - A `Shrink` supports `filter`, `map`, `interleave` and `all`.
  - `concat_shrinks`, `combine_shrinker`, `no_shrink` and `no_shrinker` build shrinks and shrinkers.
- **Properties** are callables that take a `GenParameters` and return a `PropResult` (`proptest.prop_result`). Its `status` is a `PropStatus`: `PROOF`, `TRUE`, `FALSE`, `UNDECIDED` or `ERROR`.
  - `success()` is true for `TRUE` and `PROOF`.
  - `and_()` combines two results.
  - `save_prop()` turns an exception raised by a property into an `ERROR` result.

## Generators (`proptest.gen`)

| Module | Generators |
|--------|------------|
| `basic` | `bool_gen`, `const`, `fail`, `one_const_of`, `one_gen_of`, `frequency`, `weighted` (with `WeightedGen`), `sized`, `retry_until` |
| `numbers` | `int64`, `uint64`, `int32`, `uint32`, `int16`, `uint16`, `int8`, `uint8` and their `*_range` forms, `int_range`, `int_gen`, `uint_range`, `uint_gen`, `size`, `float64`, `float64_range`, `float32`, `float32_range`, `complex128`, `complex128_box`, `complex64`, `complex64_box` |
| `strings` | `rune`, `rune_range`, `rune_no_control`, `num_char`, `alpha_upper_char`, `alpha_lower_char`, `alpha_char`, `alpha_num_char`, `unicode_char`, `any_string`, `alpha_string`, `num_string`, `identifier`, `unicode_string` |
| `collections` | `slice_of`, `slice_of_n`, `map_of`, `ptr_of` |
| `times` | `time_gen`, `any_time`, `time_range` |

Notes on the value types:

- **Characters** are one-character strings.
- **Unicode tables.** `unicode_char` and `unicode_string` take a table of `(lo, hi)` or `(lo, hi, stride)` code-point ranges.
- **Collections.** `slice_of` and `map_of` draw a length in `[min_size, max_size)`. They raise `ValueError` if `min_size > max_size`.
- **Optional values.** `ptr_of` yields either a generated element or `None`.
- **Times.** `time_gen` yields UTC datetimes from 1970 up to the end of year 9999. `time_range(start, duration)` yields datetimes in `[start, start + duration)`.

`basic` also provides these combinators:

- `map_gen`
- `such_that`
- `with_shrinker`
- `combine_gens`

## Shrinkers

- `proptest.gen.number_shrink` provides shrinkers for every integer width, for floats and complex numbers, and `time_shrinker` for datetimes.
- `proptest.gen.collection_shrink` provides `slice_shrinker`, `slice_shrinker_one`, `map_shrinker`, `map_shrinker_one`, `ptr_shrinker` and `string_shrinker`.

The collection shrinkers try two things in order:

1. Drop chunks of the collection.
2. Shrink each element in turn.

## Properties (`proptest.prop`)

```python
from proptest.gen_parameters import default_gen_parameters
from proptest.gen.numbers import int64
from proptest.prop.forall import for_all

prop = for_all(lambda n: n <= 100, int64())
result = prop(default_gen_parameters())

print(result.status)
for arg in result.args:
    print(arg.arg, "shrunk from", arg.orig_arg, "in", arg.shrinks, "steps")
```

A property is evaluated once per call, with one drawn input.

- If the drawn value is above 100, the status is `FALSE` and the reported argument is shrunk toward the smallest failing value.
- If the drawn value is 100 or less, the status is `TRUE`.

The four forms:

- `for_all(condition, *gens)` shrinks each failing argument in turn, up to `max_shrink_count` steps.
- `for_all_no_shrink(condition, *gens)` reports the failing input as it was generated.
- `for_all1(gen, check)` and `for_all_no_shrink1(gen, check)` are the single-generator forms.

If any generator yields no valid value, the result is `UNDECIDED`.

### Condition functions

A condition takes one positional argument per generator. It may return:

- a `bool`, where `True` passes;
- a `str`, where the empty string passes and any other string becomes the failure label;
- a `PropResult`;
- a pair `(value, error)`, where `error` is an exception or `None`.

A condition that raises gives an `ERROR` result that keeps the exception.

`proptest.prop.condition.check_condition_func` validates a condition and raises `TypeError` for one that is unusable. An example is a callable with the wrong number of parameters. The `for_all` family turns that error into a property that always returns `ERROR`; this is what `error_prop` produces. `convert_result` maps a condition's outcome to a `PropResult`.

## What this package does not do

This package provides generators, shrinkers and single property evaluations. It does not include:

- a runner that evaluates a property repeatedly until a number of successful tests is reached;
- tracking of discarded inputs;
- running properties in parallel workers;
- a named collection of properties;
- a console reporter.

To run a property many times, call it in your own loop with fresh or seeded `GenParameters`.