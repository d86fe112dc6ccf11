# geffe

This package provides a Geffe combining generator and a correlation attack against it.

The generator drives three linear feedback shift registers:

| register | length | feedback polynomial |
|----------|--------|---------------------|
| L1       | 30     | `0x32800000`        |
| L2       | 31     | `0x48000000`        |
| L3       | 32     | `0xF5000000`        |

Each output bit takes the value `x` when L3 outputs 1 and `y` when L3 outputs 0. Here `x` comes from L1 and `y` comes from L2.

## Installation

```
pip install .
```

## Command line

```
geffe-generator 64
```

This command prints 64 keystream bits to standard output as a string of `0`s and `1`s, with no trailing newline. It seeds the registers with the fixed states `806014269`, `55649069` and `2352825186`. The exit status is 1 in two cases: no argument is given (or more than one), or the argument is not an integer.

## Shift registers

```python
from geffe.lfsr import Lfsr

reg = Lfsr(31, 0x32800000, state=537051710)
print(reg.bits(16))        # 16 output bits as a list of 0/1
```

`Lfsr(length, polynomial=0, state=0)` keeps its state in a 32-bit word, and `length` must be between 1 and 32. Each step shifts the state left and feeds the parity of `state & polynomial` into bit 0. The output is bit `length - 1` before the shift.

There are two stepping methods:

- `fast_clock()` takes the parity of the whole masked word.
- `clock()` only counts taps below `length`.

`bits(count)` clocks `count` times with `fast_clock()` and returns the output bits.

## Generator

```python
from geffe.generator import GeffeGenerator, combine

gen = GeffeGenerator()
gen.set_register(806014269, 0)
gen.set_register(55649069, 1)
gen.set_register(2352825186, 2)
gamma = gen.generate_gamma(128)   # list of 0/1 values
bit = gen.clock()                 # one more bit, as a bool
```

`set_register(value, index)` raises `ValueError` in two cases:

- the value is negative or does not fit the chosen register;
- the index is not 0, 1 or 2.

`combine(x, y, s)` is the combining function on its own.

## Recovering the registers

`RegisterRecovery` runs the classic correlation attack. L1 and L2 each agree with the keystream about 75% of the time, so each of them is found on its own by a statistical test. L3 is then searched for among the states that stay consistent with the keystream.

```python
from geffe.generator import GeffeGenerator
from geffe.recovery import RegisterRecovery

gen = GeffeGenerator()
for index, value in enumerate((806014269, 55649069, 2352825186)):
    gen.set_register(value, index)
keystream = "".join(map(str, gen.generate_gamma(2048)))

rr = RegisterRecovery(2.336, 6.009)
rr.set_critical_set()                          # sets rr.population and rr.criterion
rr.set_gamma_template(keystream[:rr.population])
rr.set_full_gamma_template(keystream)
rr.recover_l1(806014269 - 1000, 806014269 + 1000)
rr.set_quantiles(2.336, 6.121)
rr.set_critical_set()
rr.set_gamma_template(keystream[:rr.population])
rr.recover_l2(55649069 - 1000, 55649069 + 1000)
print(rr.recover_l3())                         # [(l1, l2, l3), ...]
```

The template methods check their input:

- `set_gamma_template` needs exactly `population` characters, all `0` or `1`. It raises `RuntimeError` if `set_critical_set()` has not been called.
- `set_full_gamma_template` accepts at most 2048 bits.

`recover_l1(start=0, stop=None)` and `recover_l2(start=0, stop=None)` test each state in `[start, stop)`, which defaults to the whole state space of the register. They return the states that pass the test and also append them to `l1_candidates` and `l2_candidates`.

`recover_l3()` tries every pair of recorded candidates. For each pair it returns at most one `(l1, l2, l3)` key that reproduces the full template, and it needs a full template of at least 32 bits.

`recognize(gamma)` applies the statistical test to a packed integer, where bit *i* is the *i*-th output bit.

## Limitations

- The search runs in a single thread. Covering all 2^30 or 2^31 states of a register in pure Python takes a very long time, so pass `start` and `stop` to split the work.
- No command runs the attack. It is available only through `RegisterRecovery`.