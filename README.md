# pqcrkit

Pure-Python building blocks used by post-quantum signature schemes.
It has no runtime dependencies.

## Modules

- `pqcrkit.modulo`: `Modulus`, division and remainder by a fixed divisor
  in the range 1..16384. It works through a precomputed fixed-point
  reciprocal and has the methods `divide`, `divmod`, `modulo` and `mult`.
- `pqcrkit.vectenc`: `VectCoder`, a compact byte encoding for vectors in
  which each element lies below its own known bound. It has
  `encode`/`decode` and `encode_separate_root`/`decode_separate_root`,
  which keep the root value apart. It also has the properties `nelts`,
  `nbytes`, `nbytes_separate_root` and `root_bound`.
- `pqcrkit.spx_paramset`: `SpxParamset` and `paramset_from_name`. They parse
  SPHINCS+ parameter-set names in canonical form, such as
  `n16h63d7w16lt12k14`, and published aliases such as `128s` or
  `256f-round1`.
- `pqcrkit.xoesch`: the Esch256 and Esch384 hash functions (`esch256`,
  `esch384`) and the XOEsch256 and XOEsch384 extendable-output functions
  (`xoesch256`, `xoesch384`, and the incremental classes `XOEsch256` and
  `XOEsch384`). All of them are built on the Sparkle permutation.
- `pqcrkit.symmetric`: the hash back ends `shake256`, `xoesch256` and
  `xoesch384`, each a `SymmetricAlgo`. They offer one-shot XOF output and
  incremental hashing (`IncrementalHash`) that starts with a `HashContext`
  domain-separation byte.
- `pqcrkit.sign_api`: `SignAlgo`, an abstract interface for signature
  algorithms, and a registry for them (`register_sign_algo`,
  `get_sign_algo`, `sign_algo_names`).

## Installation

```
pip install pqcrkit
```

## Examples

Hashing:

```python
from pqcrkit.xoesch import XOEsch256, esch256, xoesch384

digest = esch256(b"hello")          # 32 bytes
stream = xoesch384(b"hello", 100)   # 100 bytes of XOF output

h = XOEsch256(b"hel")
h.update(b"lo")
out = h.finish(64)                  # the state cannot be used after this
```

Encoding a vector of bounded integers:

```python
from pqcrkit.vectenc import VectCoder

coder = VectCoder.uniform(977, 69)
values = [i * 13 % 977 for i in range(69)]
data = coder.encode(values)
assert len(data) == coder.nbytes
assert coder.decode(data) == values
```

Domain-separated hashing through a symmetric back end:

```python
from pqcrkit.symmetric import HashContext, get_algo

algo = get_algo("shake256")
h = algo.hasher(HashContext.MESSAGEHASH, b"prefix")
h.index(7)
h.chunk(b"message")
h.ui16vec([1, 2, 3])
tag = h.expand(32)
```

Parsing an SPHINCS+ parameter-set name:

```python
from pqcrkit.spx_paramset import paramset_from_name

ps = paramset_from_name("128s")
print(ps.name, ps.hash_bytes, ps.fors_trees)   # n16h63d7w16lt12k14 16 14
```

Providing a signature algorithm:

```python
from pqcrkit.sign_api import SignAlgo, register_sign_algo, get_sign_algo

class MyAlgo(SignAlgo):
    name = "myalgo"
    # implement publickey_bytes, secretkey_bytes, signature_bytes_max,
    # paramset_names, detached_sign and _check_signature

register_sign_algo(MyAlgo())
algo = get_sign_algo("myalgo")
```

`SignAlgo` adds `detached_verify`, `supercop_sign` (the signature followed
by the message) and `supercop_sign_open` on top of those methods.

## Errors

Errors are raised as exceptions. Invalid arguments, unknown parameter-set
names and unknown symmetric algorithms raise `ValueError`.
`get_sign_algo` raises `KeyError` for a name that has not been registered.
A signature that is rejected, or has the wrong length, raises
`SignatureError`.

## What this package does not do

- It contains no signature scheme of its own. The registry starts empty,
  and there is no key generation, signing or verification until you
  register a `SignAlgo` subclass that implements them.
- It provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```