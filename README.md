# feeengine

A small fee engine for maker/taker trading fees, together with a few
companion utilities:

- `feeengine.fee`: computes a fee from an amount and a rate in basis points.
- `feeengine.web`: a WSGI application that exposes a health check.
- `feeengine.cli`: a command that reads standard input and prints it in upper case.
- `feeengine.units`: converts ether to wei, formats wei as ether and builds test addresses.
- `feeengine.wallet`: a test wallet holding an address and, optionally, a signing key.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Computing fees

```python
from decimal import Decimal
from feeengine.fee import fee, Side, FeeError

fee(Decimal("100"), 25, Side.TAKER)     # Decimal("0.25")
fee(Decimal("100.00"), 10, Side.MAKER)  # Decimal("0.05"), makers pay half
fee("250", 15, Side.TAKER)              # Decimal("0.375")
```

The amount may be a `Decimal`, an `int`, a numeric string or a `float`
(converted through its string form). The rate is an integer number of
basis points (1 bp = 0.01 %) and must lie between 0 and 10 000 inclusive.
Makers pay half the taker fee. The result is rounded to at most eight
decimal places, ties to even.

Invalid input raises a subclass of `FeeError` (itself a `ValueError`):

- `NonPositiveAmountError` when the amount is zero or negative;
- `BadBpsError` when the rate is outside 0..10 000.

An amount, rate or side of the wrong type raises `TypeError`.

## Health endpoint

`feeengine.web.app()` returns a WSGI application. A `GET` (or `HEAD`)
request to `/health` answers `200 OK` with `Content-Type: application/json`
and the body:

```json
{"status":"ok","version":"v1"}
```

Other methods on `/health` answer `405 Method Not Allowed`; any other path
answers `404 Not Found`.

The package does not start a server itself. Any WSGI server can host the
application, for example the standard library's:

```python
from wsgiref.simple_server import make_server
from feeengine.web import app

make_server("127.0.0.1", 8080, app()).serve_forever()
```

## Command line

The `feeengine-cli` command reads all of standard input and prints it in
upper case:

```
echo "hello world" | feeengine-cli
HELLO WORLD
```

## Ether and wei

```python
from feeengine.units import eth_to_wei, wei_to_eth_string, generate_test_address

eth_to_wei(1)                     # 1000000000000000000
wei_to_eth_string(10**18)         # "1.000000000000000000"
wei_to_eth_string(5)              # "0.000000000000000005"
generate_test_address(1)          # 20 bytes, all zero except the last, which is 1
```

`eth_to_wei` accepts an unsigned 64-bit integer and `wei_to_eth_string`
an unsigned 256-bit integer; values outside those ranges raise `ValueError`.
`generate_test_address` takes an index from 0 to 255.

## Test wallets

`feeengine.wallet.TestWallet` is a frozen dataclass with an `address`
(20 bytes) and an optional `signer` (a secp256k1 private key from the
`cryptography` package).

- `TestWallet(address)` wraps an existing address without a signer.
- `TestWallet.random()` returns a wallet at the all-zero address, without a signer.
- `TestWallet.from_private_key(hex_key)` parses a 32-byte secp256k1 key given
  in hexadecimal (with or without a `0x` prefix) and derives the wallet's
  address from it.

`address_from_public_key(public_key)` computes the address of an
uncompressed public key (65 bytes starting with `0x04`, or the bare 64
bytes) as the last 20 bytes of its Keccak-256 hash.

## What this package does not do

The wallet only holds an address and a key: it does not connect to a
node, send transactions, sign messages or look up balances.