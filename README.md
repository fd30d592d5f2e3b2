# suikit

A Python toolkit for working with the Sui blockchain. It provides:

- **BCS** (Binary Canonical Serialization) in `suikit.bcs`: ULEB128
  integers, fixed-width integer types (`U8` to `U64`, `I8` to `I64`),
  tagged unions via `BcsEnum`, optional values via `Option`, field tags via
  `bcs_field`, and the `Encoder` / `Decoder` classes with the `marshal`,
  `must_marshal` and `unmarshal` helpers.
- **Signatures**: building and parsing `flag || signature || pubkey`
  serialized signatures, signing transaction bytes with Ed25519, verifying
  Ed25519-signed personal messages and transactions, and deriving
  addresses from public keys.
- **Key pairs**: reading base64 keystore entries with `fetch_key_pair`.
- **Transport**: `HttpConn` for JSON-RPC over HTTP and `WsConn` for
  JSON-RPC subscriptions over a WebSocket.
- **Models**: dataclasses for requests and responses of the Sui JSON-RPC
  API, built on `JsonModel` with `to_dict`, `from_dict`, `to_json` and
  `from_json`.

Python 3.10 or later is required. The runtime dependencies are
`cryptography`, `httpx` and `websocket-client`; the `test` extra adds
`pytest`.

## BCS

```python
from dataclasses import dataclass

from suikit.bcs.b64 import from_base64, to_base64
from suikit.bcs.decoding import unmarshal
from suikit.bcs.encoding import marshal
from suikit.bcs.types import U64
from suikit.bcs.uleb128 import uleb128_encode

assert uleb128_encode(300) == b"\xac\x02"
assert from_base64(to_base64(b"sui")) == b"sui"


@dataclass
class Coin:
    name: str
    value: U64


data = marshal(Coin("sui", U64(7)))
coin, used = unmarshal(data, Coin)
assert coin == Coin("sui", U64(7)) and used == len(data)
```

Struct fields are written in declaration order. Lists are length-prefixed,
tuples are fixed-length, `bytes` and `str` are length-prefixed bytes. A
plain `int` has no fixed width and is rejected; wrap it in one of the
integer types. A field can be marked optional (`bcs_field("optional")`) or
skipped (`bcs_field("-")`). Encoding and decoding failures raise
`BcsError`.

## Signatures

`suikit.models.signature` holds the Ed25519 helpers:

- `sign_serialized(tx_bytes, private_key)` signs base64 transaction bytes
  (prefixed with the transaction intent and hashed with BLAKE2b-256) and
  returns a `SignedTransactionSerializedSig`. The key may be an
  `Ed25519PrivateKey` or 32 or 64 raw bytes. `TxnMetaData.sign_serialized_sig_with`
  in `suikit.models.write_transaction` does the same for a `TxnMetaData`.
- `to_serialized_signature` and `from_serialized_signature` convert between
  raw signature bytes and the base64 serialized form.
- `verify_personal_message(message, signature)` and
  `verify_transaction(b64_message, signature)` return a tuple of the
  signer's address and whether the signature is valid.
- `ed25519_public_key_to_sui_address(pub_key)` derives an address.

`suikit.ed25519.Ed25519PublicKey.verify_personal_message` checks raw
message and signature bytes and returns a bool.

`suikit.signatures.parse_serialized_signature` splits a serialized
signature for the ED25519, Secp256k1 and Secp256r1 schemes of
`suikit.scheme.SignatureScheme`.

## Key pairs

`suikit.keypair.fetch_key_pair` decodes a base64 keystore entry (flag
byte, public key, private key) into a `SuiKeyPair` holding the flag,
address, public key and private key. An unknown flag raises
`InvalidEncryptFlagError`. `public_key_to_address` derives the address of
an Ed25519 or Secp256k1 public key with SHA3-256.

## JSON-RPC

```python
from suikit.httpconn import HttpConn, Operation
from suikit.models.read_system import CheckpointResponse

with HttpConn("http://localhost:9000") as conn:
    body = conn.request(Operation("sui_getCheckpoint", ["1"]))
```

`request` posts a JSON-RPC 2.0 request and returns the raw response body
whatever its status; decode the `result` with the model class for the
method you called, for example `CheckpointResponse.from_dict(...)`.
`HttpConn` accepts an existing `httpx.Client` as its second argument.

`WsConn(ws_url).call(op, receive)` sends a subscription request, returns
the `SubscriptionResp`, and then hands every text message the server pushes
to `receive` on a background thread. An error reply raises `SuiError`.

`suikit.constants` holds `IntentScope`, the network names `SUI_MAINNET`,
`SUI_TESTNET`, `SUI_DEVNET`, `SUI_LOCALNET`, and
`FAUCET_LOCALNET_ENDPOINT`.

## What it does not do

- There is no high-level client with one method per RPC call; you build
  the `Operation` and decode the reply yourself.
- There is no faucet request helper and no transaction builder.
- Signing and verification cover Ed25519 only. MultiSig and zkLogin
  signatures are not parsed, and keystore files are not loaded from disk.