# netcrypt

A small collection of classic algorithms from networking and security
courses. Each module is usable as a library and as a command.

| Module                     | What it does                                          |
|----------------------------|-------------------------------------------------------|
| `netcrypt.caesar`          | Caesar shift cipher                                   |
| `netcrypt.vigenere`        | Vigenère cipher                                       |
| `netcrypt.playfair`        | Playfair cipher with a 5×5 key square (J folded into I) |
| `netcrypt.rsa`             | Textbook RSA with small primes, one character at a time |
| `netcrypt.diffie_hellman`  | Diffie–Hellman key exchange between Alice and Bob     |
| `netcrypt.crc`             | CRC checksum generation and error detection           |
| `netcrypt.leaky_bucket`    | Leaky-bucket traffic-shaping simulation               |

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Caesar and Vigenère

Only ASCII letters are shifted; case is kept and every other character is
left as it is.

```python
from netcrypt.caesar import caesar
from netcrypt import vigenere

caesar("Hello, World!", 3)                  # 'Khoor, Zruog!'
caesar("Khoor, Zruog!", -3)                 # 'Hello, World!'

vigenere.encrypt("ATTACKATDAWN", "LEMON")   # 'LXFOPVEFRNHR'
vigenere.decrypt("LXFOPVEFRNHR", "LEMON")   # 'ATTACKATDAWN'
vigenere.generate_key("attack", "lemon")    # 'LEMONL'
```

A Vigenère key must be a non-empty string of letters; anything else raises
`ValueError`.

### Playfair

`prepare_text` keeps only letters, upper-cases them, turns J into I, puts
an `X` between doubled letters of a pair and pads an odd length with `X`.
`PlayfairCipher.encrypt` prepares its input this way before encrypting, so
decrypting gives back the prepared text.

```python
from netcrypt.playfair import PlayfairCipher, prepare_text

prepare_text("hello")                       # 'HELXLO'
cipher = PlayfairCipher("monarchy")
cipher.matrix                               # the 5x5 key square, as five strings
cipher.decrypt(cipher.encrypt("hello"))     # 'HELXLO'
```

`decrypt` raises `ValueError` if the ciphertext has an odd number of
letters.

### RSA

```python
from netcrypt.rsa import generate_keys, encrypt, decrypt, mod_inverse

keys = generate_keys(17, 11)    # e starts at 7 and is raised until coprime with phi
keys.public_key                 # (7, 187)
keys.private_key                # (23, 187)
values = encrypt("Hi", keys.public_key)     # one integer per character
decrypt(values, keys.private_key)           # 'Hi'
mod_inverse(7, 160)                         # 23
```

Characters are encrypted by their code point, so a message only round-trips
when every code point is smaller than `n`. `mod_inverse` raises
`ValueError` when no inverse exists, and `generate_keys` raises it when `p`
or `q` is below 2.

### Diffie–Hellman

```python
from netcrypt.diffie_hellman import exchange, mod_exp

result = exchange(23, 5, 6, 15)   # p, g, Alice's secret, Bob's secret
result.alice_public               # 8
result.bob_public                 # 19
result.shared_key                 # 2
result.matches                    # True
```

`shared_key` raises `ValueError` if the two computed keys differ.
`mod_exp` returns 1 for a non-positive exponent and raises `ValueError` for
a zero modulus.

### CRC

Bits are given as strings of `0` and `1`. The generator must start with
`1`; malformed input raises `ValueError`.

```python
from netcrypt.crc import checksum, encode, has_error, xor_division

checksum("1101011011", "10011")     # '1110'
frame = encode("1101011011", "10011")   # '11010110111110'
has_error(frame, "10011")           # False
has_error("11010110111111", "10011")    # True
```

### Leaky bucket

`simulate(output_rate, bucket_size, packets)` yields one `Arrival` per
incoming burst, stopping at a burst of 0 or when the input ends. A burst
larger than the bucket (or negative) overflows and is dropped. The bucket
then drains at `output_rate` packets per second, one `Tick` per second; the
clock keeps running across bursts.

```python
from netcrypt.leaky_bucket import simulate

arrivals = list(simulate(3, 10, [4, 12]))
arrivals[0].ticks
# (Tick(time=0, sent=3, remaining=1), Tick(time=1, sent=1, remaining=0))
arrivals[1].overflow                # True
arrivals[1].pending                 # 0
```

A non-positive output rate or a negative bucket size raises `ValueError`.

## Commands

Each command takes its inputs as arguments and prompts for any that are
missing. On invalid input it prints an error to standard error and exits
with status 1.

```
netcrypt-caesar [TEXT] [SHIFT]
netcrypt-vigenere [TEXT] [KEY]
netcrypt-playfair [KEY] [PLAINTEXT]
netcrypt-rsa [MESSAGE]
netcrypt-diffie-hellman [P] [G] [A] [B]
netcrypt-crc [DATA] [GENERATOR] [RECEIVED]
netcrypt-leaky-bucket [--rate RATE] [--size SIZE] [PACKETS ...]
```

- `netcrypt-caesar` and `netcrypt-vigenere` print the encrypted text and
  its decryption.
- `netcrypt-playfair` prints the prepared, encrypted and decrypted text.
- `netcrypt-rsa` always uses the primes 17 and 11, prints both keys, the
  encrypted values and the decrypted message.
- `netcrypt-diffie-hellman` prints the values each side sends, each side's
  computed key, and the shared key or a mismatch message.
- `netcrypt-crc` prints the checksum and transmitted frame, then reports
  whether the received frame has an error.
- `netcrypt-leaky-bucket` asks for the rate and size on one line unless both
  options are given, and prompts for bursts until 0 is entered unless they
  are given as arguments.

For example:

```
netcrypt-crc 1101011011 10011 11010110111110
netcrypt-leaky-bucket --rate 3 --size 10 4 12 5
```

## Limitations

These are teaching implementations. They use tiny numbers, brute-force
modular inverses and classical ciphers, and offer no real security. The
package does not generate primes or random secrets; RSA and Diffie–Hellman
work only with the numbers you supply.