# cipherbox

A small toolbox of ciphers, hashes and codes for study and experimentation.
These are learning implementations written in plain Python with no
dependencies. They are not meant to protect real data.

## What is in it

- **Block ciphers**: DES (`cipherbox.des`) and Blowfish (`cipherbox.blowfish`),
  both working block by block (ECB) with zero padding to 8-byte blocks.
- **Stream cipher**: RC4 / arcfour (`cipherbox.arcfour`).
- **Rotor machine**: a three-rotor Enigma-style machine (`cipherbox.enigma`).
- **Hashes**: MD2 (`cipherbox.md2`) and MD5 (`cipherbox.md5`), with a
  hashlib-like `update()` / `digest()` / `hexdigest()` interface.
- **Error correction**: an extended Hamming (7,4) code with an overall parity
  bit (`cipherbox.hamming`).
- **Transpositions and shifts**: a fixed 8×8 grid transposition
  (`cipherbox.gali`), ASCII ROT13 (`cipherbox.rot13`) and a byte-wise
  progressive shift cipher (`cipherbox.trith`).
- **Byte helpers**: big-endian word packing and splitting (`cipherbox.bits`).
- **Classical ciphers** under `cipherbox.alphabet`: A1Z26, Atbash, Bacon,
  Caesar, ROT13, scytale, simple substitution, Trithemius, Vigenère and
  single-byte XOR.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from cipherbox import des, arcfour, md2, md5
from cipherbox.blowfish import Blowfish
from cipherbox.rot13 import rot13

key = b"password"                            # DES takes exactly 8 bytes
ciphertext = des.encrypt(b"attack at dawn", key)
plaintext = des.decrypt(ciphertext, key)     # b"attack at dawn\x00\x00": padding is kept

cipher = Blowfish(b"secret")                 # 1 to 56 bytes
assert cipher.decrypt(cipher.encrypt(b"8 bytes!")) == b"8 bytes!"

stream_key = b"secret"
scrambled = arcfour.arcfour(b"hello", stream_key)
assert arcfour.arcfour(scrambled, stream_key) == b"hello"

print(md2.md2(b"abc").hex())                 # one-shot digest
h = md5.MD5(b"ab")
h.update(b"c")
print(h.hexdigest())                         # 900150983cd24fb0d6963f7d28e17f72

print(rot13("Hello"))                        # Uryyb
```

`cipherbox.arcfour` also exposes `key_schedule(key)` and
`keystream(state, length)` for working with the keystream directly, and
`cipherbox.des.expand_key(key)` returns the sixteen 48-bit round keys.

### Enigma

```python
from cipherbox.enigma import Enigma

machine = Enigma()                 # start positions left=2, middle=20, right=16
text = machine.encrypt("HELLO, WORLD")
```

`Enigma.encrypt(text, rotor1, rotor2, rotor3, reflector)` enciphers the
capital letters A–Z and passes every other character through; the rotor
choices (0–4) default to 2, 1, 0 and the reflector (0–1) to 1. The machine
steps with each letter, so decrypting means starting a fresh `Enigma` with the
same positions and running the ciphertext through it. `Enigma.press()` handles
one letter, or one index 0–25.

### Hamming code

```python
from cipherbox import hamming

word = hamming.encode((1, 0, 1, 1))     # 8-bit code word with even parity
fixed, message = hamming.correct(word)  # message is None when nothing is wrong
```

`correct()` flips a single bad bit and reports it (`"error in Hamming code"`
or `"last bit error"` for the parity bit), and reports `"2 errors"` without
changing the word when it detects two. `parse_bits()`, `check_code()`,
`has_even_parity()` and `syndrome()` are available on their own.

### Classical ciphers

The functions in `cipherbox.alphabet` take plain strings. Where a cipher has a
direction, it takes a `cipherbox.alphabet.common.Mode` (`Mode.ENCRYPT` or
`Mode.DECRYPT`, or the integers 1 and -1). Characters outside the alphabet pass
through unchanged.

| Module                        | Functions                                                     | Alphabet argument |
|-------------------------------|---------------------------------------------------------------|-------------------|
| `cipherbox.alphabet.a1z26`    | `encode(text)`, `decode(numbers)`                             | no (A–Z)          |
| `cipherbox.alphabet.atbash`   | `atbash(text, alphabet)`                                      | yes               |
| `cipherbox.alphabet.bacon`    | `encode`, `decode`, `render`, `codes_from_marks`, `letters_from_marks` | yes      |
| `cipherbox.alphabet.caesar`   | `caesar(text, key, mode, alphabet)`                           | yes               |
| `cipherbox.alphabet.rot13`    | `rot13(text, alphabet)`                                       | yes               |
| `cipherbox.alphabet.scytale`  | `scytale(text, strings, mode)`, `pad(text, strings, fill)`    | no                |
| `cipherbox.alphabet.substitute` | `substitute(text, mode, alphabet, vector)`                  | yes               |
| `cipherbox.alphabet.trithemius` | `trithemius(text, mode, alphabet)`, `key_for(index)`        | yes               |
| `cipherbox.alphabet.vigenere` | `vigenere(text, key, mode, alphabet)`                         | yes               |
| `cipherbox.alphabet.xor`      | `xor(data, key)`                                              | no                |

```python
from cipherbox.alphabet.caesar import caesar
from cipherbox.alphabet.common import Mode
from cipherbox.alphabet.vigenere import vigenere

caesar("HELLO", 3)                        # "KHOOR"
caesar("KHOOR", 3, Mode.DECRYPT)          # "HELLO"
vigenere("HELLO", "ASK")                  # "HWVLG"
```

Alphabets default to `"ABCDEFGHIJKLMNOPQRSTUVWXYZ"` and must be non-empty and
shorter than 127 characters. A1Z26 and Bacon encode characters outside the
alphabet as negative codes (the character code minus 128) so that decoding
gives them back.

## Command-line tools

Each tool reads from standard input and prints its results:

| Command              | What it does                                                                  |
|----------------------|-------------------------------------------------------------------------------|
| `cipherbox-des`      | Encrypts a line with DES under a built-in key, then decrypts it, printing the bytes of each stage |
| `cipherbox-blowfish` | The same with Blowfish                                                        |
| `cipherbox-arcfour`  | The same with RC4                                                             |
| `cipherbox-enigma`   | Runs the line through the Enigma machine at its default settings              |
| `cipherbox-md2`      | Prints the bytes of a line and its MD2 digest as byte values                  |
| `cipherbox-hamming`  | Reads eight binary digits, reports any error found and prints the corrected bits |
| `cipherbox-gali`     | Reads 64 non-blank characters as an 8×8 grid and prints the rearranged grid   |

For example:

```
echo "HELLO" | cipherbox-enigma
echo "10110100" | cipherbox-hamming
```

## What it does not do

- The command-line tools take no keys, files or options: the block and stream
  cipher tools always use a built-in key and only show a round trip of one line.
  Use the library functions to encrypt with your own key.
- The block ciphers offer only ECB with zero padding; there are no chaining
  modes, no IVs and no way to strip padding on decryption.
- There is no command for MD5; use `cipherbox.md5` from Python.