"""AES-256 CTR_DRBG as used by the NIST PQC known answer tests.

Reproduces ``randombytes_init``/``randombytes`` from the NIST ``rng.c``
byte for byte: no derivation function, no prediction resistance, and one
state update after every request.
"""

import logging

from contextlib import contextmanager
from dataclasses import dataclass, field

from Crypto.Cipher import AES

from params import AES256_CTR_DRBG

KEY_BYTES = AES256_CTR_DRBG.key_bytes
V_BYTES = AES256_CTR_DRBG.block_bytes
SEED_BYTES = AES256_CTR_DRBG.seed_bytes


class DrbgError(Exception):
  pass

class InvalidSeedLength(DrbgError, ValueError):
  def __init__(self, what, length, expected=SEED_BYTES):
    super().__init__(f"{what} must be {expected} bytes, got {length}")
    self.what = what
    self.length = length
    self.expected = expected

class InvalidSecurityStrength(DrbgError, ValueError):
  pass

class NotInitialized(DrbgError, RuntimeError):
  def __init__(self):
    super().__init__("DRBG state has not been seeded")


@dataclass
class DrbgState:
  key: bytearray = field(default_factory=lambda: bytearray(KEY_BYTES), repr=False)
  counter: bytearray = field(default_factory=lambda: bytearray(V_BYTES), repr=False)
  generation_count: int = 0

  def __post_init__(self):
    self.key = bytearray(self.key)
    self.counter = bytearray(self.counter)

    if len(self.key) != KEY_BYTES:
      raise InvalidSeedLength("key", len(self.key), KEY_BYTES)
    if len(self.counter) != V_BYTES:
      raise InvalidSeedLength("counter", len(self.counter), V_BYTES)

  @classmethod
  def from_entropy(cls, entropy_input, personalization_string=None):
    return drbg_init(cls(), entropy_input, personalization_string)

  @property
  def initialized(self):
    return self.generation_count > 0

  def copy(self):
    return DrbgState(self.key, self.counter, self.generation_count)

  def zeroize(self):
    """Overwrite key and counter in place; the state must be seeded again."""
    self.key[:] = bytes(KEY_BYTES)
    self.counter[:] = bytes(V_BYTES)
    self.generation_count = 0


@contextmanager
def zeroizing(state):
  try:
    yield state
  finally:
    state.zeroize()


def increment_counter(v):
  # big endian, carry runs from the last byte towards the first
  for j in range(len(v) - 1, -1, -1):
    if v[j] == 0xff:
      v[j] = 0x00
    else:
      v[j] += 1
      break

  return v


def encrypt_counter_blocks(key, v, num_blocks):
  """Increment ``v`` in place before each block and return the encrypted counters."""
  if num_blocks == 0:
    return b""

  blocks = bytearray()

  for _ in range(num_blocks):
    increment_counter(v)
    blocks += v

  cipher = AES.new(bytes(key), AES.MODE_ECB)

  return cipher.encrypt(bytes(blocks))


def AES256_CTR_DRBG_Update(provided_data, Key, V):
  V = bytearray(V)

  temp = bytearray(encrypt_counter_blocks(Key, V, 3))

  if provided_data is not None:
    if len(provided_data) != SEED_BYTES:
      raise InvalidSeedLength("provided_data", len(provided_data))

    for i in range(SEED_BYTES):
      temp[i] ^= provided_data[i]

  logging.debug("update:\n%s", temp.hex())

  return temp[:KEY_BYTES], temp[KEY_BYTES:]


def seed_bytes(what, value):
  # bytes(n) would silently build n zero bytes
  if isinstance(value, int):
    raise TypeError(f"{what} must be a byte sequence, not int")

  return bytes(value)


def drbg_init(state, entropy_input, personalization_string=None):
  entropy_input = seed_bytes("entropy_input", entropy_input)

  if len(entropy_input) != SEED_BYTES:
    raise InvalidSeedLength("entropy_input", len(entropy_input))

  seed_material = bytearray(entropy_input)

  if personalization_string is not None:
    personalization_string = seed_bytes("personalization_string", personalization_string)

    if len(personalization_string) != SEED_BYTES:
      raise InvalidSeedLength("personalization_string", len(personalization_string))

    for i in range(SEED_BYTES):
      seed_material[i] ^= personalization_string[i]

  key, v = AES256_CTR_DRBG_Update(seed_material, bytes(KEY_BYTES), bytes(V_BYTES))

  state.key[:] = key
  state.counter[:] = v
  state.generation_count = 1

  logging.debug("seeded key:\n%s", state.key.hex())
  logging.debug("seeded V:\n%s", state.counter.hex())

  return state


def drbg_generate(state, xlen):
  if not state.initialized:
    raise NotInitialized()

  if xlen < 0:
    raise ValueError(f"requested length must be non-negative, got {xlen}")

  v = bytearray(state.counter)

  ret = encrypt_counter_blocks(state.key, v, (xlen + V_BYTES - 1) // V_BYTES)[:xlen]

  key, v = AES256_CTR_DRBG_Update(None, state.key, v)

  state.key[:] = key
  state.counter[:] = v
  state.generation_count += 1

  logging.debug("generated %i bytes, generation %i", xlen, state.generation_count)

  return ret


_default_state = DrbgState()

def default_state():
  return _default_state

def randombytes_init(entropy_input, personalization_string, security_strength=256):
  if security_strength != AES256_CTR_DRBG.security_strength:
    raise InvalidSecurityStrength(f"security strength must be {AES256_CTR_DRBG.security_strength}, got {security_strength}")

  drbg_init(_default_state, entropy_input, personalization_string)

def randombytes(xlen):
  return drbg_generate(_default_state, xlen)


if __name__ == "__main__":
  randombytes_init(bytes(range(SEED_BYTES)), None, 256)

  print("".join([f"{int(v)} " for v in randombytes(SEED_BYTES)]))
