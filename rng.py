"""Adapters exposing the KAT DRBG through generic randomness interfaces."""

import random

from randombytes import DrbgState, SEED_BYTES, drbg_generate


class KatRng:
  """Byte oriented RNG handle; every call is exactly one DRBG request.

  Warning: only meant to reproduce known answer tests, never for key
  generation.
  """

  def __init__(self, state):
    self.state = state

  @classmethod
  def from_seed(cls, seed, personalization=None):
    return cls(DrbgState.from_entropy(seed, personalization))

  def randbytes(self, n):
    return drbg_generate(self.state, n)

  def fill_bytes(self, dest):
    view = memoryview(dest).cast("B")
    view[:] = drbg_generate(self.state, len(view))

  def next_u32(self):
    return int.from_bytes(drbg_generate(self.state, 4), "little")

  def next_u64(self):
    return int.from_bytes(drbg_generate(self.state, 8), "little")


class KatRandom(random.Random):
  """random.Random drawing all of its output from the KAT DRBG."""

  def __new__(cls, *args, **kwargs):
    return super().__new__(cls)

  def __init__(self, seed, personalization=None):
    self._state = None
    super().__init__((seed, personalization))

  def __reduce__(self):
    # rebuilt from a throwaway seed, then setstate restores the real state
    return self.__class__, (bytes(SEED_BYTES),), self.getstate()

  def seed(self, a=None, version=2):
    if a is None:
      raise TypeError("KatRandom needs an explicit 48 byte seed")

    if isinstance(a, tuple):
      entropy, personalization = a
    else:
      entropy, personalization = a, None

    self._state = DrbgState.from_entropy(entropy, personalization)
    self.gauss_next = None

  def getrandbits(self, k):
    if k < 0:
      raise ValueError("number of bits must be non-negative")

    value = int.from_bytes(drbg_generate(self._state, (k + 7) // 8), "big")

    return value >> (-k % 8)

  def random(self):
    return self.getrandbits(53) * (2 ** -53)

  def randbytes(self, n):
    return drbg_generate(self._state, n)

  def getstate(self):
    return self._state.copy(), self.gauss_next

  def setstate(self, state):
    drbg_state, self.gauss_next = state
    self._state = drbg_state.copy()


__all__ = ["KatRng", "KatRandom"]
