import copy
import pickle

import pytest

from randombytes import DrbgState, InvalidSeedLength, drbg_generate
from rng import KatRandom, KatRng


def test_fill_bytes():
  rng = KatRng.from_seed(bytes(48))
  buf = bytearray(8)

  rng.fill_bytes(buf)

  assert buf == bytes.fromhex("91618fe99a8f9420")
  assert rng.randbytes(4) == bytes.fromhex("f9c12994")


def test_fill_bytes_memoryview():
  rng = KatRng.from_seed(bytes(48))
  buf = bytearray(20)

  rng.fill_bytes(memoryview(buf)[4:12])

  assert buf == bytes(4) + bytes.fromhex("91618fe99a8f9420") + bytes(8)


def test_next_u32_u64_little_endian():
  rng = KatRng.from_seed(bytes(48))
  assert rng.next_u64() == int.from_bytes(bytes.fromhex("91618fe99a8f9420"), "little")
  assert rng.next_u32() == 0x9429c1f9


def test_from_seed_matches_state():
  seed = bytes(range(48))
  rng = KatRng.from_seed(seed, bytes(48))

  assert rng.state == DrbgState.from_entropy(seed)


def test_from_seed_length():
  with pytest.raises(InvalidSeedLength):
    KatRng.from_seed(bytes(32))


def test_random_draws_from_drbg():
  r = KatRandom(bytes(48))

  assert r.randbytes(8) == bytes.fromhex("91618fe99a8f9420")
  assert r.getrandbits(32) == 0xf9c12994


def test_getrandbits_masks_top_bits():
  r = KatRandom(bytes(48))

  assert r.getrandbits(12) == 0x9161 >> 4
  assert r.getrandbits(0) == 0


def test_random_api():
  a = KatRandom(bytes(range(48)))
  b = KatRandom(bytes(range(48)))

  values = [a.random() for _ in range(10)]

  assert values == [b.random() for _ in range(10)]
  assert all(0.0 <= v < 1.0 for v in values)

  assert a.randint(1, 6) == b.randint(1, 6)

  items_a, items_b = list(range(20)), list(range(20))
  a.shuffle(items_a)
  b.shuffle(items_b)
  assert items_a == items_b
  assert sorted(items_a) == list(range(20))


def test_random_personalization():
  a = KatRandom(bytes(48), bytearray(range(48)))
  state = DrbgState.from_entropy(bytes(48), bytes(range(48)))

  assert a.randbytes(16) == drbg_generate(state, 16)


def test_random_state_roundtrip():
  r = KatRandom(bytes(range(48)))
  r.random()

  saved = r.getstate()
  expected = [r.random() for _ in range(3)]

  r.setstate(saved)
  assert [r.random() for _ in range(3)] == expected


def test_random_needs_seed():
  r = KatRandom(bytes(48))

  with pytest.raises(TypeError):
    r.seed()


@pytest.mark.parametrize("seed", [48, 42])
def test_random_rejects_integer_seed(seed):
  with pytest.raises(TypeError):
    KatRandom(seed)


def test_random_accepts_list_seed():
  assert KatRandom(list(range(48))).randbytes(16) == KatRandom(bytes(range(48))).randbytes(16)


def test_random_copy_and_pickle():
  r = KatRandom(bytes(range(48)))
  r.random()

  copied = copy.copy(r)
  restored = pickle.loads(pickle.dumps(r))

  expected = [r.random() for _ in range(3)]

  assert [copied.random() for _ in range(3)] == expected
  assert [restored.random() for _ in range(3)] == expected
