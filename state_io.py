"""Flat byte layout of a DrbgState: key || V || generation count (8 bytes, big endian)."""

from randombytes import DrbgState, InvalidSeedLength, KEY_BYTES, V_BYTES

COUNT_BYTES = 8
STATE_BYTES = KEY_BYTES + V_BYTES + COUNT_BYTES


def dump_state(state):
  return bytes(state.key) + bytes(state.counter) + state.generation_count.to_bytes(COUNT_BYTES, "big")


def load_state(data):
  data = bytes(data)

  if len(data) != STATE_BYTES:
    raise InvalidSeedLength("state", len(data), STATE_BYTES)

  key = data[:KEY_BYTES]
  v = data[KEY_BYTES:KEY_BYTES + V_BYTES]
  count = int.from_bytes(data[KEY_BYTES + V_BYTES:], "big")

  return DrbgState(key, v, count)


def to_dict(state):
  return {
    "key": state.key.hex(),
    "counter": state.counter.hex(),
    "generation_count": state.generation_count,
  }


def from_dict(d):
  return DrbgState(bytes.fromhex(d["key"]), bytes.fromhex(d["counter"]), int(d["generation_count"]))
