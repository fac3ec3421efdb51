"""Reading and writing NIST PQC known answer test files.

Request files (``.req``) list one entry per ``count`` with the 48 byte seed
the test harness feeds to ``randombytes_init``; response files (``.rsp``)
repeat the entry with the produced values, all as ``name = value`` lines.
"""

import logging

import parse

from randombytes import DrbgState, SEED_BYTES, drbg_generate


class KatFormatError(ValueError):
  pass


def generate_request_seeds(entropy=bytes(range(SEED_BYTES)), count=100, personalization=None):
  state = DrbgState.from_entropy(entropy, personalization)

  return [drbg_generate(state, SEED_BYTES) for _ in range(count)]


def write_request(seeds, out, fields=()):
  for i, seed in enumerate(seeds):
    out.write(f"count = {i}\n")
    out.write(f"seed = {seed.hex().upper()}\n")

    for name in fields:
      out.write(f"{name} =\n")

    out.write("\n")


def read_request(lines):
  count = None

  for lineno, line in enumerate(lines, 1):
    line = line.strip()

    if not line or line.startswith("#"):
      continue

    name = line.partition("=")[0].strip()

    if name == "count":
      parsed = parse.parse("count = {count:d}", line)

      if parsed is None:
        raise KatFormatError(f"line {lineno}: malformed count: {line!r}")

      count = parsed['count']
    elif name == "seed":
      parsed = parse.parse("seed = {seed}", line)

      if parsed is None or count is None:
        raise KatFormatError(f"line {lineno}: seed without count: {line!r}")

      try:
        seed = bytes.fromhex(parsed['seed'])
      except ValueError as e:
        raise KatFormatError(f"line {lineno}: seed is not hex: {line!r}") from e

      if len(seed) != SEED_BYTES:
        raise KatFormatError(f"line {lineno}: seed must be {SEED_BYTES} bytes, got {len(seed)}")

      yield count, seed
    else:
      logging.debug("line %i ignored: %s", lineno, line)


def process_request(entries, length):
  for count, seed in entries:
    state = DrbgState.from_entropy(seed)

    yield {
      "count": count,
      "seed": seed,
      "len": length,
      "bytes": drbg_generate(state, length),
    }


def write_response(entries, out):
  for entry in entries:
    for name, value in entry.items():
      if isinstance(value, (bytes, bytearray)):
        value = value.hex().upper()

      out.write(f"{name} = {value}\n")

    out.write("\n")
