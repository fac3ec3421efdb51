#!/usr/bin/python

import sys
import argparse
import logging

import kat

from randombytes import SEED_BYTES, DrbgError


def hex_bytes(value):
  try:
    return bytes.fromhex(value)
  except ValueError:
    raise argparse.ArgumentTypeError(f"not a hex string: {value!r}")


def main(argv=None):
  parser = argparse.ArgumentParser(description = "print the seeds of a NIST PQC KAT request file")

  parser.add_argument('-c', '--count', type=int, default=100, help = "number of entries")
  parser.add_argument('-e', '--entropy', type=hex_bytes, default=bytes(range(SEED_BYTES)), help = f"{SEED_BYTES} byte entropy input as hex")
  parser.add_argument('-p', '--personalization', type=hex_bytes, default=None, help = f"{SEED_BYTES} byte personalization string as hex")
  parser.add_argument('-f', '--field', action='append', default=[], help = "empty field to add to each entry")
  parser.add_argument('-v', '--verbose', action='store_true')

  args = parser.parse_args(argv)

  if args.verbose:
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

  if args.count < 0:
    parser.error("count must be non-negative")

  try:
    seeds = kat.generate_request_seeds(args.entropy, args.count, args.personalization)
  except DrbgError as e:
    parser.error(str(e))

  kat.write_request(seeds, sys.stdout, args.field)

  return 0


if __name__ == "__main__":
  sys.exit(main())
