#!/usr/bin/python

import sys
import argparse
import logging

import kat


def main(argv=None, stdin=None, stdout=None):
  parser = argparse.ArgumentParser(description = "answer a KAT request file read from stdin with DRBG output per seed")

  parser.add_argument('-l', '--length', type=int, default=32, help = "bytes to generate per entry")
  parser.add_argument('-v', '--verbose', action='store_true')

  args = parser.parse_args(argv)

  if args.verbose:
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

  if args.length < 0:
    parser.error("length must be non-negative")

  if stdin is None:
    stdin = sys.stdin
  if stdout is None:
    stdout = sys.stdout

  try:
    kat.write_response(kat.process_request(kat.read_request(stdin), args.length), stdout)
  except kat.KatFormatError as e:
    sys.stderr.write(f"\n\n  {e}\n\n\n")
    return 1

  return 0


if __name__ == "__main__":
  sys.exit(main())
