#!/usr/bin/python

from dataclasses import dataclass

@dataclass(frozen=True)
class Param:
  key_bytes: int
  block_bytes: int
  security_strength: int

  _name: str=None

  def __str__(self):
    return self.name

  @property
  def name(self):
    if self._name:
      return self._name
    else:
      return f"AES{self.key_bytes*8}_CTR_DRBG"

  @property
  def seed_bytes(self):
    return self.key_bytes + self.block_bytes


AES256_CTR_DRBG = Param(key_bytes = 256 >> 3,
                        block_bytes = 128 >> 3,
                        security_strength = 256)

params = [AES256_CTR_DRBG]

par_list = {str(param) : param for param in params}


if __name__ == "__main__":
  for param in params:
    print(f"{param.name}: key {param.key_bytes} bytes, block {param.block_bytes} bytes, seed {param.seed_bytes} bytes, strength {param.security_strength}")
