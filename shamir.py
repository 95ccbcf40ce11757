import string
from typing import NamedTuple
import config

# ASCII digits and letters only, matched case by case
DIGIT_VALUES = {ch: int(ch, 36) for ch in string.digits + string.ascii_letters}


class ShareError(ValueError):
    """Base class for share decoding and reconstruction faults"""


class InvalidDigit(ShareError):
    pass


class InvalidBase(ShareError):
    pass


class DegenerateInterpolation(ShareError):
    pass


class MalformedShareCount(ShareError):
    pass


class Point(NamedTuple):
    x: int
    y: int


class Share(NamedTuple):
    index: int
    base: int
    digits: str

    def to_point(self) -> Point:
        return Point(self.index, decode(self.digits, self.base))


def decode(digits: str, base: int) -> int:
    """Convert a digit string in the given base to an exact integer"""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if not config.Config.MIN_BASE <= base <= config.Config.MAX_BASE:
        raise InvalidBase(
            f"Base {base} outside [{config.Config.MIN_BASE}, {config.Config.MAX_BASE}]"
        )
    if not digits:
        raise InvalidDigit("Empty digit string")

    result = 0
    for position, ch in enumerate(digits):
        value = DIGIT_VALUES.get(ch)
        if value is None or value >= base:
            raise InvalidDigit(
                f"Digit {ch!r} at position {position} is not valid in base {base}"
            )
        result = result * base + value
    return result


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Square-and-multiply modular exponentiation"""
    result = 1
    base %= mod
    while exp > 0:
        if exp & 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp >>= 1
    return result % mod


def mod_inverse(value: int, mod: int) -> int:
    """Inverse modulo a prime via Fermat's little theorem"""
    value %= mod
    if value == 0:
        raise DegenerateInterpolation("Zero has no modular inverse")
    return mod_pow(value, mod - 2, mod)


def reconstruct(points: list, modulus: int = config.Config.FIELD_PRIME) -> int:
    """Recover f(0) from points (x, y) by Lagrange interpolation mod a prime"""
    if modulus < 2:
        raise ValueError(f"Modulus must be a prime, got {modulus}")
    if not points:
        raise MalformedShareCount("Cannot reconstruct secret from zero shares")

    points = [Point(int(x), int(y)) for x, y in points]
    secret = 0
    for i, (x_i, y_i) in enumerate(points):
        y_i %= modulus

        num = 1
        den = 1
        for j, (x_j, _) in enumerate(points):
            if j == i:
                continue
            num = (num * -x_j) % modulus
            den = (den * (x_i - x_j)) % modulus

        if den == 0:
            raise DegenerateInterpolation(
                f"Share x={x_i} collides with another share modulo {modulus}"
            )

        term = (y_i * num) % modulus * mod_inverse(den, modulus) % modulus
        secret = (secret + term) % modulus

    return secret


class SecretReconstructor:
    """Threshold reconstruction of a secret from k shares"""

    def __init__(self, threshold: int, modulus: int = None):
        if threshold < 1:
            raise ValueError(f"Threshold must be at least 1, got {threshold}")
        self.threshold = threshold
        self.modulus = config.Config.FIELD_PRIME if modulus is None else modulus

    def recover_secret(self, points: list) -> int:
        """Recover the secret from exactly `threshold` points"""
        if len(points) != self.threshold:
            raise MalformedShareCount(
                f"Need exactly {self.threshold} shares, got {len(points)}"
            )
        return reconstruct(points, self.modulus)

    def recover_from_shares(self, shares: list) -> int:
        """Decode base-encoded shares and recover the secret"""
        return self.recover_secret([share.to_point() for share in shares])
