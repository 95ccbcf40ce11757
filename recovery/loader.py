import json
import os
from shamir import Share, MalformedShareCount


class CaseFormatError(ValueError):
    pass


class ShareCase:
    """One reconstruction case: declared (n, k) plus the available shares"""

    def __init__(self, source, n: int, k: int, shares: list):
        self.source = source
        self.n = n
        self.k = k
        self.shares = sorted(shares, key=lambda share: share.index)

    def select_shares(self) -> list:
        """Pick the k lowest-indexed shares"""
        if len(self.shares) < self.k:
            raise MalformedShareCount(
                f"Not enough shares. Need {self.k}, got {len(self.shares)}"
            )
        return self.shares[:self.k]

    def __repr__(self):
        return f"ShareCase({self.source!r}, n={self.n}, k={self.k}, shares={len(self.shares)})"


def parse_int(value, field, source):
    # bases arrive as strings in case files
    if isinstance(value, bool):
        raise CaseFormatError(f"{source}: '{field}' must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise CaseFormatError(f"{source}: '{field}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise CaseFormatError(f"{source}: '{field}' must be an integer, got {value!r}")


def parse_case(data: dict, source="<memory>") -> ShareCase:
    if not isinstance(data, dict):
        raise CaseFormatError(f"{source}: case must be a JSON object")
    keys = data.get("keys")
    if not isinstance(keys, dict) or "k" not in keys:
        raise CaseFormatError(f"{source}: missing 'keys' with 'k'")

    k = parse_int(keys["k"], "k", source)
    n = parse_int(keys.get("n", k), "n", source)
    if k < 1:
        raise CaseFormatError(f"{source}: 'k' must be at least 1, got {k}")

    shares = []
    for name, entry in data.items():
        if name == "keys":
            continue
        index = parse_int(name, "share index", source)
        if index < 1:
            raise CaseFormatError(f"{source}: share index must be positive, got {index}")
        if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
            raise CaseFormatError(f"{source}: share {name} needs 'base' and 'value'")
        shares.append(Share(
            index=index,
            base=parse_int(entry["base"], f"{name}.base", source),
            digits=str(entry["value"])
        ))

    return ShareCase(source, n, k, shares)


def load_case(path) -> ShareCase:
    """Read a case file from disk"""
    if not os.path.exists(path):
        raise CaseFormatError(f"Could not open {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CaseFormatError(f"{path}: {e}")
    return parse_case(data, source=str(path))
