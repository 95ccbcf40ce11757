import json
import os
import time
import config
from shamir import SecretReconstructor, ShareError
from recovery.loader import CaseFormatError, load_case


class CaseResult:
    def __init__(self, source, secret=None, error=None, k=None, n=None):
        self.source = source
        self.secret = secret
        self.error = error
        self.k = k
        self.n = n

    @property
    def ok(self):
        return self.error is None

    def to_dict(self):
        return {
            "source": self.source,
            "k": self.k,
            "n": self.n,
            "secret": self.secret,
            "error": self.error
        }


def solve_case(case, modulus: int = None) -> int:
    """Decode the selected shares of a case and reconstruct its secret"""
    reconstructor = SecretReconstructor(case.k, modulus)
    return reconstructor.recover_from_shares(case.select_shares())


def solve_files(paths, modulus: int = None):
    """Yield one CaseResult per file; a failing case does not stop the rest"""
    for path in paths:
        case = None
        try:
            case = load_case(path)
            secret = solve_case(case, modulus)
        except (ShareError, CaseFormatError) as e:
            yield CaseResult(
                str(path),
                error=str(e),
                k=case.k if case else None,
                n=case.n if case else None
            )
            continue
        yield CaseResult(str(path), secret=secret, k=case.k, n=case.n)


class ResultTracker:
    def __init__(self, results_file=None):
        self.results_file = results_file or config.Config.RESULTS_FILE
        self.results = []
        self.started = time.time()

    def record(self, result: CaseResult):
        self.results.append(result)
        return result

    @property
    def succeeded(self):
        return [r for r in self.results if r.ok]

    @property
    def failed(self):
        return [r for r in self.results if not r.ok]

    def save(self):
        directory = os.path.dirname(self.results_file)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(self.results_file, "w") as f:
            json.dump({
                "start_time": self.started,
                "end_time": time.time(),
                "results": [r.to_dict() for r in self.results]
            }, f, indent=2)
        return self.results_file
