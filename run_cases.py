import sys
from tabulate import tabulate
from recovery.solver import ResultTracker, solve_files
import config


def print_header(title):
    print("\n" + "=" * 60)
    print(f" {title}")
    print("=" * 60)


def print_summary(tracker):
    rows = []
    for result in tracker.results:
        status = result.secret if result.ok else f"FAILED: {result.error}"
        rows.append([result.source, result.k, result.n, status])

    print_header("Reconstruction Summary")
    print(tabulate(rows, headers=["Case", "k", "n", "Secret"], tablefmt="grid"))
    print(f"{len(tracker.succeeded)} recovered, {len(tracker.failed)} failed")


def main(argv=None):
    argv = sys.argv if argv is None else argv
    save = "--save" in argv[1:]
    paths = [arg for arg in argv[1:] if arg != "--save"]
    if not paths:
        print(f"Usage: {argv[0]} [--save] <case1.json> <case2.json> ...", file=sys.stderr)
        return 1

    tracker = ResultTracker()
    for result in solve_files(paths, config.Config.FIELD_PRIME):
        tracker.record(result)
        if result.ok:
            print(f"{result.source} -> Recovered Secret = {result.secret}")
        else:
            print(f"Error: {result.source}: {result.error}", file=sys.stderr)

    print_summary(tracker)
    if save:
        print(f"Results saved to {tracker.save()}")

    return 0 if not tracker.failed else 2


if __name__ == "__main__":
    sys.exit(main())
