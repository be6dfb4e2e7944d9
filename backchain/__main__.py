"""
CLI entry point. Run as: python -m backchain --domain <name>
"""

import argparse

from .inference.prove import Prover, answer
from .visualization import print_answer, print_knowledge_base, print_trace
from .domains import DOMAINS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Backward-chaining prover demos")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="family",
        help="Which demo knowledge base to query",
    )
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Fail goals nested deeper than this (default: unbounded)")
    parser.add_argument("--trace",  action="store_true", help="Print the search trace after each query")
    parser.add_argument("--quiet",  action="store_true", help="Less output")
    args = parser.parse_args(argv)

    domain = DOMAINS[args.domain]
    kb = domain["make_kb"]()

    print(f"Domain: {args.domain} -- {domain['description']}")
    if not args.quiet:
        print_knowledge_base(kb)

    proved = 0
    for goal in domain["queries"]:
        prover = Prover(kb, max_depth=args.max_depth, verbose=not args.quiet and not args.trace,
                        keep_trace=args.trace)
        result = prover.ask(goal)
        bindings = answer(goal, result)
        print_answer(goal, bindings)
        if prover.depth_limit_hit and result is None:
            print(f"    (depth limit {args.max_depth} reached)")
        if args.trace:
            print_trace(prover.trace)
        if result is not None:
            proved += 1

    print(f"\n{proved}/{len(domain['queries'])} queries proved.")
    return 0


if __name__ == "__main__":
    main()
