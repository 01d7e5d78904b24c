# -------------------------------------
# nodeset CLI entry point
# -------------------------------------
"""
CLI entry point for the nodeset package.

Usage:
    python -m nodeset count -t 'node[1-10]' 'gpu[1-4]'
    python -m nodeset expand -s , 'rack[1-2]node[01-03]'
    python -m nodeset fold 'node[1-10],node[5-20]'
    python -m nodeset intersect 'node[1-50]' 'node[40-60]'
"""
import argparse
import sys

import yaml

from .config import load_config
from .errors import NodeSetError
from .nodeset import NodeSet


def _error(e: Exception) -> int:
    print(f"nodeset error: {e}", file=sys.stderr)
    return 1


def _count(args, cfg) -> int:
    total_mode = args.total or cfg["total"]
    total = 0
    for text in args.nodesets:
        try:
            ns = NodeSet.parse(text)
        except NodeSetError as e:
            return _error(e)
        if total_mode:
            total += ns.count()
        else:
            print(ns.count())
    if total_mode:
        print(total)
    return 0


def _expand(args, cfg) -> int:
    sep = args.separator if args.separator is not None else cfg["separator"]
    for text in args.nodesets:
        try:
            ns = NodeSet.parse(text)
        except NodeSetError as e:
            return _error(e)
        print(ns.expand(sep))
    return 0


def _fold(args, cfg) -> int:
    for text in args.nodesets:
        try:
            ns = NodeSet.parse(text)
        except NodeSetError as e:
            return _error(e)
        print(ns)
        if args.verbose:
            print(repr(ns))
    return 0


def _intersect(args, cfg) -> int:
    try:
        sets = [NodeSet.parse(text) for text in args.nodesets]
    except NodeSetError as e:
        return _error(e)
    acc = sets[0]
    for ns in sets[1:]:
        acc = acc.intersection(ns)
    print(acc)
    return 0


def _main(argv=None) -> int:
    p = argparse.ArgumentParser(
        prog="nodeset",
        description="Count, expand and fold cluster node sets such as 'rack[1-4]node[01-10]'.",
    )
    p.add_argument("--config", metavar="PATH", help="YAML config file (default: $NODESET_CONFIG or ~/.config/nodeset.yml)")
    sub = p.add_subparsers(dest="command", required=True)

    pc = sub.add_parser("count", help="Count the nodes in each nodeset")
    pc.add_argument("--total", "-t", action="store_true", default=False, help="Print one sum over all nodesets")
    pc.add_argument("nodesets", nargs="+")

    pe = sub.add_parser("expand", help="Expand each nodeset to individual node names")
    pe.add_argument("--separator", "-s", default=None, help="Separator between names (default: a space)")
    pe.add_argument("nodesets", nargs="+")

    pf = sub.add_parser("fold", help="Print each nodeset in folded form")
    pf.add_argument("--verbose", "-v", action="store_true", help="Also print the parsed structure")
    pf.add_argument("nodesets", nargs="+")

    pi = sub.add_parser("intersect", help="Fold the intersection of all nodesets")
    pi.add_argument("nodesets", nargs="+")

    args = p.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"nodeset config error: {e}", file=sys.stderr)
        return 2

    commands = {
        "count": _count,
        "expand": _expand,
        "fold": _fold,
        "intersect": _intersect,
    }
    return commands[args.command](args, cfg)


if __name__ == "__main__":
    raise SystemExit(_main())
