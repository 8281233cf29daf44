# src/move_name_matcher/demo.py
import argparse
import json
import logging
import os
import sys
from dataclasses import asdict


def main(argv=None):
    """CLI demo: load a dataset, pick each creature's best-matching moves, print them."""
    from .datasets import dataset_names, default_dataset_name, load_dataset, load_exemptions
    from .matching import best_matches
    from .presentation import filter_mapping, render_mapping
    from .utils import reload_topics

    parser = argparse.ArgumentParser(
        prog="move-matcher",
        description="Match creature names against move names by longest aligned run.",
    )
    parser.add_argument("--dataset", help="Dataset name (default: first registered)")
    parser.add_argument("--search", default="", help="Filter by creature or move substring")
    parser.add_argument("--list", action="store_true", help="List dataset names and exit")
    parser.add_argument("--json", action="store_true", help="Emit the mapping as JSON")
    parser.add_argument("--color", action="store_true", help="ANSI-highlight matched runs")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    if args.debug:
        os.environ["MOVE_MATCHER_DEBUG_TOPICS"] = "all"
        reload_topics()
        logging.basicConfig(level=logging.DEBUG)

    try:
        names = dataset_names()
        if args.list:
            print("\n".join(names))
            return 0

        dataset = load_dataset(args.dataset or default_dataset_name())
        mapping = best_matches(dataset.creatures, dataset.moves, load_exemptions())
        mapping = filter_mapping(mapping, args.search)

        if args.json:
            payload = {k: [asdict(r) for r in v] for k, v in mapping.items()}
            print(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            print(f"\n🎯 {dataset.name} → Best Moves\n")
            print(render_mapping(mapping, color=args.color))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    main()
