import argparse
import logging
import os
import sys

import numpy as np

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from sgftree import sgf_io
from sgftree.sgf_grammar import parse_collection
from sgftree.sgf_tree import Game_tree, iter_game_trees, main_sequence_iter, node_count, variation_depth

logger = logging.getLogger(__name__)


@dataclass
class Game_stats:
    source: str
    node_count: int
    main_line_length: int
    variation_count: int
    variation_depth: int


def game_stats(game_tree: Game_tree, source: str = "") -> Game_stats:
    """Measure the size and shape of one parsed game."""
    return Game_stats(
        source=source,
        node_count=node_count(game_tree),
        main_line_length=sum(1 for _ in main_sequence_iter(game_tree)),
        # Every tree below the root is one variation.
        variation_count=sum(1 for _ in iter_game_trees(game_tree)) - 1,
        variation_depth=variation_depth(game_tree),
    )


def collect_sgf_files(input_file_or_dir: str, recursive: bool = False) -> List[str]:
    """Return the .sgf/.sgfs files named by 'input_file_or_dir', sorted, without duplicates."""
    if not os.path.exists(input_file_or_dir):
        raise FileNotFoundError(f"There is no file or directory with name: {input_file_or_dir}")

    files = []
    if os.path.isdir(input_file_or_dir):
        if recursive:
            for (dirpath, dirnames, filenames) in os.walk(input_file_or_dir):
                files += [os.path.join(dirpath, file) for file in filenames if sgf_io.is_sgf_file(file)]
        else:
            files = [
                os.path.join(input_file_or_dir, file)
                for file in os.listdir(input_file_or_dir)
                if sgf_io.is_sgf_file(file) and os.path.isfile(os.path.join(input_file_or_dir, file))
            ]
    elif sgf_io.is_sgf_file(input_file_or_dir):
        files.append(input_file_or_dir)
    return sorted(set(files))


def stats_from_file(path: str, encoding: Optional[str] = None) -> List[Game_stats]:
    """Parse every game in an .sgf or .sgfs file.

    In an .sgfs file each damaged line is logged and skipped, and the other
    games are kept.

    Raises ValueError if an .sgf file can't be parsed.

    """
    if not path.lower().endswith(".sgfs"):
        collection = parse_collection(sgf_io.read_sgf_text(path, encoding))
        return [game_stats(game_tree, path) for game_tree in collection]

    stats = []
    for line_number, text in sgf_io.iter_sgfs_lines(path, encoding):
        try:
            collection = parse_collection(text)
        except ValueError:
            logger.warning(f"A sgf string is damaged in {path} line {line_number}, and its record has been skipped!")
            continue
        stats.extend(game_stats(game_tree, path) for game_tree in collection)
    return stats


def summarize(stats: Sequence[Game_stats]) -> Dict[str, float]:
    """Combine per-game stats into totals and averages."""
    if not stats:
        return {"games": 0, "nodes": 0}
    nodes = np.array([s.node_count for s in stats], dtype=np.int64)
    main_lines = np.array([s.main_line_length for s in stats], dtype=np.int64)
    depths = np.array([s.variation_depth for s in stats], dtype=np.int64)
    variations = np.array([s.variation_count for s in stats], dtype=np.int64)
    return {
        "games": len(stats),
        "nodes": int(nodes.sum()),
        "mean_nodes": float(nodes.mean()),
        "max_nodes": int(nodes.max()),
        "mean_main_line": float(main_lines.mean()),
        "max_variation_depth": int(depths.max()),
        "games_with_variations": int(np.count_nonzero(variations)),
        "variations": int(variations.sum()),
    }


def main(argv=None):
    description = """
    Summarize SGF/SGFs files: count games, nodes and variations.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "input-files-or-dirs",
        help="sgf/sgfs files or directories of them",
        nargs="+",
    )
    parser.add_argument(
        "-recursive",
        help="Recursively search subdirectories of input directories",
        required=False,
        action="store_true",
    )
    parser.add_argument(
        "-encoding",
        help="Assume this encoding instead of reading it from the CA property",
        required=False,
        default=None,
    )
    parser.add_argument(
        "-verbose",
        help="Log debugging output",
        required=False,
        action="store_true",
    )
    args = vars(parser.parse_args(argv))

    logging.root.handlers = []
    logging.basicConfig(
        level=logging.DEBUG if args["verbose"] else logging.INFO,
        format="%(asctime)s %(message)s",
        handlers=[
            logging.StreamHandler(stream=sys.stdout)
        ],
    )

    files = []
    for input_file_or_dir in args["input-files-or-dirs"]:
        new_files = collect_sgf_files(input_file_or_dir, recursive=args["recursive"])
        logger.info(f"Found {len(new_files)} game files in {input_file_or_dir}")
        files += new_files
    files = sorted(set(files))

    stats = []
    skipped = 0
    for path in files:
        try:
            stats += stats_from_file(path, args["encoding"])
        except ValueError as e:
            skipped += 1
            logger.warning(f"Skipping {path}: {e}")

    summary = summarize(stats)
    logger.info(f"Files: {len(files)} (skipped {skipped})")
    for key, value in summary.items():
        if isinstance(value, float):
            logger.info(f"{key}: {value:.2f}")
        else:
            logger.info(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
