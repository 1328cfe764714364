from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from . import config
from .board import BoardShape
from .clue import apply_clues
from .errors import PuzzleError
from .parse import BoardSpec, parse_tiles
from .serialize import board_to_json


def _read_text(path: str) -> str:
    with open(path, encoding='utf-8') as f:
        return f.read()


def _default_shape(args: argparse.Namespace) -> Optional[BoardShape]:
    if args.columns is None and args.rows is None:
        return None
    columns = args.columns if args.columns is not None else args.rows
    rows = args.rows if args.rows is not None else args.columns
    return BoardShape(columns, rows)


def cmd_tiles(args: argparse.Namespace) -> int:
    tiles, shape = parse_tiles(_read_text(args.tiles), config.parse_side_order(args.order))
    if shape is None:
        shape = _default_shape(args)
    if shape is not None:
        print(f'Board: {shape.columns}x{shape.rows}')
    print(f'Loaded {len(tiles)} tiles.')
    for number, t in tiles.numbered():
        edges = ' '.join(str(int(e)) for e in t.edges)
        print(f'{number}:\t{edges}\t{t.classify()}')
    print(', '.join(f'{kind}: {n}' for kind, n in tiles.count_by_class()))
    return 0


def cmd_board(args: argparse.Namespace) -> int:
    spec = BoardSpec.parse(
        _read_text(args.tiles),
        config.parse_side_order(args.order),
        default_shape=_default_shape(args),
    )
    clues = spec.parse_clues(_read_text(args.clues), clockwise=args.clockwise)
    board = apply_clues(spec.new_board(), clues)
    if args.json:
        print(json.dumps(board_to_json(board)))
    else:
        print(board.pretty())
        print(f'\n{board.filled_count} of {spec.dimensions.cell_count} cells filled from {len(clues)} clues')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='eternity', description='Edge-matching puzzle tiles and clues')
    sub = parser.add_subparsers(dest='command', required=True)

    def common(p: argparse.ArgumentParser) -> None:
        p.add_argument('tiles', nargs='?' if config.tiles_path() else None,
                       default=config.tiles_path(), help='Tiles file')
        p.add_argument('--order', default=''.join(s.letter for s in config.side_order()),
                       help='Column order of the tile edges, e.g. NSWE (default NESW)')
        p.add_argument('--columns', type=int, default=None, help='Board columns when the tiles file has none')
        p.add_argument('--rows', type=int, default=None, help='Board rows when the tiles file has none')

    p_tiles = sub.add_parser('tiles', help='List the numbered tiles with their classification')
    common(p_tiles)
    p_tiles.set_defaults(func=cmd_tiles)

    p_board = sub.add_parser('board', help='Apply a clues file to a blank board')
    common(p_board)
    p_board.add_argument('--clues', default=config.clues_path(), required=config.clues_path() is None,
                         help='Clues file')
    p_board.add_argument('--clockwise', action='store_true', default=config.clockwise(),
                         help='Clue rotations count clockwise (default counter-clockwise)')
    p_board.add_argument('--json', action='store_true', help='Print the board as JSON')
    p_board.set_defaults(func=cmd_board)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (PuzzleError, ValueError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
