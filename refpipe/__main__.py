#!/usr/bin/env python3
"""
Command-line tool for sizing a refrigerant line made from copper tubing.

Example:
    python -m refpipe --refrigerant R134a --line-type liquid --capacity 60000 --length 50
"""
import argparse
import sys
from refpipe import Quantity
from refpipe.logging import ModuleLogger
from refpipe.fluids import list_refrigerants
from refpipe.line_type import LineType
from refpipe.refrigerant_piping import (
    SizingInput,
    try_size_line,
    evaluations_to_frame,
    format_table,
    format_selection,
    format_error
)

Q_ = Quantity


def _line_type(value: str) -> LineType:
    try:
        return LineType.parse(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='refpipe',
        description="Refrigerant copper line sizer"
    )
    parser.add_argument("--refrigerant", required=True,
                        help=f"Refrigerant ({', '.join(list_refrigerants())})")
    parser.add_argument("--line-type", type=_line_type, required=True, dest="line_type",
                        help="Line type: liquid, suction or discharge")
    parser.add_argument("--capacity", type=float, required=True,
                        help="System cooling capacity in BTU/h")
    parser.add_argument("--length", type=float, required=True,
                        help="Equivalent line length in ft")
    parser.add_argument("--rise", type=float, default=0.0,
                        help="Vertical rise in ft (default: 0, horizontal run)")
    parser.add_argument("--t-evp", type=float, default=None, dest="T_evp",
                        help="Evaporating temperature in °F (informative only)")
    parser.add_argument("--t-cnd", type=float, default=None, dest="T_cnd",
                        help="Condensing temperature in °F (informative only)")
    parser.add_argument("--t-liq", type=float, default=None, dest="T_liq",
                        help="Liquid temperature in °F (informative only)")
    parser.add_argument("--csv", default=None,
                        help="Write the evaluations of all copper tubes to this CSV file")
    parser.add_argument("--verbose", action="store_true",
                        help="Log the calculation of each copper tube")
    return parser


def _temperature(value: float | None) -> Quantity | None:
    if value is None:
        return None
    return Q_(value, 'degF')


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    if args.verbose:
        ModuleLogger.set_level(ModuleLogger.DEBUG)

    sizing_input = SizingInput(
        refrigerant=args.refrigerant,
        line_type=args.line_type,
        Q_dot=Q_(args.capacity, 'Btu / hr'),
        L_eq=Q_(args.length, 'ft'),
        elevation=Q_(args.rise, 'ft'),
        T_evp=_temperature(args.T_evp),
        T_cnd=_temperature(args.T_cnd),
        T_liq=_temperature(args.T_liq)
    )
    outcome = try_size_line(sizing_input)
    if not outcome.ok:
        print(format_error(outcome), file=sys.stderr)
        return 1

    print(format_table(outcome.result))
    print()
    print(format_selection(outcome.result))
    if args.csv is not None:
        evaluations_to_frame(outcome.result).to_csv(args.csv, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
