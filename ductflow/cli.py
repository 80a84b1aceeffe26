import argparse
import sys
from typing import Dict, List, Optional
from .calculator import DuctCalculator, INPUT_FIELDS, OUTPUT_FIELDS
from .exceptions import DuctFlowError
from .fluids import FluidProperties
from .formatting import DEFAULT_PRECISION
from .logging import ModuleLogger
from .units import PhysicalQuantity, UNIT_REGISTRY

logger = ModuleLogger.get_logger(__name__, log_level=ModuleLogger.INFO)

LABELS = {
    'cross_section': 'cross-section',
    'circumference': 'circumference',
    'hydraulic_diameter': 'hydraulic diameter',
    'velocity': 'velocity',
    'reynolds': 'Reynolds number',
    'friction_factor': 'friction factor',
    'friction_loss': 'friction loss',
    'pressure_drop': 'pressure drop'
}


def _parse_output_units(items: List[str]) -> Dict[str, str]:
    units = {}
    for item in items:
        name, sep, unit = item.partition('=')
        if not sep or not unit:
            raise argparse.ArgumentTypeError(
                f"expected FIELD=UNIT, got '{item}'"
            )
        units[name.strip()] = unit.strip()
    return units


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ductflow',
        description=(
            'Friction pressure drop of air or water flowing through a '
            'straight rectangular duct.'
        )
    )
    for name in INPUT_FIELDS:
        parser.add_argument(
            f'--{name}',
            nargs=2,
            metavar=('VALUE', 'UNIT'),
            help=f'{name} of the duct' if name != 'flow' else 'volume flow rate'
        )
    parser.add_argument(
        '--unit',
        action='append',
        default=[],
        metavar='FIELD=UNIT',
        help=f"display unit of an output field ({', '.join(OUTPUT_FIELDS)})"
    )
    parser.add_argument(
        '--fluid',
        default='air',
        type=str.lower,
        choices=FluidProperties.names(),
        help='reference fluid (default: air)'
    )
    parser.add_argument(
        '--precision',
        type=int,
        default=DEFAULT_PRECISION,
        help='approximate number of significant digits (default: %(default)s)'
    )
    parser.add_argument(
        '--list-units',
        action='store_true',
        help='list the available units and exit'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='show debug messages'
    )
    return parser


def list_units() -> str:
    lines = []
    for quantity in PhysicalQuantity:
        symbols = ', '.join(UNIT_REGISTRY.symbols(quantity))
        lines.append(f'{quantity.value}: {symbols}')
    return '\n'.join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        ModuleLogger.set_level(ModuleLogger.DEBUG)
    if args.list_units:
        print(list_units())
        return 0
    try:
        output_units = _parse_output_units(args.unit)
    except argparse.ArgumentTypeError as err:
        parser.error(str(err))
    inputs = {
        name: tuple(getattr(args, name))
        for name in INPUT_FIELDS
        if getattr(args, name) is not None
    }
    calculator = DuctCalculator(fluid=args.fluid, precision=args.precision)
    try:
        result = calculator.calculate(inputs, output_units)
    except DuctFlowError as err:
        logger.error(err)
        return 1
    logger.debug(f"flow regime: {result.flow_state.regime.value}")
    for name, output in result.outputs.items():
        unit = '' if output.unit == '-' else f' {output.unit}'
        print(f'{LABELS[name]}: {output.text}{unit}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
