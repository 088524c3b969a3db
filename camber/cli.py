"""
Camber Command Line Interface

Command-line tools for sampling easing functions and polynomials and for
plotting the easing function gallery.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .api import evaluate_polynomial, plot_easing_functions, sample_easing
from .core.ease import DEGREES, FAMILIES, easing_names
from .exceptions import CamberError, DependencyError, EasingNotFoundError
from .utils.logging import setup_logging
from .utils.sampling import CurveSamples

logger = logging.getLogger(__name__)


def setup_cli_logging(verbose: int = 0):
    """Setup logging for CLI with appropriate verbosity"""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    setup_logging(level)


def print_success(message: str):
    print(f"✅ {message}")


def print_error(message: str):
    print(f"❌ {message}", file=sys.stderr)


def print_info(message: str):
    print(f"🔹 {message}")


def _emit_samples(samples: CurveSamples, output: Optional[str]):
    """Print samples as t/f(t) columns, or write them as JSON"""
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(samples.to_dict(), f, indent=2)
        print_info(f"{len(samples)} samples of {samples.label} saved to: {output_path}")
    else:
        for t, y in samples:
            print(f"{t:.17g}\t{y:.17g}")


def sample_command(args):
    """Handle easing sampling command"""
    try:
        samples = sample_easing(
            args.easing,
            numel=args.numel,
            sampler="stepper" if args.stepper else "linspace"
        )
        _emit_samples(samples, args.output)
        return 0

    except EasingNotFoundError as e:
        print_error(str(e))
        print_info("Run 'camber list' to see available easing functions")
        return 1


def poly_command(args):
    """Handle polynomial evaluation command"""
    samples = evaluate_polynomial(
        args.coefficients,
        start=args.start,
        end=args.end,
        numel=args.numel
    )
    _emit_samples(samples, args.output)
    return 0


def plot_command(args):
    """Handle plotting command"""
    families = args.family or list(FAMILIES)
    print_info(f"Plotting {', '.join(families)} to {args.output_dir}")

    try:
        paths = plot_easing_functions(
            families=families,
            output_dir=args.output_dir,
            file_format=args.format,
            numel=args.numel,
            include_poly_demo=args.poly_demo
        )
    except DependencyError:
        print_error("Visualization dependencies not available. Install with: pip install camber[visualization]")
        return 1

    print_success(f"Wrote {len(paths)} figures")
    return 0


def list_command(args):
    """Handle list command"""
    for name in easing_names():
        print(name)
    if args.all:
        for family in FAMILIES:
            print(f"{family}_i:<degree>")
    return 0


def info_command(args):
    """Handle info command"""
    print(f"Camber v{__version__}")
    print(f"   Python: {sys.version.split()[0]}")
    print(f"   Easing families: {', '.join(FAMILIES)} (degrees {DEGREES[0]}-{DEGREES[-1]})")

    print("\n📦 Dependencies:")
    dependencies = [
        ('numpy', 'numpy'),
        ('scipy', 'scipy'),
        ('matplotlib', 'matplotlib'),
        ('seaborn', 'seaborn'),
    ]

    for name, module in dependencies:
        try:
            mod = __import__(module)
            version = getattr(mod, '__version__', 'unknown')
            print(f"   ✅ {name}: {version}")
        except ImportError:
            print(f"   ❌ {name}: not installed")

    return 0


def create_parser():
    """Create the main argument parser"""

    parser = argparse.ArgumentParser(
        prog='camber',
        description='Easing functions, polynomials and ranges for shaping curves',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sample an easing function at 5 evenly spaced points
  camber sample smooth_step_3 --numel 5

  # Any integer degree through the parameterized form
  camber sample smooth_stop_i:12 --numel 20 --output stop12.json

  # Evaluate x^2 + 6x + 3 on [0, 1]
  camber poly 1 6 3 --start 0 --end 1 --numel 11

  # Write the gallery of easing plots
  camber plot --family smooth_start smooth_stop --output-dir img
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'Camber {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (use -v, -vv for more verbose output)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Sample command
    sample_parser = subparsers.add_parser(
        'sample',
        help='Sample an easing function over [0, 1]'
    )
    sample_parser.add_argument(
        'easing',
        help='Easing function name, e.g. smooth_step_3 or smooth_start_i:12'
    )
    sample_parser.add_argument(
        '--numel', '-n',
        type=int,
        default=11,
        help='Number of samples (default: 11)'
    )
    sample_parser.add_argument(
        '--stepper',
        action='store_true',
        help='Use the fixed step sampler instead of linspace'
    )
    sample_parser.add_argument(
        '--output', '-o',
        help='Write samples to a JSON file'
    )

    # Poly command
    poly_parser = subparsers.add_parser(
        'poly',
        help='Evaluate a polynomial from its coefficients'
    )
    poly_parser.add_argument(
        'coefficients',
        nargs='*',
        type=float,
        help='Coefficients from the highest degree down to the constant term'
    )
    poly_parser.add_argument(
        '--start',
        type=float,
        default=-1.0,
        help='First x value (default: -1)'
    )
    poly_parser.add_argument(
        '--end',
        type=float,
        default=1.0,
        help='Last x value (default: 1)'
    )
    poly_parser.add_argument(
        '--numel', '-n',
        type=int,
        default=11,
        help='Number of samples (default: 11)'
    )
    poly_parser.add_argument(
        '--output', '-o',
        help='Write samples to a JSON file'
    )

    # Plot command
    plot_parser = subparsers.add_parser(
        'plot',
        help='Plot easing functions to image files'
    )
    plot_parser.add_argument(
        '--family', '-f',
        nargs='+',
        choices=FAMILIES,
        help='Families to plot (default: all)'
    )
    plot_parser.add_argument(
        '--output-dir', '-o',
        default='img',
        help='Output directory (default: img)'
    )
    plot_parser.add_argument(
        '--format',
        choices=['svg', 'png', 'pdf'],
        default='svg',
        help='Image format (default: svg)'
    )
    plot_parser.add_argument(
        '--numel', '-n',
        type=int,
        default=200,
        help='Samples per curve (default: 200)'
    )
    plot_parser.add_argument(
        '--poly-demo',
        action='store_true',
        help='Also plot the polynomial demo figures'
    )

    # List command
    list_parser = subparsers.add_parser(
        'list',
        help='List available easing functions'
    )
    list_parser.add_argument(
        '--all', '-a',
        action='store_true',
        help='Include the parameterized forms'
    )

    # Info command
    subparsers.add_parser(
        'info',
        help='Show version and dependency information'
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_cli_logging(args.verbose)

    try:
        if args.command == 'sample':
            return sample_command(args)
        elif args.command == 'poly':
            return poly_command(args)
        elif args.command == 'plot':
            return plot_command(args)
        elif args.command == 'list':
            return list_command(args)
        elif args.command == 'info':
            return info_command(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print_info("Operation cancelled by user")
        return 1
    except CamberError as e:
        print_error(str(e))
        return 1
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        if args.verbose >= 2:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
