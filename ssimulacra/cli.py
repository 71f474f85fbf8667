# cli.py
"""
Command-line interface for ssimulacra.

Loads both images, scores them and prints the result; optionally writes the
diagnostic heatmaps.
"""
import argparse
import logging
import os

from .decoder import load_image
from .diagnostics import write_diagnostics
from .errors import SsimulacraError
from .metric import evaluate
from .utils import setup_logging

EPILOG = (
    'Returns a value between 0 (images are identical) and 1 (images are very different). '
    'If the value is above 0.1 (or so), the distortion is likely to be perceptible / annoying. '
    'If the value is below 0.01 (or so), the distortion is likely to be imperceptible.'
)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Perceptual distance between an original and a distorted image.',
        epilog=EPILOG
    )
    parser.add_argument('original', help='Original image file')
    parser.add_argument('distorted', help='Distorted image file')
    parser.add_argument(
        'prefix', nargs='?',
        help='Write <prefix>.edgediff.png and <prefix>.ssim.png difference images'
    )
    parser.add_argument('--log-file', help='Log file path')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    for path in (args.original, args.distorted):
        if not os.path.isfile(path):
            logging.error('Input file not found: %s', path)
            return 1

    try:
        original = load_image(args.original)
        distorted = load_image(args.distorted)
        result = evaluate(original, distorted, keep_maps=args.prefix is not None)
    except SsimulacraError as exc:
        logging.error('%s vs %s: %s', args.original, args.distorted, exc)
        return 1

    if args.prefix:
        write_diagnostics(result, args.prefix)

    print(f"{result.score:.8f}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
