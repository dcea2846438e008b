"""ffarith is a Python package for exact finite field and modular arithmetic.

Two families of rings are supported: the integers modulo n, and polynomials
over GF(2) with coefficients packed into the bits of an integer, optionally
reduced modulo a fixed polynomial m(x). Next to the ring operations, both
families come with their number theory: extended Euclid, Euler's totient,
factorization into primes (respectively, irreducible polynomials), divisor
enumeration, multiplicative orders and searches for generators.

Polynomials over GF(2) are factored from scratch with Berlekamp's algorithm,
using Gaussian elimination over GF(2) on packed bit vectors to extract the
nullspace of the Frobenius-minus-identity map.

The arithmetic capability contract in module numeric lets an expression
evaluator drive any of the five supported rings without knowing which ring
it is.
"""

__version__ = '0.3.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


class InvariantError(AssertionError):
    """Internal consistency check failed (for instance, inside Berlekamp's algorithm).

    Raised only on paths that are mathematically unreachable for valid inputs.
    Not an ArithmeticError or ValueError: handlers for domain errors do not catch it.
    """


def get_arg_parser():
    """Return parser for command line arguments recognized by ffarith."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('ffarith parameters')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--phi-cache-size', type=str, metavar='n',
                       help='maximum number of cached totients (0 disables, none is unbounded)')

    parser.set_defaults(log_level='warning')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.CRITICAL)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    # Pass the totient cache size on to module intarith (and subprocesses) via the environment.
    if options.phi_cache_size is not None and not os.getenv('FFARITH_PHI_CACHE_SIZE'):
        os.environ['FFARITH_PHI_CACHE_SIZE'] = options.phi_cache_size
    logging.debug(f'Totient cache size set to {os.getenv("FFARITH_PHI_CACHE_SIZE", "default")}')

    del options
