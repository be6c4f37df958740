#!/usr/bin/env python3

"""query the case folding and General Category tables of Unikit"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from argparse import ArgumentParser
import logging
import os
import sys

from unikit import Init, IsValidCodepoint, UnikitError
from unikit.category import Name
from unikit.report import CategoryRuns, FormatRun, ParseCategory, ParseCodepoint, \
    Transliterate

__version__ = '1.0.0'


def fold(context, args):
    if not IsValidCodepoint(args.codepoint):
        raise ValueError('codepoint out of range')

    print(context.fold(args.codepoint))


def gencat(context, args):
    code = context.category(args.codepoint)
    ascii = Transliterate(args.codepoint, code)

    if ascii:
        print(Name(code), ascii, sep="\t")
    else:
        print(Name(code))


def gentab(context, args):
    for run in CategoryRuns(context):
        print(FormatRun(*run))


def genrange(context, args):
    for run in CategoryRuns(context):
        if run[2] == args.category:
            print(FormatRun(*run))


epilog = "tables: $UNIKIT_TABLES if set, else the interpreter's Unicode database"
parser = ArgumentParser(
    description=__doc__, epilog=epilog,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument('--error', action='store_const', const=logging.ERROR,
                    dest='loglevel', help='error log level only [warn]')
parser.add_argument('--info', action='store_const', const=logging.INFO,
                    dest='loglevel', help='info log level [warn]')
parser.add_argument('--debug', action='store_const', const=logging.DEBUG,
                    dest='loglevel', help='debug log level [warn]')
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

commands = parser.add_subparsers(metavar='COMMAND', dest='command')
commands.required = True

cmd = commands.add_parser('fold', help='case folding of a codepoint')
cmd.add_argument('codepoint', metavar='U+XXXX', type=ParseCodepoint)
cmd.set_defaults(func=fold)

cmd = commands.add_parser('gencat', help='General Category of a codepoint')
cmd.add_argument('codepoint', metavar='U+XXXX', type=ParseCodepoint)
cmd.set_defaults(func=gencat)

cmd = commands.add_parser('gentab', help='all runs of codepoints by category')
cmd.set_defaults(func=gentab)

cmd = commands.add_parser('genrange', help='all runs of codepoints in a category')
cmd.add_argument('category', metavar='CC', type=ParseCategory)
cmd.set_defaults(func=genrange)

args = parser.parse_args()

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

try:
    args.func(Init(), args)
except (UnikitError, ValueError) as e:
    logging.exception("query failed")
    parser.error(str(e))
