#!/usr/bin/env python3

"""generate the Unikit data tables from the Unicode Character Database"""

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

from unikit import build, ucd
from unikit.data import WriteTables
from unikit.report import FormatLiteral, FormatPretty, FormatRun

__version__ = '1.0.0'

MODES = ('core', 'genchar', 'astral', 'bitmap', 'case', 'remainder', 'all')


def categories(args):
    if args.ucd:
        path = os.path.join(args.ucd, 'UnicodeData.txt')
        logging.info("parsing %s", path)

        with open(path, encoding='utf-8') as stream:
            return list(ucd.UnicodeDataReader(stream))
    else:
        return list(ucd.InterpreterCategories())


def foldings(args):
    if args.ucd:
        path = os.path.join(args.ucd, 'CaseFolding.txt')
        logging.info("parsing %s", path)

        with open(path, encoding='utf-8') as stream:
            return list(ucd.CaseFoldingReader(stream))
    else:
        return list(ucd.InterpreterFoldings())


def show(title, words, pretty, first=False):
    if not first:
        print()

    print(title + ':\n')
    print(FormatPretty(words) if pretty else FormatLiteral(words), end='')


def main(args):
    pretty = args.style == 'pretty'

    if args.mode == 'core':
        show('Core table', build.CompileCore(categories(args)), pretty, True)
    elif args.mode == 'genchar':
        lower, upper = build.CompileGeneral(categories(args))
        show('Lower index', lower, pretty, True)
        show('Upper index', upper, pretty)
    elif args.mode == 'astral':
        show('Astral table', build.CompileAstral(categories(args)), pretty, True)
    elif args.mode == 'bitmap':
        show('Character bitmap', build.CompileBitmap(categories(args)), pretty, True)
    elif args.mode == 'case':
        lower, upper, data = build.CompileCase(foldings(args))
        show('Lower index', lower, pretty, True)
        show('Upper index', upper, pretty)
        show('Data table', data, pretty)
    elif args.mode == 'remainder':
        if not pretty:
            raise ValueError('base64 not supported in remainder mode')

        print('Remainder table:\n')

        for run in build.CompileRemainder(categories(args)):
            print(FormatRun(*run))
    else:
        tables = build.CompileTables(categories(args), foldings(args))
        WriteTables(sys.stdout, build.EncodeTables(tables))


parser = ArgumentParser(
    usage='%(prog)s [options] MODE STYLE',
    description=__doc__,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.add_argument('mode', metavar='MODE', choices=MODES,
                    help='table to generate: ' + ', '.join(MODES))
parser.add_argument('style', metavar='STYLE', choices=('pretty', 'base64'),
                    help='pretty or base64 output')
parser.add_argument('--ucd', metavar='DIR',
                    help='directory with UnicodeData.txt and CaseFolding.txt '
                         '[the interpreter\'s database]')
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument('--error', action='store_const', const=logging.ERROR,
                    dest='loglevel', help='error log level only [warn]')
parser.add_argument('--info', action='store_const', const=logging.INFO,
                    dest='loglevel', help='info log level [warn]')
parser.add_argument('--debug', action='store_const', const=logging.DEBUG,
                    dest='loglevel', help='debug log level [warn]')
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

args = parser.parse_args()

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

try:
    main(args)
except (IOError, ValueError) as e:
    logging.exception("table generation failed")
    parser.error(str(e))
