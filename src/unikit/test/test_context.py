import os
import unicodedata
from functools import lru_cache
from tempfile import TemporaryDirectory
from unittest import main, TestCase
from unittest.mock import patch

from unikit import Category, Init, IsValidCodepoint
from unikit.build import CompileTables, EncodeTables
from unikit.category import CODES, Encode
from unikit.codec import Encode as EncodeWords
from unikit.data import DictSource, Key, TABLES_ENV, UnicodeDataSource, WriteTables
from unikit.errors import ConfigurationError, DataCorruptionError, DecodeError, \
    InvalidCodepoint
from unikit.fold import FoldKey, FoldResult
from unikit.trie import TrieBuilder
from unikit.ucd import CategoryRecord as R, FoldRecord as F


@lru_cache(maxsize=None)
def Interpreter():
    return Init(UnicodeDataSource())


def Synthetic() -> dict:
    return EncodeTables(CompileTables(
        [R(0, 0x40, 'Cc'), R(0x41, 0x5A, 'Lu'), R(0x5B, 0xFF, 'Ll'),
         R(0x20000, 0x2A6DF, 'Lo')],
        [F(0x41, (0x61,))]
    ))


class InitTests(TestCase):

    def setUp(self):
        self.calls = []

    def handler(self, location, message):
        self.calls.append(message)

    def testSynthetic(self):
        context = Init(DictSource(Synthetic()))
        self.assertEqual(Category.Lu, context.category(0x41))
        self.assertEqual(Category.Lo, context.category(0x20000))
        self.assertEqual(Category.Cn, context.category(0x300))
        self.assertEqual(FoldResult((0x61,), False), context.fold(0x41))
        self.assertEqual(FoldResult((0x42,), True), context.fold(0x42))

    def testRepr(self):
        self.assertIn('gcat-core=256', repr(Init(DictSource(Synthetic()))))

    def testMissingTable(self):
        tables = Synthetic()
        del tables[Key.CASE_DATA]
        self.assertRaises(ConfigurationError, Init, DictSource(tables))

    def testMalformedTable(self):
        tables = Synthetic()
        tables[Key.GCAT_CORE] = 'A'
        self.assertRaises(DecodeError, Init, DictSource(tables))

    def testCorruptCore(self):
        tables = Synthetic()
        tables[Key.GCAT_CORE] = EncodeWords([Category.Cc] * 255)
        self.assertRaises(DataCorruptionError, Init, DictSource(tables), self.handler)
        self.assertListEqual(['Invalid core table length'], self.calls)

    def testCorruptTrie(self):
        tables = Synthetic()
        tables[Key.GCAT_GEN_LOW] = EncodeWords([0xFFFF] * 15)
        self.assertRaises(DataCorruptionError, Init, DictSource(tables), self.handler)
        self.assertListEqual(['Invalid trie length'], self.calls)

    def testCorruptCaseData(self):
        builder = TrieBuilder(4)
        builder.add(0x41, FoldKey(5, 1).pack())
        tables = Synthetic()
        tables[Key.CASE_LOWER] = EncodeWords(builder.compile())
        context = Init(DictSource(tables), self.handler)
        self.assertEqual(FoldResult((0x42,), True), context.fold(0x42))
        self.assertRaises(DataCorruptionError, context.fold, 0x41)
        self.assertListEqual(['Data bound error'], self.calls)

    def testDefaultSourceFromFile(self):
        context = Interpreter()

        with TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'tables.txt')

            with open(path, 'w') as stream:
                WriteTables(stream, {key: EncodeWords(context.tables[key]) for key in Key.ALL})

            with patch.dict(os.environ, {TABLES_ENV: path}):
                loaded = Init()

        for key in Key.ALL:
            self.assertListEqual(context.tables[key].tolist(), loaded.tables[key].tolist())

        self.assertEqual(Category.Lu, loaded.category(0x41))


class CategoryTests(TestCase):

    @classmethod
    def setUpClass(cls):
        cls.context = Interpreter()

    def testExamples(self):
        for cv, name in ((0x41, 'Lu'), (0x20, 'Zs'), (0x3A9, 'Lu'), (0x300, 'Mn'),
                         (0x4E00, 'Lo'), (0xD800, 'Cs'), (0xE000, 'Co'),
                         (0x1F600, 'So'), (0x20000, 'Lo'), (0xE0001, 'Cf'),
                         (0xF0000, 'Co'), (0x10FFFF, 'Cn')):
            self.assertEqual(name, self.context.categoryName(cv), hex(cv))

    def testOutOfRange(self):
        for cv in (-1, -0x7FFFFFFF, 0x110000, 0x7FFFFFFF):
            self.assertEqual(Category.Cn, self.context.category(cv))

    def testAllCodepoints(self):
        category = self.context.category

        for cv in range(0x110000):
            code = category(cv)
            expected = Encode(unicodedata.category(chr(cv)))

            if code != expected:
                self.fail('U+%04X: %04x != %04x' % (cv, code, expected))

    def testCodesAreKnown(self):
        for cv in range(0, 0x110000, 97):
            self.assertIn(self.context.category(cv), CODES)


class FoldTests(TestCase):

    @classmethod
    def setUpClass(cls):
        cls.context = Interpreter()

    def testExamples(self):
        self.assertEqual(FoldResult((0x6D,), False), self.context.fold(0x4D))
        self.assertEqual(FoldResult((0x61,), True), self.context.fold(0x61))
        self.assertEqual(FoldResult((0x73, 0x73), False), self.context.fold(0xDF))
        self.assertEqual(FoldResult((0x69, 0x307), False), self.context.fold(0x130))
        self.assertEqual(FoldResult((0x10428,), False), self.context.fold(0x10400))
        self.assertEqual(FoldResult((0x20000,), True), self.context.fold(0x20000))

    def testInvalidCodepoints(self):
        for cv in (-1, 0xD800, 0xDFFF, 0x110000):
            with self.assertRaises(InvalidCodepoint) as cm:
                self.context.fold(cv)

            self.assertEqual(cv, cm.exception.codepoint)

    def testAgreesWithCasefold(self):
        fold = self.context.fold

        for cv in range(0x20000):
            if not IsValidCodepoint(cv):
                continue

            result = fold(cv)
            expected = tuple(ord(c) for c in chr(cv).casefold())

            if result.codepoints != expected:
                self.fail('U+%04X: %s != %r' % (cv, result, expected))

            self.assertTrue(1 <= len(result.codepoints) <= 4)
            self.assertEqual(result.trivial, expected == (cv,))

    def testAstralPlanesAreTrivial(self):
        for cv in range(0x20000, 0x110000, 0x101):
            self.assertTrue(self.context.fold(cv).trivial)

    def testCasefold(self):
        for text in ('Straße', 'ΣΑΣ', 'İstanbul', 'ﬃ', '𐐀𐐁', 'plain'):
            self.assertEqual(text.casefold(), self.context.casefold(text))

    def testValid(self):
        self.assertTrue(self.context.valid(0))
        self.assertTrue(self.context.valid(0x10FFFF))
        self.assertFalse(self.context.valid(0xDC00))
        self.assertFalse(self.context.valid(-1))


if __name__ == '__main__':
    main()
