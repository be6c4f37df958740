from unittest import main, TestCase

from unikit.errors import DataCorruptionError
from unikit.fold import CaseFolder, FoldKey, FoldResult
from unikit.trie import Trie, TrieBuilder


def Build(mapping) -> Trie:
    builder = TrieBuilder(4)

    for key, value in mapping.items():
        builder.add(key, value)

    return Trie(builder.compile(), 4)


class FoldKeyTests(TestCase):

    def testUnpack(self):
        self.assertEqual(FoldKey(0, 1), FoldKey.unpack(0))
        self.assertEqual(FoldKey(1, 2), FoldKey.unpack(5))
        self.assertEqual(FoldKey(0x3FFF, 4), FoldKey.unpack(0xFFFF))

    def testPack(self):
        self.assertEqual(5, FoldKey(1, 2).pack())
        self.assertEqual(12, FoldKey(3, 1).pack())


class CaseFolderTests(TestCase):

    def setUp(self):
        self.calls = []
        lower = Build({
            0x004D: FoldKey(0, 1).pack(),
            0x00DF: FoldKey(1, 2).pack(),
            0x0061: FoldKey(4, 1).pack(),
            0x0062: FoldKey(4, 2).pack(),
        })
        upper = Build({0x0400: FoldKey(3, 1).pack()})
        data = [0x006D, 0x0073, 0x0073, 0x0428, 0x0061]
        self.folder = CaseFolder(lower, upper, data, self.handler)

    def handler(self, location, message):
        self.calls.append(message)

    def testSimpleFolding(self):
        self.assertEqual(FoldResult((0x6D,), False), self.folder.fold(0x4D))

    def testFullFolding(self):
        self.assertEqual(FoldResult((0x73, 0x73), False), self.folder.fold(0xDF))

    def testUpperPlane(self):
        self.assertEqual(FoldResult((0x10428,), False), self.folder.fold(0x10400))

    def testSelfMappingIsTrivial(self):
        self.assertEqual(FoldResult((0x61,), True), self.folder.fold(0x61))

    def testAbsentIsTrivial(self):
        for cv in (0x00, 0x6D, 0xFFFF, 0x10428, 0x1FFFF):
            self.assertEqual(FoldResult((cv,), True), self.folder.fold(cv))

    def testAstralIsTrivial(self):
        for cv in (0x20000, 0x20400, 0x10FFFF):
            self.assertEqual(FoldResult((cv,), True), self.folder.fold(cv))

    def testDataBoundError(self):
        self.assertRaises(DataCorruptionError, self.folder.fold, 0x62)
        self.assertListEqual(['Data bound error'], self.calls)

    def testFormat(self):
        self.assertEqual('U+0073 U+0073', str(self.folder.fold(0xDF)))
        self.assertEqual('U+10428', str(self.folder.fold(0x10400)))


if __name__ == '__main__':
    main()
