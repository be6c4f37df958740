from unittest import main, TestCase

from unikit.category import CATEGORY_MAP, CODES, Category, Encode, Group, Name


class CategoryTests(TestCase):

    def testEncode(self):
        self.assertEqual(0x4C75, Encode('Lu'))
        self.assertEqual(Category.Lu, Encode('Lu'))
        self.assertEqual(0x436E, Encode('Cn'))

    def testEncodeRejects(self):
        for name in ('', 'L', 'LU', 'lu', 'Luu', 'Äu', '1a'):
            self.assertRaises(ValueError, Encode, name)

    def testName(self):
        self.assertEqual('So', Name(Category.So))
        self.assertEqual('Zl', Name(0x5A6C))

    def testMap(self):
        self.assertEqual(30, len(CATEGORY_MAP))
        self.assertEqual(30, len(CODES))

        for name, code in CATEGORY_MAP.items():
            self.assertEqual(Encode(name), code)
            self.assertEqual(name, Name(code))
            self.assertEqual(code, getattr(Category, name))

    def testGroups(self):
        for name, code in CATEGORY_MAP.items():
            self.assertEqual(getattr(Group, name[0]), Category.group(code))

    def testPredicates(self):
        self.assertTrue(Category.cased(Category.Lt))
        self.assertFalse(Category.cased(Category.Lo))
        self.assertTrue(Category.letter(Category.Lo))
        self.assertTrue(Category.mark(Category.Mn))
        self.assertTrue(Category.number(Category.Nl))
        self.assertTrue(Category.punctuation(Category.Pi))
        self.assertTrue(Category.symbol(Category.Sk))
        self.assertTrue(Category.separator(Category.Zp))
        self.assertTrue(Category.other(Category.Cn))
        self.assertFalse(Category.other(Category.Zs))


if __name__ == '__main__':
    main()
