from base64 import b64encode
from random import randint, seed
from unittest import main, TestCase

import numpy as np

from unikit.codec import Decode, Encode
from unikit.errors import DecodeError, InvalidCharacter, InvalidLength, InvalidPadding


class DecodeTests(TestCase):

    def assertDecodes(self, encoded, words):
        self.assertListEqual(words, Decode(encoded).tolist())

    def testFullGroup(self):
        self.assertDecodes('AAEAAgAD', [1, 2, 3])

    def testOneExtraWord(self):
        self.assertDecodes('THU=', [0x4C75])

    def testTwoExtraWords(self):
        self.assertDecodes('THVMbA==', [0x4C75, 0x4C6C])

    def testFullGroupAndOneExtraWord(self):
        self.assertDecodes('AAEAAgADAAQ=', [1, 2, 3, 4])

    def testFullGroupAndTwoExtraWords(self):
        self.assertDecodes('AAEAAgADAAQABQ==', [1, 2, 3, 4, 5])

    def testHighBits(self):
        self.assertDecodes('////////', [0xFFFF, 0xFFFF, 0xFFFF])
        self.assertDecodes('//8=', [0xFFFF])
        self.assertDecodes('/////w==', [0xFFFF, 0xFFFF])

    def testLength(self):
        for encoded, groups, extra in (('AAAA' * 2, 1, 0),
                                       ('AAA=', 0, 1),
                                       ('AAAAAA==', 0, 2),
                                       ('AAAA' * 4 + 'AAA=', 2, 1),
                                       ('AAAA' * 6 + 'AAAAAA==', 3, 2)):
            self.assertEqual(groups * 3 + extra, len(Decode(encoded)), encoded)

    def testResultIsReadOnly(self):
        words = Decode('AAEAAgAD')
        self.assertEqual(np.uint16, words.dtype)
        self.assertRaises(ValueError, words.__setitem__, 0, 7)

    def testAgreesWithByteDecoder(self):
        seed(42)

        for size in range(1, 50):
            words = [randint(0, 0xFFFF) for _ in range(size)]
            encoded = b64encode(np.array(words, dtype='>u2').tobytes()).decode('ascii')
            self.assertListEqual(words, Decode(encoded).tolist())

    def testInvalidLength(self):
        for encoded in ('', 'A', 'AAA', 'AAAAA', 'AAAAAAA=AAAA'):
            self.assertRaises(InvalidLength, Decode, encoded)

    def testInvalidCharacter(self):
        for encoded in ('AA*=', 'AAEA=gAD', 'AAé=', 'AAEAAg-DAAQ=', 'AAA=AAA='):
            self.assertRaises(InvalidCharacter, Decode, encoded)

    def testInvalidPadding(self):
        for encoded in ('AAAA', 'AAAAAAA=', 'AAAAAAAAAAAA'):
            self.assertRaises(InvalidPadding, Decode, encoded)

    def testErrorsAreValueErrors(self):
        self.assertTrue(issubclass(DecodeError, ValueError))
        self.assertRaises(ValueError, Decode, 'A')


class EncodeTests(TestCase):

    def testEncode(self):
        self.assertEqual('AAEAAgAD', Encode([1, 2, 3]))
        self.assertEqual('THVMbA==', Encode([0x4C75, 0x4C6C]))

    def testDecodeEncoded(self):
        words = list(range(0, 0x10000, 257))
        self.assertListEqual(words, Decode(Encode(words)).tolist())

    def testEncodeDecoded(self):
        encoded = 'AAEAAgADAAQABQ=='
        self.assertEqual(encoded, Encode(Decode(encoded)))

    def testRejectsEmpty(self):
        self.assertRaises(ValueError, Encode, [])

    def testRejectsOutOfRange(self):
        self.assertRaises(ValueError, Encode, [0x10000])
        self.assertRaises(ValueError, Encode, [-1])


if __name__ == '__main__':
    main()
