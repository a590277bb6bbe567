# Test routines for the hackasm classifier
# From the repository root, run "python3 -m unittest discover -s hackasm -t ."

import unittest

from hackasm.classifier import (classify, operation, is_variable, label_name,
                                split_computation, LABEL, NUMERIC, SYMBOLIC, COMPUTATION)


class TestClassify(unittest.TestCase):

    def test_kinds(self):
        self.assertEqual(classify('(LOOP)'), LABEL)
        self.assertEqual(classify('@0'), NUMERIC)
        self.assertEqual(classify('@32767'), NUMERIC)
        self.assertEqual(classify('@LOOP'), SYMBOLIC)
        self.assertEqual(classify('@i'), SYMBOLIC)
        self.assertEqual(classify('@-1'), SYMBOLIC)
        self.assertEqual(classify('@R1'), SYMBOLIC)
        self.assertEqual(classify('D=A'), COMPUTATION)
        self.assertEqual(classify('0;JMP'), COMPUTATION)

    def test_label_name(self):
        self.assertEqual(label_name('(LOOP)'), 'LOOP')
        self.assertEqual(label_name('(a.b$c)'), 'a.b$c')

    def test_variable_casing(self):
        self.assertTrue(is_variable('i'))
        self.assertTrue(is_variable('sum'))
        self.assertTrue(is_variable('Foo'))
        self.assertTrue(is_variable('ptr_1'))
        self.assertFalse(is_variable('LOOP'))
        self.assertFalse(is_variable('END_1'))
        self.assertFalse(is_variable('R15'))
        self.assertFalse(is_variable('SCREEN'))
        self.assertFalse(is_variable('LOOP.1'))
        self.assertFalse(is_variable('$X'))
        self.assertTrue(is_variable('loop.1'))

    def test_split_computation(self):
        self.assertEqual(split_computation('D=A'), ('D', 'A', None))
        self.assertEqual(split_computation('0;JMP'), (None, '0', 'JMP'))
        self.assertEqual(split_computation('AM=M-1;JNE'), ('AM', 'M-1', 'JNE'))
        self.assertEqual(split_computation('D'), (None, 'D', None))


class TestOperation(unittest.TestCase):

    def test_label(self):
        line = (1, '(END)', '(END)')
        self.assertEqual(operation(line), {'cType': LABEL, 'symbol': 'END', 'line': line})

    def test_numeric(self):
        o = operation((2, '@21', '  @21'))
        self.assertEqual(o['cType'], NUMERIC)
        self.assertEqual(o['constant'], 21)

    def test_symbolic(self):
        o = operation((3, '@counter', '@counter'))
        self.assertEqual(o['cType'], SYMBOLIC)
        self.assertEqual(o['symbol'], 'counter')
        self.assertTrue(o['variable'])

        o = operation((4, '@LOOP', '@LOOP'))
        self.assertFalse(o['variable'])

    def test_computation(self):
        o = operation((5, 'MD=D+1;JGE', 'MD = D + 1 ; JGE'))
        self.assertEqual(o['cType'], COMPUTATION)
        self.assertEqual((o['dest'], o['comp'], o['jump']), ('MD', 'D+1', 'JGE'))


if __name__ == '__main__':
    unittest.main()
