from unittest import TestCase
from io import StringIO
import inireader.source as source


class TestReader(TestCase):

    def test_get_two_lines(self):
        reader = source.Reader(StringIO("One\nTwo\n"))
        self.assertEqual("<UNKNOWN>:1:1", str(reader.at()))
        self.assertEqual('O', reader.get())
        self.assertEqual('n', reader.get())
        self.assertEqual('e', reader.get())
        self.assertEqual("<UNKNOWN>:1:4", str(reader.at()))
        self.assertEqual("\n", reader.get())
        self.assertEqual("<UNKNOWN>:2:1", str(reader.at()))
        self.assertEqual('T', reader.get())
        self.assertEqual('w', reader.get())
        self.assertEqual('o', reader.get())
        self.assertEqual("<UNKNOWN>:2:4", str(reader.at()))
        self.assertEqual("\n", reader.get())
        self.assertEqual("<UNKNOWN>:EOF", str(reader.at()))
        self.assertTrue(reader.eof())
        self.assertEqual(None, reader.get())

    def test_peek_does_not_consume(self):
        reader = source.Reader(StringIO("ab"), name="peek.ini")
        self.assertEqual('a', reader.peek())
        self.assertEqual('a', reader.peek())
        self.assertEqual('a', reader.get())
        self.assertEqual('b', reader.peek())
        self.assertEqual("peek.ini:1:2", str(reader.at()))
        self.assertEqual('b', reader.get())
        self.assertEqual(None, reader.peek())
        self.assertEqual("peek.ini:EOF", str(reader.at()))

    def test_empty_input(self):
        reader = source.Reader(StringIO(""))
        self.assertTrue(reader.eof())
        self.assertEqual(None, reader.peek())
        self.assertEqual(None, reader.get())

    def test_name(self):
        self.assertEqual("<UNKNOWN>", source.Reader(StringIO("")).name())
        self.assertEqual("x.ini", source.Reader(StringIO(""), name="x.ini").name())


class TestAt(TestCase):

    def test_str(self):
        self.assertEqual("file.ini:3:7", str(source.At("file.ini", 3, 7)))
        self.assertEqual("file.ini:EOF", str(source.At("file.ini:EOF")))
