from unittest import TestCase

from inireader.errors import ErrorKind, FileNotFound, IniError, IniSyntaxError, ReadError, Result


class TestErrors(TestCase):

    def test_file_not_found(self):
        error = FileNotFound("missing.ini")
        self.assertIsInstance(error, IniError)
        self.assertIsInstance(error, FileNotFoundError)
        self.assertIsInstance(error, OSError)
        self.assertEqual("missing.ini", error.filename)
        self.assertEqual("Cannot open file \"missing.ini\" for reading", str(error))
        self.assertIs(ErrorKind.FILE_NOT_FOUND, error.kind)

    def test_syntax_error(self):
        error = IniSyntaxError("the message", "a.ini", 7, ("a", "LF", None))
        self.assertIsInstance(error, IniError)
        self.assertIsInstance(error, SyntaxError)
        self.assertEqual("the message", str(error))
        self.assertEqual("a.ini", error.source)
        self.assertEqual(7, error.line)
        self.assertEqual(7, error.lineno)
        self.assertEqual(("a", "LF", None), error.context)
        self.assertIs(ErrorKind.SYNTAX, error.kind)

    def test_read_error(self):
        self.assertIs(ErrorKind.READ, ReadError("x").kind)


class TestResult(TestCase):

    def test_value(self):
        result = Result(value=42)
        self.assertTrue(result.ok)
        self.assertEqual(None, result.kind)
        self.assertEqual(42, result.unwrap())

    def test_error(self):
        error = FileNotFound("missing.ini")
        result = Result(error=error)
        self.assertFalse(result.ok)
        self.assertIs(ErrorKind.FILE_NOT_FOUND, result.kind)
        with self.assertRaises(FileNotFound) as cm:
            result.unwrap()
        self.assertIs(error, cm.exception)
