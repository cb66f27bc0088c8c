import os
import tempfile
import unittest

from shiftplan.errors import AlreadyExistsError, IOFailureError, ValidationFailedError
from shiftplan.shifts import CreateDir


class TestCreateDir(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_apply_creates_directory(self) -> None:
        path = os.path.join(self.root, "d")
        shift = CreateDir(path)
        self.assertFalse(shift.is_applied())
        shift.apply()
        self.assertTrue(os.path.isdir(path))
        self.assertTrue(shift.is_applied())

    def test_apply_is_idempotent(self) -> None:
        path = os.path.join(self.root, "d")
        shift = CreateDir(path)
        shift.apply()
        with open(os.path.join(path, "keep.txt"), "w", encoding="utf-8") as f:
            f.write("x")
        shift.apply()
        self.assertTrue(os.path.isdir(path))
        self.assertEqual(os.listdir(path), ["keep.txt"])

    def test_apply_fails_when_path_is_a_file(self) -> None:
        path = os.path.join(self.root, "f")
        with open(path, "w", encoding="utf-8") as f:
            f.write("x")
        with self.assertRaises(AlreadyExistsError):
            CreateDir(path).apply()
        self.assertTrue(os.path.isfile(path))

    def test_apply_does_not_create_ancestors(self) -> None:
        path = os.path.join(self.root, "missing", "d")
        with self.assertRaises(IOFailureError) as ctx:
            CreateDir(path).apply()
        self.assertIsInstance(ctx.exception.cause, FileNotFoundError)
        self.assertFalse(os.path.exists(os.path.join(self.root, "missing")))

    def test_revert_removes_tree(self) -> None:
        path = os.path.join(self.root, "d")
        shift = CreateDir(path)
        shift.apply()
        os.mkdir(os.path.join(path, "sub"))
        shift.revert()
        self.assertFalse(os.path.exists(path))
        self.assertFalse(shift.is_applied())

    def test_revert_absent_is_noop(self) -> None:
        CreateDir(os.path.join(self.root, "nope")).revert()

    def test_revert_fails_when_path_is_a_file(self) -> None:
        path = os.path.join(self.root, "f")
        with open(path, "w", encoding="utf-8") as f:
            f.write("x")
        with self.assertRaises(ValidationFailedError):
            CreateDir(path).revert()
        self.assertTrue(os.path.isfile(path))

    def test_revert_refuses_symlink_to_directory(self) -> None:
        real = os.path.join(self.root, "real")
        os.mkdir(real)
        link = os.path.join(self.root, "link")
        os.symlink(real, link)

        with self.assertRaises(ValidationFailedError) as ctx:
            CreateDir(link).revert()
        self.assertEqual(ctx.exception.details["path"], link)
        self.assertTrue(os.path.islink(link))
        self.assertTrue(os.path.isdir(real))

    def test_non_recursive_revert_keeps_non_empty_directory(self) -> None:
        path = os.path.join(self.root, "d")
        shift = CreateDir(path, recursive_revert=False)
        shift.apply()
        with open(os.path.join(path, "keep.txt"), "w", encoding="utf-8") as f:
            f.write("x")
        with self.assertRaises(ValidationFailedError):
            shift.revert()
        self.assertTrue(os.path.isfile(os.path.join(path, "keep.txt")))

        os.remove(os.path.join(path, "keep.txt"))
        shift.revert()
        self.assertFalse(os.path.exists(path))

    def test_describe(self) -> None:
        self.assertEqual(CreateDir("project/src").describe(), "Create directory at project/src")

    def test_structural_identity(self) -> None:
        self.assertEqual(CreateDir("a"), CreateDir("a"))
        self.assertNotEqual(CreateDir("a"), CreateDir("b"))


if __name__ == "__main__":
    unittest.main()
