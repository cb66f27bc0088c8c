import os
import sys
import tempfile
import unittest

from shiftplan import (
    AlreadyExistsError,
    CommandFailedError,
    CreateDir,
    CreateFile,
    RevertFailedError,
    RunCommand,
    ShiftPlan,
    apply_plan,
)


class TestFilesystemScenarios(unittest.TestCase):
    """End-to-end plans against a scratch directory."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _p(self, *parts: str) -> str:
        return os.path.join(self.root, *parts)

    def test_directory_apply_then_revert(self) -> None:
        shift = CreateDir(self._p("d"))
        plan = ShiftPlan("dir", "single directory", [shift])

        plan.apply()
        self.assertTrue(shift.is_applied())

        plan.revert()
        self.assertFalse(os.path.exists(self._p("d")))
        self.assertFalse(shift.is_applied())

    def test_duplicate_file_rolls_back_everything(self) -> None:
        plan = ShiftPlan(
            "dup",
            "second write to the same file fails",
            [
                CreateDir(self._p("d")),
                CreateFile(self._p("d", "x"), "A"),
                CreateFile(self._p("d", "x"), "B"),
            ],
        )
        result = apply_plan(plan)

        self.assertEqual(result.failed_index, 2)
        self.assertIsInstance(result.error, AlreadyExistsError)
        self.assertEqual(result.reverted, [1, 0])
        self.assertFalse(os.path.exists(self._p("d", "x")))
        self.assertFalse(os.path.exists(self._p("d")))

        with self.assertRaises(AlreadyExistsError):
            plan.apply()

    def test_full_project_apply_and_revert(self) -> None:
        project = self._p("project")
        plan = ShiftPlan(
            "Web Project Setup",
            "Sets up a basic web project structure",
            [
                CreateDir(project),
                CreateDir(os.path.join(project, "src")),
                CreateDir(os.path.join(project, "public")),
                CreateFile(os.path.join(project, "public", "index.html"), "<h1>Hello World</h1>"),
                CreateFile(os.path.join(project, "src", "main.js"), "console.log('hi');"),
            ],
        )
        plan.apply()
        self.assertTrue(plan.is_applied())
        with open(os.path.join(project, "src", "main.js"), encoding="utf-8") as f:
            self.assertEqual(f.read(), "console.log('hi');")

        plan.revert()
        self.assertEqual(os.listdir(self.root), [])

    def test_failing_command_rolls_back_created_paths(self) -> None:
        project = self._p("project")
        plan = ShiftPlan(
            "with command",
            "command fails after files are created",
            [
                CreateDir(project),
                CreateFile(os.path.join(project, "a.txt"), "A"),
                RunCommand(sys.executable, ["-c", "import sys; sys.exit(1)"], working_dir=project),
            ],
        )
        with self.assertRaises(CommandFailedError):
            plan.apply()
        self.assertFalse(os.path.exists(project))

    def test_command_with_binary_output_succeeds_in_plan(self) -> None:
        plan = ShiftPlan(
            "binary",
            "command writes bytes that are not UTF-8",
            [
                CreateDir(self._p("d")),
                RunCommand(sys.executable, ["-c", "import sys; sys.stdout.buffer.write(b'\\xff')"]),
            ],
        )
        result = apply_plan(plan)
        self.assertTrue(result.ok)
        self.assertTrue(os.path.isdir(self._p("d")))

    def test_command_in_plan_is_reported_on_revert(self) -> None:
        plan = ShiftPlan(
            "revert",
            "revert a plan holding a command",
            [CreateDir(self._p("d")), RunCommand(sys.executable, ["-c", "pass"])],
        )
        plan.apply()
        result = apply_plan(plan)
        self.assertTrue(result.ok)

        with self.assertRaises(RevertFailedError) as ctx:
            plan.revert()
        self.assertEqual(len(ctx.exception.failures), 1)
        self.assertFalse(os.path.exists(self._p("d")))


if __name__ == "__main__":
    unittest.main()
