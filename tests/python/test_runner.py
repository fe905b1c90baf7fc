import io
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from il2cpp_build.errors import StepFailed
from il2cpp_build.runner import DryRunRunner, ProcessRunner, safe_name


class TestProcessRunner(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.log_dir = Path(self._tmp.name) / "logs"
        self.runner = ProcessRunner(self.log_dir)

    def tearDown(self):
        self._tmp.cleanup()

    def test_success_writes_log(self):
        with redirect_stdout(io.StringIO()):
            self.runner.run("compile", "Game", [sys.executable, "-c", "print('hello from tool')"])
        logs = list(self.log_dir.glob("*_compile_Game.log"))
        self.assertEqual(len(logs), 1)
        self.assertIn("hello from tool", logs[0].read_text(encoding="utf-8"))

    def test_non_zero_exit_raises_step_failed(self):
        command = [sys.executable, "-c", "import sys; print('boom'); sys.exit(3)"]
        with redirect_stdout(io.StringIO()) as out:
            with self.assertRaises(StepFailed) as ctx:
                self.runner.run("strip", "Game", command)
        self.assertEqual(ctx.exception.exit_code, 3)
        self.assertEqual(ctx.exception.step, "strip")
        self.assertTrue(ctx.exception.log_path.exists())
        self.assertIn("boom", out.getvalue())

    def test_missing_executable_raises_step_failed(self):
        missing = str(Path(self._tmp.name) / "no-such-tool")
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(StepFailed) as ctx:
                self.runner.run("convert", "Game", [missing])
        self.assertEqual(ctx.exception.exit_code, -1)


class TestDryRunRunner(unittest.TestCase):

    def test_prints_command_line(self):
        with redirect_stdout(io.StringIO()) as out:
            DryRunRunner().run("compile", "Game", ["csc", "-out:Game.dll", "Game.cs"])
        self.assertIn("csc -out:Game.dll Game.cs", out.getvalue())

    def test_safe_name(self):
        self.assertEqual(safe_name("compile-x64"), "compile-x64")
        self.assertEqual(safe_name("a b/c"), "a_b_c")


if __name__ == '__main__':
    unittest.main()
