import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from il2cpp_build.config import (
    NDK_ROOT_ENV,
    UNITY_ROOT_ENV,
    default_ndk_root,
    default_unity_root,
    load_search_roots,
    read_search_root,
)


class TestSearchRoots(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        env = {k: v for k, v in os.environ.items() if k not in (UNITY_ROOT_ENV, NDK_ROOT_ENV)}
        patcher = mock.patch.dict(os.environ, env, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        self._tmp.cleanup()

    def test_last_non_blank_line_wins(self):
        config = self.dir / "unity-root.txt"
        config.write_text("/old/editors\n/new/editors\n\n", encoding="utf-8")
        self.assertEqual(read_search_root(config), Path("/new/editors"))

    def test_missing_or_empty_file(self):
        self.assertIsNone(read_search_root(self.dir / "absent.txt"))
        empty = self.dir / "empty.txt"
        empty.write_text("\n  \n", encoding="utf-8")
        self.assertIsNone(read_search_root(empty))

    def test_files_are_read_from_config_dir(self):
        (self.dir / "unity-root.txt").write_text("/opt/unity\n", encoding="utf-8")
        (self.dir / "ndk-root.txt").write_text("/opt/ndk\n", encoding="utf-8")
        roots = load_search_roots(self.dir)
        self.assertEqual(roots.unity, Path("/opt/unity"))
        self.assertEqual(roots.ndk, Path("/opt/ndk"))

    def test_environment_overrides_files(self):
        (self.dir / "unity-root.txt").write_text("/opt/unity\n", encoding="utf-8")
        with mock.patch.dict(os.environ, {UNITY_ROOT_ENV: "/env/unity"}):
            roots = load_search_roots(self.dir)
        self.assertEqual(roots.unity, Path("/env/unity"))

    def test_defaults_when_unconfigured(self):
        roots = load_search_roots(self.dir)
        self.assertEqual(roots.unity, default_unity_root())
        self.assertEqual(roots.ndk, default_ndk_root())


if __name__ == '__main__':
    unittest.main()
