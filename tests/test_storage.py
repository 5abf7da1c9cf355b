"""
Tests for image storage and the image downloader.
"""

import tempfile
import unittest
from pathlib import Path

from aiohttp.test_utils import AioHTTPTestCase

from image_spider.core.storage import download_image, image_local_path, save_file
from image_spider.session import build_session

from fake_site import PNG_BYTES, FakeSite


class TestSaveFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_creates_missing_directories(self):
        target = self.tmp / "a" / "b" / "img.png"
        save_file(target, b"data")
        self.assertEqual(target.read_bytes(), b"data")

    def test_no_partial_file_left_behind(self):
        target = self.tmp / "img.png"
        save_file(target, b"data")
        self.assertEqual([p.name for p in self.tmp.iterdir()], ["img.png"])

    def test_existing_directory_is_fine(self):
        save_file(self.tmp / "one.png", b"1")
        save_file(self.tmp / "two.png", b"2")
        self.assertTrue((self.tmp / "two.png").exists())

    def test_collision_overwrites(self):
        target = self.tmp / "img.png"
        save_file(target, b"first")
        save_file(target, b"second")
        self.assertEqual(target.read_bytes(), b"second")

    def test_flat_layout(self):
        path = image_local_path("https://s.example/deep/nested/dir/cat.png", self.tmp)
        self.assertEqual(path, self.tmp / "cat.png")


class TestDownloadImage(AioHTTPTestCase):
    async def get_application(self):
        self.site = FakeSite()
        self.site.image("/images/cat.png")
        self.site.image("/images/")
        self.site.image("/missing.png", status=404)
        self.site.image("/slow.png", delay=1.0)
        return self.site.app()

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self._tmp = tempfile.TemporaryDirectory()
        self.out = Path(self._tmp.name) / "data"
        self.session = build_session()

    async def asyncTearDown(self):
        await self.session.close()
        self._tmp.cleanup()
        await super().asyncTearDown()

    def _url(self, path: str) -> str:
        return str(self.server.make_url(path))

    async def test_download_writes_file(self):
        result = await download_image(self.session, self._url("/images/cat.png"), self.out, 5)
        self.assertTrue(result.ok)
        self.assertEqual(result.path, self.out / "cat.png")
        self.assertEqual(result.size, len(PNG_BYTES))
        self.assertEqual((self.out / "cat.png").read_bytes(), PNG_BYTES)

    async def test_trailing_slash_uses_fallback_name(self):
        result = await download_image(self.session, self._url("/images/"), self.out, 5)
        self.assertTrue(result.ok)
        self.assertEqual(result.path, self.out / "unknown.jpg")
        self.assertTrue((self.out / "unknown.jpg").exists())

    async def test_http_error_reported_not_raised(self):
        result = await download_image(self.session, self._url("/missing.png"), self.out, 5)
        self.assertFalse(result.ok)
        self.assertIn("404", result.error)
        self.assertIsNone(result.path)
        self.assertFalse((self.out / "missing.png").exists())

    async def test_timeout_reported_not_raised(self):
        result = await download_image(self.session, self._url("/slow.png"), self.out, 0.1)
        self.assertFalse(result.ok)
        self.assertIn("timed out", result.error)
        self.assertFalse((self.out / "slow.png").exists())

    async def test_unwritable_directory_reported_not_raised(self):
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("not a directory")
        result = await download_image(self.session, self._url("/images/cat.png"), blocker, 5)
        self.assertFalse(result.ok)
        self.assertIn("cannot write file", result.error)

    async def test_repeated_downloads_into_same_directory(self):
        for _ in range(2):
            result = await download_image(self.session, self._url("/images/cat.png"), self.out, 5)
            self.assertTrue(result.ok)


if __name__ == "__main__":
    unittest.main()
