import re
import unittest
from unittest.mock import patch

from certifytrack.configs import storage


class StorageDown(Exception):
    pass


class TestStorage(unittest.TestCase):

    def test_object_name_keeps_folder_and_extension(self):
        name = storage.make_object_name("courses", "banner.final.png")
        self.assertRegex(name, r"^courses/[0-9a-f]{12}_\d+\.png$")

    def test_object_names_are_unique(self):
        self.assertNotEqual(
            storage.make_object_name("courses", "a.png"),
            storage.make_object_name("courses", "a.png"),
        )

    def test_public_url(self):
        self.assertEqual(
            storage.get_public_url("internships/x.jpg"),
            "https://files.example.com/certifytrack/internships/x.jpg",
        )

    @patch("certifytrack.configs.storage.client")
    def test_upload_returns_public_url(self, mock_client):
        url = storage.upload_image(b"\x89PNG", "logo.png", "internships", "image/png")

        args, kwargs = mock_client.put_object.call_args
        self.assertEqual(args[0], "certifytrack")
        self.assertTrue(args[1].startswith("internships/"))
        self.assertEqual(kwargs["length"], 4)
        self.assertEqual(kwargs["content_type"], "image/png")
        self.assertTrue(re.match(r"^https://files\.example\.com/certifytrack/internships/.+\.png$", url))

    @patch("certifytrack.configs.storage.S3Error", StorageDown)
    @patch("certifytrack.configs.storage.client")
    def test_upload_failure_is_reraised(self, mock_client):
        mock_client.put_object.side_effect = StorageDown("AccessDenied")
        with self.assertLogs("certifytrack.configs.storage", level="ERROR"):
            with self.assertRaises(StorageDown):
                storage.upload_image(b"data", "x.png", "courses")
