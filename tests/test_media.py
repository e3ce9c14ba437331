"""Unit tests for gamestore.services.media: SDK calls (mocked cloudinary) and delivery URLs."""

import asyncio
import unittest
from unittest.mock import MagicMock, patch

import cloudinary.exceptions
from pydantic import SecretStr

from gamestore.services.media import (
    GAME_IMAGE_TRANSFORMATION,
    PROFILE_IMAGE_TRANSFORMATION,
    MediaNotConfiguredError,
    MediaServiceError,
    delete_image,
    get_usage,
    is_media_configured,
    optimized_url,
    upload_image,
)


def _settings(**overrides: object) -> MagicMock:
    settings = MagicMock()
    settings.CLOUDINARY_CLOUD_NAME = "demo-cloud"
    settings.CLOUDINARY_API_KEY = "key-1"
    settings.CLOUDINARY_API_SECRET = SecretStr("shh")
    settings.CLOUDINARY_UPLOAD_PREFIX = "https://api.cloudinary.com"
    settings.CLOUDINARY_REQUEST_TIMEOUT_SEC = 30.0
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


class TestTransformations(unittest.TestCase):
    """Uploads are resized, then delivered with automatic quality and format."""

    def test_game_images_are_limited_with_auto_quality_and_format(self) -> None:
        self.assertEqual(GAME_IMAGE_TRANSFORMATION[0], {"width": 800, "height": 1000, "crop": "limit"})
        self.assertIn({"quality": "auto"}, GAME_IMAGE_TRANSFORMATION)
        self.assertIn({"fetch_format": "auto"}, GAME_IMAGE_TRANSFORMATION)

    def test_profile_images_are_cropped_around_the_face(self) -> None:
        self.assertEqual(PROFILE_IMAGE_TRANSFORMATION[0]["gravity"], "face")
        self.assertIn({"fetch_format": "auto"}, PROFILE_IMAGE_TRANSFORMATION)


class TestIsMediaConfigured(unittest.TestCase):
    def test_all_credentials_present(self) -> None:
        self.assertTrue(is_media_configured(_settings()))

    def test_missing_cloud_name_or_secret(self) -> None:
        self.assertFalse(is_media_configured(_settings(CLOUDINARY_CLOUD_NAME="  ")))
        self.assertFalse(is_media_configured(_settings(CLOUDINARY_API_SECRET=None)))
        self.assertFalse(is_media_configured(_settings(CLOUDINARY_API_SECRET=SecretStr(""))))

    @patch("cloudinary.uploader.upload")
    def test_upload_without_credentials_raises_before_any_request(self, mock_upload: MagicMock) -> None:
        with self.assertRaises(MediaNotConfiguredError):
            asyncio.run(
                upload_image(
                    b"x", "a.png", "f", GAME_IMAGE_TRANSFORMATION, _settings(CLOUDINARY_API_KEY=None)
                )
            )
        mock_upload.assert_not_called()


class TestUploadImage(unittest.TestCase):
    @patch("cloudinary.uploader.upload")
    def test_upload_passes_folder_transformation_and_credentials(self, mock_upload: MagicMock) -> None:
        mock_upload.return_value = {
            "public_id": "gamestore/games/abc",
            "secure_url": "https://res.cloudinary.com/demo-cloud/image/upload/abc.png",
            "bytes": 2048,
            "format": "png",
        }
        result = asyncio.run(
            upload_image(
                b"png-bytes", "cover.png", "gamestore/games", GAME_IMAGE_TRANSFORMATION, _settings()
            )
        )
        self.assertEqual(result.public_id, "gamestore/games/abc")
        self.assertEqual(result.url, "https://res.cloudinary.com/demo-cloud/image/upload/abc.png")
        self.assertEqual(result.size, 2048)
        self.assertEqual(result.original_name, "cover.png")

        stream = mock_upload.call_args[0][0]
        self.assertEqual(stream.read(), b"png-bytes")
        kwargs = mock_upload.call_args[1]
        self.assertEqual(kwargs["folder"], "gamestore/games")
        self.assertEqual(kwargs["transformation"], GAME_IMAGE_TRANSFORMATION)
        self.assertEqual(kwargs["cloud_name"], "demo-cloud")
        self.assertEqual(kwargs["api_key"], "key-1")
        self.assertEqual(kwargs["api_secret"], "shh")
        self.assertEqual(kwargs["timeout"], 30.0)

    @patch("cloudinary.uploader.upload")
    def test_auth_failure_raises_media_error(self, mock_upload: MagicMock) -> None:
        mock_upload.side_effect = cloudinary.exceptions.AuthorizationRequired("Invalid api_key")
        with self.assertRaises(MediaServiceError) as ctx:
            asyncio.run(upload_image(b"x", "a.png", "f", GAME_IMAGE_TRANSFORMATION, _settings()))
        self.assertEqual(ctx.exception.status_code, 401)

    @patch("cloudinary.uploader.upload")
    def test_host_error_message_is_surfaced(self, mock_upload: MagicMock) -> None:
        mock_upload.side_effect = cloudinary.exceptions.Error("Invalid image file")
        with self.assertRaises(MediaServiceError) as ctx:
            asyncio.run(upload_image(b"x", "a.png", "f", GAME_IMAGE_TRANSFORMATION, _settings()))
        self.assertIn("Invalid image file", ctx.exception.message)

    @patch("cloudinary.uploader.upload")
    def test_response_without_url_is_an_error(self, mock_upload: MagicMock) -> None:
        mock_upload.return_value = {"public_id": "x"}
        with self.assertRaises(MediaServiceError):
            asyncio.run(upload_image(b"x", "a.png", "f", GAME_IMAGE_TRANSFORMATION, _settings()))


class TestDeleteImage(unittest.TestCase):
    @patch("cloudinary.uploader.destroy")
    def test_ok_result_means_deleted(self, mock_destroy: MagicMock) -> None:
        mock_destroy.return_value = {"result": "ok"}
        self.assertTrue(asyncio.run(delete_image("gamestore/games/abc", _settings())))
        self.assertEqual(mock_destroy.call_args[0][0], "gamestore/games/abc")
        self.assertEqual(mock_destroy.call_args[1]["cloud_name"], "demo-cloud")

    @patch("cloudinary.uploader.destroy")
    def test_not_found_result_means_not_deleted(self, mock_destroy: MagicMock) -> None:
        mock_destroy.return_value = {"result": "not found"}
        self.assertFalse(asyncio.run(delete_image("missing", _settings())))


class TestGetUsage(unittest.TestCase):
    @patch("cloudinary.api.usage")
    def test_usage_is_summarised(self, mock_usage: MagicMock) -> None:
        mock_usage.return_value = {"plan": "Free", "storage": {"usage": 100}, "bandwidth": {"usage": 7}}
        usage = asyncio.run(get_usage(_settings()))
        self.assertEqual(usage.plan, "Free")
        self.assertEqual(usage.storage_bytes, 100)
        self.assertEqual(usage.bandwidth_bytes, 7)
        self.assertEqual(mock_usage.call_args[1]["api_secret"], "shh")

    @patch("cloudinary.api.usage")
    def test_admin_api_error_keeps_status(self, mock_usage: MagicMock) -> None:
        mock_usage.side_effect = cloudinary.exceptions.RateLimited("slow down")
        with self.assertRaises(MediaServiceError) as ctx:
            asyncio.run(get_usage(_settings()))
        self.assertEqual(ctx.exception.status_code, 420)


class TestOptimizedUrl(unittest.TestCase):
    def test_default_crop_with_auto_quality_and_format(self) -> None:
        url = optimized_url("gamestore/games/abc", _settings())
        self.assertTrue(url.startswith("https://res.cloudinary.com/demo-cloud/image/upload/"))
        self.assertIn("/c_fill,h_600,w_800/q_auto/f_auto/", url)
        self.assertTrue(url.endswith("/gamestore/games/abc"))

    def test_custom_size(self) -> None:
        url = optimized_url("cover", _settings(), width=300, height=400)
        self.assertIn("/c_fill,h_400,w_300/", url)

    def test_requires_cloud_name(self) -> None:
        with self.assertRaises(MediaNotConfiguredError):
            optimized_url("cover", _settings(CLOUDINARY_CLOUD_NAME=None))


if __name__ == "__main__":
    unittest.main()
