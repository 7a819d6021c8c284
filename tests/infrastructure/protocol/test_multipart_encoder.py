"""Tests for multipart/form-data encoding."""

import re

from post_connections.infrastructure.protocol import MultipartEncoder

JPEG_A = b"\xff\xd8\xffA\xff\xd9"
JPEG_B = b"\xff\xd8\xffB\xff\xd9"


class TestBoundary:
    """Test boundary generation."""

    def test_boundary_format(self):
        boundary = MultipartEncoder.create_boundary()
        assert re.fullmatch(r"Boundary-[0-9A-F]{8}(-[0-9A-F]{4}){3}-[0-9A-F]{12}", boundary)

    def test_boundaries_unique(self):
        assert MultipartEncoder.create_boundary() != MultipartEncoder.create_boundary()


class TestBuildBody:
    """Test multipart body layout."""

    def test_two_images_with_parameter(self):
        body = MultipartEncoder.build_body(
            {"x": "y", "image_count": "2"}, "image", [JPEG_A, JPEG_B], "B"
        )

        expected = (
            b"--B\r\n"
            b'Content-Disposition: form-data; name="x"\r\n\r\n'
            b"y\r\n"
            b"--B\r\n"
            b'Content-Disposition: form-data; name="image_count"\r\n\r\n'
            b"2\r\n"
            b"--B\r\n"
            b'Content-Disposition: form-data; name="image1"; filename="file1.jpg"\r\n'
            b"Content-Type: image/jpg\r\n\r\n" + JPEG_A + b"\r\n"
            b"--B\r\n"
            b'Content-Disposition: form-data; name="image2"; filename="file2.jpg"\r\n'
            b"Content-Type: image/jpg\r\n\r\n" + JPEG_B + b"\r\n"
            b"--B--\r\n"
        )
        assert body == expected

    def test_parameters_precede_images(self):
        body = MultipartEncoder.build_body({"x": "y"}, "photo", [JPEG_A], "B")
        assert body.index(b'name="x"') < body.index(b'name="photo1"')

    def test_no_parts(self):
        assert MultipartEncoder.build_body({}, "image", [], "B") == b"--B--\r\n"

    def test_custom_prefix(self):
        body = MultipartEncoder.build_body({}, "scan", [JPEG_A, JPEG_B], "B")
        assert b'name="scan1"; filename="file1.jpg"' in body
        assert b'name="scan2"; filename="file2.jpg"' in body
