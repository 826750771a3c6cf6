"""Tests for PFM image reading and writing."""

import numpy as np
import pytest

from halton_sampler.pfm import PFMImage, tex2pixel


class TestTex2Pixel:
    """Test texture coordinate to pixel mapping."""

    def test_interior(self):
        assert tex2pixel(0.0, 4) == 0
        assert tex2pixel(0.3, 4) == 1
        assert tex2pixel(0.99, 4) == 3

    def test_clamps_edges(self):
        """Test that u = 1 and out-of-range coordinates stay inside the image."""
        assert tex2pixel(1.0, 4) == 3
        assert tex2pixel(-0.5, 4) == 0
        assert tex2pixel(7.0, 4) == 3


class TestPFMImage:
    """Test PFMImage I/O and pixel access."""

    def test_create_image(self):
        """Test that a new image is black with the right size."""
        img = PFMImage.create_image(3, 4, 2)
        assert img.data.shape == (24,)
        assert img.data.dtype == np.float32
        assert np.all(img.data == 0.0)

    def test_create_image_validation(self):
        with pytest.raises(ValueError, match="channels must be 1 or 3"):
            PFMImage.create_image(2, 4, 4)
        with pytest.raises(ValueError, match="image size must be positive"):
            PFMImage.create_image(1, 0, 4)

    def test_set_and_get_color_rgb(self):
        """Test RGB pixel access by texture coordinate."""
        img = PFMImage.create_image(3, 4, 4)
        img.set_color((0.25, 0.5, 1.0), 0.6, 0.1)
        assert img.get_color(0.6, 0.1) == (0.25, 0.5, 1.0)
        # pixel (2, 0)
        np.testing.assert_array_equal(img.data[6:9], [0.25, 0.5, 1.0])
        assert img.get_color(0.1, 0.1) == (0.0, 0.0, 0.0)

    def test_grayscale_replicates_channel(self):
        """Test that grayscale pixels read back as equal RGB components."""
        img = PFMImage.create_image(1, 2, 2)
        img.set_color((0.75, 0.1, 0.2), 0.9, 0.9)
        assert img.data[3] == 0.75
        assert img.get_color(0.9, 0.9) == (0.75, 0.75, 0.75)

    @pytest.mark.parametrize("little_endian", [True, False])
    def test_save_and_read(self, tmp_path, little_endian):
        """Test that pixel data survives a save/read cycle in either byte order."""
        img = PFMImage.create_image(3, 3, 2)
        img.data[:] = np.linspace(-1.5, 2.5, 18, dtype=np.float32)
        img.little_endian = little_endian
        path = tmp_path / "image.pfm"
        img.save_to(path)

        loaded = PFMImage.read_from(path)
        assert (loaded.w, loaded.h, loaded.channels) == (3, 2, 3)
        assert loaded.little_endian is little_endian
        np.testing.assert_array_equal(loaded.data, img.data)

    def test_header_layout(self, tmp_path):
        """Test the text header and little-endian payload."""
        img = PFMImage.create_image(1, 2, 1)
        img.data[:] = [1.0, 2.0]
        img.little_endian = True
        path = tmp_path / "gray.pfm"
        img.save_to(path)

        raw = path.read_bytes()
        header = b"Pf\n2 1\n-1.0\n"
        assert raw.startswith(header)
        assert raw[len(header):] == np.array([1.0, 2.0], dtype="<f4").tobytes()

    def test_read_big_endian(self, tmp_path):
        """Test that a positive scale selects big-endian data."""
        path = tmp_path / "be.pfm"
        path.write_bytes(b"PF\n1 1\n1.0\n" + np.array([0.5, 1.0, 2.0], dtype=">f4").tobytes())
        img = PFMImage.read_from(path)
        assert img.channels == 3
        assert not img.little_endian
        assert img.get_color(0.0, 0.0) == (0.5, 1.0, 2.0)

    def test_invalid_header(self, tmp_path):
        path = tmp_path / "bad.pfm"
        path.write_bytes(b"P6\n1 1\n1.0\n")
        with pytest.raises(ValueError, match="Invalid header"):
            PFMImage.read_from(path)

    def test_invalid_dimensions(self, tmp_path):
        path = tmp_path / "bad.pfm"
        path.write_bytes(b"Pf\n1\n1.0\n")
        with pytest.raises(ValueError, match="Invalid dimensions"):
            PFMImage.read_from(path)

    def test_negative_dimensions(self, tmp_path):
        """Test that negative width and height are rejected."""
        path = tmp_path / "neg.pfm"
        path.write_bytes(b"Pf\n-1 -1\n-1.0\n" + b"\x00" * 4)
        with pytest.raises(ValueError, match="Invalid dimensions: -1 -1"):
            PFMImage.read_from(path)

    def test_invalid_scale(self, tmp_path):
        path = tmp_path / "bad.pfm"
        path.write_bytes(b"Pf\n1 1\nabc\n")
        with pytest.raises(ValueError, match="Invalid scale factor"):
            PFMImage.read_from(path)

    def test_truncated_data(self, tmp_path):
        path = tmp_path / "short.pfm"
        path.write_bytes(b"Pf\n2 2\n-1.0\n" + b"\x00" * 8)
        with pytest.raises(ValueError, match="Truncated pixel data"):
            PFMImage.read_from(path)

    def test_save_invalid_channels(self, tmp_path):
        img = PFMImage(np.zeros(4, dtype=np.float32), 2, 1, 2)
        with pytest.raises(ValueError, match="Invalid number of channels"):
            img.save_to(tmp_path / "x.pfm")
