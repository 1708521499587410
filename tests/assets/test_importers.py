from PIL import Image

from spritesheets.assets.importers.texture import TextureImporter
from spritesheets.assets.types import PixelBuffer, PixelFormat


def test_texture_importer_png(tmp_path):
    # Create a simple red 2x2 PNG
    img = Image.new("RGB", (2, 2), color="red")
    f = tmp_path / "test.png"
    img.save(f)

    importer = TextureImporter()
    image = importer.import_file(f)

    assert isinstance(image, PixelBuffer)
    assert image.width == 2
    assert image.height == 2
    assert image.format is PixelFormat.RGBA8  # Should always convert to RGBA
    assert len(image.data) == 2 * 2 * 4
    assert image.data[:4] == bytes([255, 0, 0, 255])


def test_texture_importer_keeps_row_order(tmp_path):
    img = Image.new("L", (1, 2))
    img.putpixel((0, 0), 10)
    img.putpixel((0, 1), 200)
    f = tmp_path / "column.png"
    img.save(f)

    image = TextureImporter().import_file(f)

    assert image.data[0] == 10
    assert image.data[4] == 200
