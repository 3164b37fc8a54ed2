from hex2bmp.models.image_model import ImageData
from hex2bmp.services.preview_service import PreviewService


def test_render_rgba():
    image = ImageData(width=2, height=2, data=(0xF800, 0x07E0, 0x001F), name="t")
    preview = PreviewService().render(image)
    assert preview.mode == "RGBA"
    assert preview.size == (2, 2)
    assert preview.getpixel((0, 0)) == (255, 0, 0, 255)
    assert preview.getpixel((1, 0)) == (0, 255, 0, 255)
    assert preview.getpixel((0, 1)) == (0, 0, 255, 255)
    assert preview.getpixel((1, 1)) == (0, 0, 0, 0)


def test_render_single_row():
    image = ImageData(width=3, height=1, data=(0x0000, 0xFFFF, 0x0000), name="t")
    preview = PreviewService().render(image)
    assert preview.size == (3, 1)
    assert preview.getpixel((1, 0)) == (255, 255, 255, 255)
