import pytest

from ppm_codec import Color
from ppm_codec.image_config import ImageConfig


def write_config(tmp_path, text, name="image.yaml"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_defaults(tmp_path):
    config = ImageConfig(write_config(tmp_path, "width: 4\nheight: 3\n"))
    assert (config.width, config.height) == (4, 3)
    assert config.background == Color.WHITE
    assert config.shape == "circle"
    assert config.color == Color.CYAN
    assert config.output_path is None


def test_colors_by_name_and_list(tmp_path):
    config = ImageConfig(
        write_config(
            tmp_path,
            "width: 2\nheight: 2\nbackground: Black\ncolor: [10, 20, 30]\n",
        )
    )
    assert config.background == Color.BLACK
    assert config.color == Color(10, 20, 30)


def test_output_resolved_relative_to_yaml(tmp_path):
    config = ImageConfig(
        write_config(tmp_path, "width: 2\nheight: 2\noutput: out/image.ppm\n")
    )
    assert config.output_path == str(tmp_path / "out" / "image.ppm")


@pytest.mark.parametrize(
    "text",
    [
        "height: 2\n",
        "width: 0\nheight: 2\n",
        "width: 2\nheight: two\n",
        "width: true\nheight: 2\n",
        "width: 2\nheight: 2\nshape: square\n",
        "width: 2\nheight: 2\ncolor: teal\n",
        "width: 2\nheight: 2\ncolor: [1, 2]\n",
        "width: 2\nheight: 2\nbackground: [0, 0, 300]\n",
        "width: 2\nheight: 2\ncolor: [[1], 2, 3]\n",
        "width: 2\nheight: 2\ncolor: [1.5, 2, 3]\n",
        "width: 2\nheight: 2\ncolor: [true, 0, 0]\n",
        "width: 2\nheight: 2\noutput: 5\n",
        "width: [1, 2\nheight: 3\n",
        "- width\n- height\n",
    ],
)
def test_invalid_config(tmp_path, text):
    with pytest.raises(ValueError):
        ImageConfig(write_config(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageConfig(str(tmp_path / "missing.yaml"))


def test_render_without_shape(tmp_path):
    config = ImageConfig(
        write_config(tmp_path, "width: 3\nheight: 2\nshape: none\nbackground: red\n")
    )
    image = config.render()
    assert (image.width, image.height) == (3, 2)
    assert list(image.pixels()) == [Color.RED] * 6


def test_render_circle(tmp_path):
    config = ImageConfig(
        write_config(tmp_path, "width: 4\nheight: 4\ncolor: magenta\n")
    )
    image = config.render()
    assert image.get(2, 2) == Color.MAGENTA
    assert image.get(0, 0) == Color.WHITE
