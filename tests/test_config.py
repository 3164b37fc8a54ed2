from pathlib import Path

from hex2bmp.config import ACCEPTED_EXTENSIONS, AppConfig, load_config


def test_defaults():
    config = load_config({})
    assert config == AppConfig()
    assert config.download_name == "converted_image.bmp"
    assert ".h" in ACCEPTED_EXTENSIONS and ".hex" in ACCEPTED_EXTENSIONS
    assert config.example_path.name == "galaxy-spiral.h"
    assert config.example_path.is_file()


def test_environment_overrides(tmp_path):
    config = load_config(
        {
            "HEX2BMP_LOG_LEVEL": "debug",
            "HEX2BMP_APPEARANCE": "dark",
            "HEX2BMP_THEME": "green",
            "HEX2BMP_ASSETS_DIR": str(tmp_path),
        }
    )
    assert config.log_level == "DEBUG"
    assert config.appearance_mode == "dark"
    assert config.color_theme == "green"
    assert config.example_path == Path(tmp_path) / "galaxy-spiral.h"
