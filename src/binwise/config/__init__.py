from .loader import load_config_file, load_config_files, parse_value
from .settings import ENV_VAR, BinningSettings, load_settings

__all__ = [
	"BinningSettings",
	"ENV_VAR",
	"load_settings",
	"load_config_file",
	"load_config_files",
	"parse_value",
]
