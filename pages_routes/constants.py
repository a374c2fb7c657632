from typing import Final


ROUTES_FILENAME: Final[str] = "_routes.json"
ROUTES_VERSION: Final[int] = 1
ROUTES_DESCRIPTION: Final[str] = "Generated by pages-routes"

# Combined include + exclude rule count accepted by the platform.
MAX_RULES: Final[int] = 100
LIMITS_URL: Final[str] = (
    "https://developers.cloudflare.com/pages/platform/functions/routing/#limits"
)

CATCH_ALL_RULE: Final[str] = "/*"
DEFAULT_APP_DIR: Final[str] = "_app"

RESERVED_FILENAMES: Final[tuple[str, ...]] = (
    "_headers",
    "_redirects",
)

CONFIG_ROOT_KEY: Final[str] = "routes"
YAML_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")
