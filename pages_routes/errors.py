from pathlib import Path


class RoutesAppError(Exception):
    """Base user-facing application error."""


class RoutesFileError(RoutesAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(RoutesFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing routes config file")


class MissingBuildOutputError(RoutesFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing build output directory")


class InvalidJsonFormatError(RoutesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidYamlFormatError(RoutesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(RoutesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
