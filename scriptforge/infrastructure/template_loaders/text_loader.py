from pathlib import Path


class TemplateFileLoader:

    def __init__(self, extension: str = ".fpst"):
        self._extension = extension.lower()

    def supports(self, file_path: Path) -> bool:
        return file_path.is_file() and file_path.suffix.lower() == self._extension

    def load(self, file_path: Path) -> str:
        return file_path.read_text(encoding="utf-8")
