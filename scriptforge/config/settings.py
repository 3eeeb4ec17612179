from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    project_root: str = "."
    assets_dir: str = "Assets"

    # Templates
    templates_dir_name: str = "ScriptTemplates"
    template_extension: str = ".fpst"
    default_extension: str = ".cs"

    # Host
    selected_path: Optional[str] = None
    editor_command: Optional[str] = None

    log_level: str = "INFO"

    chainlit_host: str = "127.0.0.1"
    chainlit_port: int = 8000

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
